from mdjalint import lint_file, lint_files, lint_text
from mdjalint.config import LintConfig

SAMPLE = """# テスト記事

これはJavascriptの記事です。Githubで公開しています。

APIキーを設定します。WEB APIを利用します。

以下の通りです。全てのファイルを確認します。

日本語とEnglishが混在している文章です。
"""


def test_detect_typos_and_style_issues():
    results = lint_text(SAMPLE, file_path="sample.md")
    assert results
    assert any("Javascript" in r.message or "Github" in r.message for r in results)
    assert any("長すぎ" in r.message or "スペース" in r.message for r in results)
    assert all(r.line >= 1 and r.column >= 1 for r in results)
    assert all(r.file_path == "sample.md" for r in results)


def test_checker_order():
    results = lint_text("Githubで公開")
    assert [r.rule_id for r in results] == ["TYPO_TECH_TERM", "PROPER_NOUN", "READ_ALNUM_SPACE"]


def test_missing_and_empty_files(tmp_path):
    empty = tmp_path / "empty.md"
    empty.write_text("", encoding="utf-8")
    blank = tmp_path / "blank.md"
    blank.write_text("  \n\n", encoding="utf-8")
    assert lint_files([str(tmp_path / "non-existent-file.md")]) == []
    assert lint_files([str(empty)]) == []
    assert lint_files([str(blank)]) == []
    assert lint_file(tmp_path / "non-existent-file.md") == []


def test_no_files():
    assert lint_files([]) == []


def test_custom_dictionary(tmp_path):
    doc = tmp_path / "doc.md"
    doc.write_text("Kubernetis を使います。", encoding="utf-8")
    d = tmp_path / "dict.json"
    d.write_text('{"Kubernetis": "Kubernetes"}', encoding="utf-8")
    results = lint_files([str(doc)], custom_dictionary_path=str(d))
    assert any(r.suggestions == ("Kubernetes",) for r in results)


def test_parallel_keeps_file_order(tmp_path):
    paths = []
    for i, body in enumerate(["Githubを使う", "Javascriptで書く", "東京での会議"]):
        p = tmp_path / f"{i}.md"
        p.write_text(body, encoding="utf-8")
        paths.append(str(p))
    serial = lint_files(paths)
    parallel = lint_files(paths, config=LintConfig(jobs=3))
    assert [r.to_dict() for r in parallel] == [r.to_dict() for r in serial]
    # ファイルごとの結果が連続していること
    order = [r.file_path for r in parallel]
    assert order == sorted(order, key=paths.index)


def test_config_thresholds():
    content = "あ、" * 5 + "あ"
    assert lint_text(content, config=LintConfig(comma_limit=10)) == []
    results = lint_text("あ" * 50, config=LintConfig(sentence_limit=40))
    assert [r.rule_id for r in results] == ["READ_LONG_SENTENCE"]


def test_cp932_file(tmp_path):
    path = tmp_path / "sjis.md"
    path.write_bytes("既に完了です".encode("cp932"))
    results = [r for r in lint_file(path) if r.rule_id == "TYPO_JAPANESE"]
    assert [r.suggestions for r in results] == [("すでに",)]
