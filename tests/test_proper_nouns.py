from mdjalint import proper_nouns


def _by_rule(results, rule_id):
    return [r for r in results if r.rule_id == rule_id]


def test_detect_github():
    results = _by_rule(proper_nouns.check("a.md", "Githubで公開しています。"), "PROPER_NOUN")
    assert len(results) == 1
    assert results[0].severity == "WARNING"
    assert results[0].suggestions == ("GitHub",)


def test_spaced_api_key():
    results = _by_rule(proper_nouns.check("a.md", "API キーを設定します。"), "TECH_PHRASE")
    assert len(results) == 1
    r = results[0]
    assert r.severity == "INFO"
    assert r.suggestions == ("APIキー",)
    assert (r.line, r.column, r.end_line, r.end_column) == (1, 1, 1, 7)


def test_joined_api_key_not_reported():
    assert not _by_rule(proper_nouns.check("a.md", "APIキーを設定します。"), "TECH_PHRASE")


def test_web_api_reported_once():
    results = _by_rule(proper_nouns.check("a.md", "WEB APIを利用します。"), "TECH_PHRASE")
    assert len(results) == 1
    assert results[0].suggestions == ("Web API",)


def test_canonical_web_api_not_reported():
    results = _by_rule(proper_nouns.check("a.md", "webapi と Web API"), "TECH_PHRASE")
    assert [r.column for r in results] == [1]


def test_custom_dictionary(tmp_path):
    path = tmp_path / "dict.yml"
    path.write_text("Kubernetis: Kubernetes\nGithub:\n  - github\n", encoding="utf-8")
    results = _by_rule(
        proper_nouns.check("a.md", "Kubernetis と Github", custom_dictionary_path=str(path)),
        "PROPER_NOUN",
    )
    # 配列値で上書きされた Github は指摘対象外
    assert [r.suggestions for r in results] == [("Kubernetes",)]


def test_dictionary_terms_before_phrases():
    results = proper_nouns.check("a.md", "API キーを github で管理")
    assert [r.rule_id for r in results] == ["PROPER_NOUN", "TECH_PHRASE"]
