from mdjalint import typo_rules
from mdjalint.dictionary import Lexicon


def _by_rule(results, rule_id):
    return [r for r in results if r.rule_id == rule_id]


def test_detect_javascript_typo():
    results = _by_rule(typo_rules.check("a.md", "これはJavascriptの記事です。"), "TYPO_TECH_TERM")
    assert len(results) == 1
    r = results[0]
    assert r.severity == "WARNING"
    assert r.suggestions == ("JavaScript",)
    assert (r.line, r.column, r.end_line, r.end_column) == (1, 4, 1, 14)


def test_word_boundary():
    results = typo_rules.check("a.md", "Javascripting is fun")
    assert not _by_rule(results, "TYPO_TECH_TERM")


def test_every_occurrence_reported():
    results = _by_rule(typo_rules.check("a.md", "Github と Github"), "TYPO_TECH_TERM")
    assert [r.column for r in results] == [1, 10]
    assert all(r.suggestions == ("GitHub",) for r in results)


def test_position_on_later_line():
    results = _by_rule(typo_rules.check("a.md", "一行目\n\nGithubを使う"), "TYPO_TECH_TERM")
    assert [(r.line, r.column, r.end_column) for r in results] == [(3, 1, 7)]


def test_japanese_first_occurrence_only():
    results = _by_rule(typo_rules.check("a.md", "全て読む。全て書く。"), "TYPO_JAPANESE")
    assert len(results) == 1
    assert results[0].column == 1
    assert results[0].suggestions == ("すべて",)


def test_japanese_phrase_and_word_both_reported():
    results = _by_rule(typo_rules.check("a.md", "以下の通りです。"), "TYPO_JAPANESE")
    assert [r.suggestions[0] for r in results] == ["以下のとおりです。", "とおり"]


def test_long_vowel_run():
    results = _by_rule(typo_rules.check("a.md", "コーーヒー"), "TYPO_LONG_VOWEL")
    assert len(results) == 1
    assert results[0].severity == "INFO"
    assert results[0].end_line is None
    assert results[0].suggestions == ()
    assert not _by_rule(typo_rules.check("a.md", "コーヒー"), "TYPO_LONG_VOWEL")


def test_pass_order():
    results = typo_rules.check("a.md", "ログイーーン\nGithub\n全て")
    assert [r.rule_id for r in results] == ["TYPO_TECH_TERM", "TYPO_JAPANESE", "TYPO_LONG_VOWEL"]


def test_identity_and_non_string_entries_skipped():
    lexicon = Lexicon(tech_typos={"Redis": "Redis", "Foo": ["foo", "FOO"]})
    assert typo_rules.check("a.md", "Redis と Foo", lexicon=lexicon) == []
