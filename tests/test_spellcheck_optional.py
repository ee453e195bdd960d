import importlib

import pytest

from mdjalint.spellcheck import build_vocabulary, run_spellcheck


def test_spellcheck_optional_importable():
    # rapidfuzz が無くてもインポートできること
    mod = importlib.import_module("mdjalint.spellcheck")
    assert isinstance(mod.is_available(), bool)


def test_build_vocabulary():
    vocab = build_vocabulary({"Terraform": True, "JavaScript": ["javascript"], "Javascrpt": "JavaScript"})
    assert vocab == ["JavaScript", "Terraform"]


def test_fuzzy_match():
    pytest.importorskip("rapidfuzz")
    results = list(run_spellcheck("a.md", "これはKubernetisです", ["Kubernetes"]))
    assert len(results) == 1
    assert results[0].rule_id == "SPELL_FUZZY"
    assert results[0].suggestions == ("Kubernetes",)
    assert (results[0].column, results[0].end_column) == (4, 14)


def test_exact_word_not_reported():
    pytest.importorskip("rapidfuzz")
    assert list(run_spellcheck("a.md", "Kubernetes を使う", ["Kubernetes"])) == []
