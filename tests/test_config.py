import pytest

from mdjalint.config import LintConfig, config_from_mapping


def test_config_from_mapping():
    config = config_from_mapping({"spell": True, "commaLimit": 6, "minSeverity": "warning"})
    assert config == LintConfig(spell=True, comma_limit=6, min_severity="WARNING")


def test_spell_must_be_boolean():
    with pytest.raises(ValueError):
        config_from_mapping({"spell": "false"})


def test_unknown_severity():
    with pytest.raises(ValueError):
        config_from_mapping({"minSeverity": "FATAL"})
