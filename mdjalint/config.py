"""設定ファイル (TOML) の読み込み。

pyproject.toml などの [tool.mdjalint] テーブルを読む。

    [tool.mdjalint]
    customDictionary = ".mdjalint-dict.yml"
    pattern = "*.md"
    sentenceLimit = 100
    commaLimit = 4
    minSeverity = "WARNING"
    jobs = 4
    spell = true
    spellThreshold = 85
"""
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict
import tomllib

from .readability import COMMA_LIMIT, SENTENCE_LIMIT
from .result import INFO, SEVERITY_ORDER
from .spellcheck import DEFAULT_THRESHOLD

# TOML のキー -> LintConfig の属性, 型
_KEYS: Dict[str, tuple[str, type]] = {
    "customDictionary": ("custom_dictionary", str),
    "pattern": ("pattern", str),
    "sentenceLimit": ("sentence_limit", int),
    "commaLimit": ("comma_limit", int),
    "minSeverity": ("min_severity", str),
    "jobs": ("jobs", int),
    "spell": ("spell", bool),
    "spellThreshold": ("spell_threshold", int),
}


@dataclass(frozen=True)
class LintConfig:
    custom_dictionary: str | None = None
    pattern: str = "*.md"
    sentence_limit: int = SENTENCE_LIMIT
    comma_limit: int = COMMA_LIMIT
    min_severity: str = INFO
    jobs: int = 1
    spell: bool = False
    spell_threshold: int = DEFAULT_THRESHOLD


def config_from_mapping(table: Dict[str, Any]) -> LintConfig:
    values: Dict[str, Any] = {}
    for key, (attr, typ) in _KEYS.items():
        if key not in table:
            continue
        if typ is bool and not isinstance(table[key], bool):
            raise ValueError(f"{key} は true/false で指定してください: {table[key]!r}")
        values[attr] = typ(table[key])
    if "min_severity" in values:
        values["min_severity"] = values["min_severity"].upper()
        if values["min_severity"] not in SEVERITY_ORDER:
            raise ValueError(f"minSeverity が不正です: {table['minSeverity']}")
    return LintConfig(**values)


def load_config(path: str | Path) -> LintConfig:
    """TOML を読み込む。ファイルの読み込み/解析エラーは呼び出し側へ送出する。"""
    with Path(path).open("rb") as f:
        cfg = tomllib.load(f)
    tool = cfg.get("tool", {})
    table = tool.get("mdjalint", {}) if isinstance(tool, dict) else {}
    if not isinstance(table, dict):
        raise ValueError("[tool.mdjalint] はテーブルである必要があります")
    return config_from_mapping(table)

__all__ = ["LintConfig", "load_config", "config_from_mapping"]
