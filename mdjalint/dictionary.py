"""誤記辞書の読み込みと組込み辞書。

辞書は「誤った表記 -> 正しい表記」の対応。値は文字列のほか、YAML/JSON では
配列（許容される表記の列挙）も取りうる。プレーンテキストは 1 行 1 語で、
各語は True（登録済みの印）に対応づける。

YAML:
---
Javascrpt: JavaScript
JavaScript:
  - javascript
  - Javascript

JSON: 上記と同じ構造のオブジェクト。
"""
from __future__ import annotations
from dataclasses import dataclass, field
import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping

import yaml

from .file_scanner import decode_bytes

logger = logging.getLogger(__name__)

Dictionary = Dict[str, Any]

_YAML_SUFFIXES = {".yml", ".yaml"}
_JSON_SUFFIXES = {".json"}

# 技術用語の誤記
BUILTIN_TECH_TYPOS: Mapping[str, str] = MappingProxyType({
    "Javascript": "JavaScript",
    "javascript": "JavaScript",
    "Github": "GitHub",
    "github": "GitHub",
    "Nodejs": "Node.js",
    "nodejs": "Node.js",
    "Reactjs": "React.js",
    "reactjs": "React.js",
    "Vuejs": "Vue.js",
    "vuejs": "Vue.js",
    "Typescript": "TypeScript",
    "typescript": "TypeScript",
    "Html": "HTML",
    "Css": "CSS",
    "Api": "API",
    "Url": "URL",
    "Json": "JSON",
    "Xml": "XML",
    "Sql": "SQL",
    "Aws": "AWS",
    "Gcp": "GCP",
    "Ios": "iOS",
    "Macos": "macOS",
    "Mysql": "MySQL",
    "Postgresql": "PostgreSQL",
    "Webpack": "webpack",
    "Eslint": "ESLint",
})

# よくある日本語の表記（ひらがな推奨など）
BUILTIN_JAPANESE_TYPOS: Mapping[str, str] = MappingProxyType({
    "以下の通りです。": "以下のとおりです。",
    "通り": "とおり",
    "既に": "すでに",
    "全て": "すべて",
    "更に": "さらに",
    "殆ど": "ほとんど",
    "何故": "なぜ",
    "何処": "どこ",
    "何時": "いつ",
    "其の": "その",
    "此の": "この",
    "彼の": "あの",
})

# 固有名詞の表記ゆれ
BUILTIN_PROPER_NOUNS: Mapping[str, str] = MappingProxyType({
    "github": "GitHub",
    "Github": "GitHub",
    "javascript": "JavaScript",
    "Javascript": "JavaScript",
    "typescript": "TypeScript",
    "Typescript": "TypeScript",
    "nodejs": "Node.js",
    "Nodejs": "Node.js",
    "reactjs": "React.js",
    "Reactjs": "React.js",
    "vuejs": "Vue.js",
    "Vuejs": "Vue.js",
    "Webpack": "webpack",
    "eslint": "ESLint",
    "Eslint": "ESLint",
    "aws": "AWS",
    "Aws": "AWS",
    "gcp": "GCP",
    "Gcp": "GCP",
    "mysql": "MySQL",
    "Mysql": "MySQL",
    "postgresql": "PostgreSQL",
    "Postgresql": "PostgreSQL",
    "redis": "Redis",
    "docker": "Docker",
    "kubernetes": "Kubernetes",
    "ios": "iOS",
    "Ios": "iOS",
    "macos": "macOS",
    "Macos": "macOS",
    "MacOS": "macOS",
})


def _parse(path: Path, text: str) -> Dictionary:
    suffix = path.suffix.lower()
    if suffix in _YAML_SUFFIXES:
        data = yaml.safe_load(text)
    elif suffix in _JSON_SUFFIXES:
        data = json.loads(text)
    else:
        # プレーンテキスト: 1行1語
        return {line.strip(): True for line in text.splitlines() if line.strip()}
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError("辞書ファイルはキーと値の対応である必要があります")
    return {str(k): v for k, v in data.items()}


def load_dictionary(path: str | Path | None) -> Dictionary:
    """カスタム辞書を読み込む。失敗しても例外は投げず空の辞書を返す。"""
    if not path:
        return {}
    p = Path(path)
    if not p.is_file():
        return {}
    try:
        text = decode_bytes(p.read_bytes())
        if text is None:
            raise UnicodeError("対応するエンコーディングで読み込めません")
        return _parse(p, text)
    except (OSError, UnicodeError, ValueError, yaml.YAMLError) as e:
        logger.warning("辞書ファイルの読み込みに失敗しました: %s (%s)", p, e)
        return {}


def merge_dictionaries(*dicts: Mapping[str, Any]) -> Dictionary:
    """後に渡した辞書ほど優先される。"""
    merged: Dictionary = {}
    for d in dicts:
        merged.update(d)
    return merged


@dataclass(frozen=True)
class Lexicon:
    """チェッカーに明示的に渡す辞書一式。起動時に一度だけ組み立てる。"""
    tech_typos: Mapping[str, Any] = field(default_factory=lambda: BUILTIN_TECH_TYPOS)
    japanese_typos: Mapping[str, Any] = field(default_factory=lambda: BUILTIN_JAPANESE_TYPOS)
    proper_nouns: Mapping[str, Any] = field(default_factory=lambda: BUILTIN_PROPER_NOUNS)
    custom: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    def proper_noun_entries(self) -> Dictionary:
        return merge_dictionaries(self.proper_nouns, self.custom)


def build_lexicon(custom_dictionary_path: str | Path | None = None) -> Lexicon:
    custom = load_dictionary(custom_dictionary_path)
    if custom:
        logger.info("カスタム辞書を読み込みました: %s (%d 件)", custom_dictionary_path, len(custom))
    return Lexicon(custom=MappingProxyType(custom))

__all__ = [
    "BUILTIN_TECH_TYPOS",
    "BUILTIN_JAPANESE_TYPOS",
    "BUILTIN_PROPER_NOUNS",
    "Dictionary",
    "Lexicon",
    "build_lexicon",
    "load_dictionary",
    "merge_dictionaries",
]
