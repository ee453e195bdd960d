from __future__ import annotations
"""
辞書語彙との類似度による英単語の誤記検出（簡易スペルチェック）
- rapidfuzz による類似度を用いて、辞書語彙に最も近い候補を提示
- オプション機能: 依存が未導入なら静かにスキップ

語彙になるもの:
- プレーンテキスト辞書の語（値が True）
- 値が配列の項目のキー
- 値が文字列の項目の値（正しい表記）
"""
from typing import Any, Iterator, List, Mapping
import re

from .result import INFO, LintResult, span_result

try:
    from rapidfuzz import process, fuzz  # type: ignore
    _RF_AVAILABLE = True
except ImportError:
    process = None  # type: ignore
    fuzz = None  # type: ignore
    _RF_AVAILABLE = False

DEFAULT_THRESHOLD = 85

_TOKEN_RE = re.compile(r"(?<![A-Za-z0-9_])[A-Za-z][A-Za-z0-9]{2,}(?![A-Za-z0-9_])")


def is_available() -> bool:
    return _RF_AVAILABLE


def build_vocabulary(dictionary: Mapping[str, Any]) -> List[str]:
    words: set[str] = set()
    for key, value in dictionary.items():
        if isinstance(value, str):
            words.add(value)
        else:
            words.add(key)
    return sorted(words)


def run_spellcheck(
    file_path: str,
    content: str,
    vocabulary: List[str],
    threshold: int = DEFAULT_THRESHOLD,
) -> Iterator[LintResult]:
    if not _RF_AVAILABLE or not vocabulary:
        return
    known = set(vocabulary)
    for m in _TOKEN_RE.finditer(content):
        token = m.group(0)
        # 完全一致はスキップ
        if token in known:
            continue
        cand = process.extractOne(token, vocabulary, scorer=fuzz.WRatio, score_cutoff=threshold)
        if not cand:
            continue
        best, _score, _ = cand
        yield span_result(
            file_path, content, m.start(), m.end(),
            f"「{token}」は辞書語「{best}」の誤記の可能性があります。", INFO,
            suggestions=[best], rule_id="SPELL_FUZZY",
        )

__all__ = ["is_available", "build_vocabulary", "run_spellcheck", "DEFAULT_THRESHOLD"]
