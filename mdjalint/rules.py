"""正規表現ベースのルール定義。

各ルールは「コンパイル済みパターン + メッセージ + 重大度 (+ 置換候補)」の組で、
ファイルをまたいで状態を持たない。
"""
from __future__ import annotations
from dataclasses import dataclass
import re
from typing import Iterator, Optional, Pattern, Tuple

from .result import INFO

Span = Tuple[int, int, str]

# 英単語の境界（日本語の文字は境界として扱う）
_WORD_BEFORE = r"(?<![A-Za-z0-9_])"
_WORD_AFTER = r"(?![A-Za-z0-9_])"


def word_pattern(term: str, flags: int = 0) -> Pattern[str]:
    """term を英単語境界つきで完全一致させるパターン。"""
    return re.compile(_WORD_BEFORE + re.escape(term) + _WORD_AFTER, flags)


@dataclass(frozen=True)
class PatternRule:
    pattern: Pattern[str]
    message: str  # "{match}" を含むテンプレート可
    severity: str = INFO
    suggestion: str | None = None
    rule_id: str | None = None

    def spans(self, text: str) -> Iterator[Span]:
        """走査順 (左→右) に (start, end, match) を返す。呼ぶたびに先頭から。"""
        for m in self.pattern.finditer(text):
            yield m.start(), m.end(), m.group(0)

    def first(self, text: str) -> Optional[Span]:
        return next(self.spans(text), None)

    def describe(self, matched: str, **extra) -> str:
        return self.message.format(match=matched, **extra)

__all__ = ["PatternRule", "Span", "word_pattern"]
