"""Markdown から解析用のプレーンテキストを取り出す。

構文木は作らず、誤検出を避けるのに必要な分だけ記法を剥がす。
表・引用・生HTML はそのまま残る。

注意: 変換後の文字列は元文書とオフセットが一致しない。正確な位置が必要な
チェックは元の内容を直接走査すること。行の区切りはコードフェンス除去以外で
変化しないため、行単位のチェックには利用できる。
"""
from __future__ import annotations
import re
from typing import List, Pattern, Tuple

_CODE_FENCE_RE = re.compile(r"```.*?```", re.DOTALL)
_INLINE_CODE_RE = re.compile(r"`[^`]+`")
_LINK_RE = re.compile(r"(?<!!)\[([^\]]+)\]\([^)]+\)")
_IMAGE_RE = re.compile(r"!\[([^\]]*)\]\([^)]+\)")
_HEADING_RE = re.compile(r"^#+[ \t]*", re.MULTILINE)
_BULLET_RE = re.compile(r"^[ \t]*[-*+][ \t]+", re.MULTILINE)
_ORDERED_RE = re.compile(r"^[ \t]*\d+\.[ \t]+", re.MULTILINE)
_BOLD_RE = re.compile(r"\*\*([^*]+)\*\*")
_ITALIC_RE = re.compile(r"\*([^*]+)\*")
_STRIKE_RE = re.compile(r"~~([^~]+)~~")

# 適用順が意味を持つ（前段の結果に対して次段を適用）
_STEPS: List[Tuple[Pattern[str], str]] = [
    (_CODE_FENCE_RE, ""),
    (_INLINE_CODE_RE, ""),
    (_LINK_RE, r"\1"),
    (_IMAGE_RE, r"\1"),
    (_HEADING_RE, ""),
    (_BULLET_RE, ""),
    (_ORDERED_RE, ""),
    (_BOLD_RE, r"\1"),
    (_ITALIC_RE, r"\1"),
    (_STRIKE_RE, r"\1"),
]


def extract_text(markdown: str) -> str:
    text = markdown
    for pattern, repl in _STEPS:
        text = pattern.sub(repl, text)
    return text.strip()


def is_fence_line(line: str) -> bool:
    return line.strip().startswith("```")

__all__ = ["extract_text", "is_fence_line"]
