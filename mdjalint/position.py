"""文字オフセットから 1 始まりの (行, 桁) への変換。"""
from __future__ import annotations
from typing import NamedTuple


class Position(NamedTuple):
    line: int
    column: int


def position_of(buffer: str, offset: int) -> Position:
    """buffer[offset] の位置を 1-based の (line, column) で返す。

    offset は 0 <= offset <= len(buffer) を呼び出し側で保証すること。
    """
    # 行番号 = 先頭〜offset までの改行数 + 1
    line = buffer.count("\n", 0, offset) + 1
    last_nl = buffer.rfind("\n", 0, offset)
    return Position(line, offset - last_nl)

__all__ = ["Position", "position_of"]
