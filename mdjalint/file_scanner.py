"""校閲対象ファイルの走査と読み込み。

- 明示されたファイルはそのまま返す（存在確認は読み込み側で行う）。
- ディレクトリは再帰的に走査し、パターンに一致するファイルのみ返す。
- バイナリらしいものは読み込み時に除外(ヒューリスティック)。
"""
from __future__ import annotations
import fnmatch
import os
from pathlib import Path
from typing import Iterable, Iterator

BINARY_BYTES = set(range(0, 9)) | {11, 12} | set(range(14, 32))
ENCODING_CANDIDATES = ("utf-8", "utf-8-sig", "cp932", "shift_jis")
# BOM なしの utf-16 は Shift_JIS のバイト列も通してしまうため BOM がある場合のみ
_UTF16_BOMS = (b"\xff\xfe", b"\xfe\xff")
IGNORED_DIRS = frozenset({"node_modules", ".git", "dist"})


def is_probably_text(data: bytes, threshold: float = 0.30) -> bool:
    if not data:
        return True
    non_text = sum(b in BINARY_BYTES for b in data)
    return non_text / len(data) < threshold


def decode_bytes(raw: bytes, encoding_candidates=ENCODING_CANDIDATES) -> str | None:
    if raw.startswith(_UTF16_BOMS):
        encoding_candidates = ("utf-16",)
    for enc in encoding_candidates:
        try:
            text = raw.decode(enc)
        except UnicodeDecodeError:
            continue
        return text.lstrip("\ufeff")
    return None


def read_text(path: Path) -> str | None:
    try:
        raw = path.read_bytes()
    except OSError:
        return None
    if not is_probably_text(raw):
        return None
    return decode_bytes(raw)


def iter_files(paths: Iterable[str | os.PathLike[str]], pattern: str = "*.md") -> Iterator[Path]:
    for p in paths:
        path = Path(p)
        if not path.is_dir():
            yield path
            continue
        for root, dirs, files in os.walk(path):
            dirs[:] = sorted(d for d in dirs if d not in IGNORED_DIRS)
            for f in sorted(files):
                if fnmatch.fnmatch(f, pattern):
                    yield Path(root) / f

__all__ = ["iter_files", "read_text", "decode_bytes", "is_probably_text"]
