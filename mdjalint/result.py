from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Tuple

from .position import position_of

INFO = "INFO"
WARNING = "WARNING"
ERROR = "ERROR"

SEVERITY_ORDER: Dict[str, int] = {INFO: 0, WARNING: 1, ERROR: 2}


@dataclass(frozen=True)
class LintResult:
    """1件の指摘。end_line/end_column は範囲を持たない指摘では None。"""
    file_path: str
    line: int
    column: int
    message: str
    severity: str = WARNING
    end_line: int | None = None
    end_column: int | None = None
    suggestions: Tuple[str, ...] = ()
    rule_id: str | None = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "file_path": self.file_path,
            "line": self.line,
            "column": self.column,
            "end_line": self.end_line,
            "end_column": self.end_column,
            "message": self.message,
            "severity": self.severity,
            "suggestions": list(self.suggestions),
            "rule_id": self.rule_id,
        }


def span_result(
    file_path: str,
    buffer: str,
    start: int,
    end: int,
    message: str,
    severity: str,
    suggestions: Iterable[str] = (),
    rule_id: str | None = None,
) -> LintResult:
    """buffer 上の [start, end) を範囲とする指摘を作る。"""
    begin = position_of(buffer, start)
    finish = position_of(buffer, end)
    return LintResult(
        file_path=file_path,
        line=begin.line,
        column=begin.column,
        message=message,
        severity=severity,
        end_line=finish.line,
        end_column=finish.column,
        suggestions=tuple(suggestions),
        rule_id=rule_id,
    )


def point_result(
    file_path: str,
    buffer: str,
    start: int,
    message: str,
    severity: str = INFO,
    rule_id: str | None = None,
) -> LintResult:
    pos = position_of(buffer, start)
    return LintResult(
        file_path=file_path,
        line=pos.line,
        column=pos.column,
        message=message,
        severity=severity,
        rule_id=rule_id,
    )

__all__ = ["LintResult", "span_result", "point_result", "INFO", "WARNING", "ERROR", "SEVERITY_ORDER"]
