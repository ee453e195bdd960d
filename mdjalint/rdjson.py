"""reviewdog の rdjsonl 形式への変換。

1 指摘 = 1 行の JSON。end_line/end_column の両方がある指摘のみ範囲の終端を出す。
"""
from __future__ import annotations
import json
from typing import Any, Dict, Iterable

from .result import ERROR, INFO, WARNING, LintResult

# 内部の重大度 -> reviewdog の重大度
SEVERITY_MAP: Dict[str, str] = {
    INFO: "INFO",
    WARNING: "WARNING",
    ERROR: "ERROR",
}


def to_rdjson(result: LintResult) -> Dict[str, Any]:
    start = {"line": result.line, "column": result.column}
    diag: Dict[str, Any] = {
        "message": result.message,
        "location": {
            "path": result.file_path,
            "range": {"start": start},
        },
        "severity": SEVERITY_MAP.get(result.severity, "WARNING"),
    }
    if result.end_line and result.end_column:
        diag["location"]["range"]["end"] = {"line": result.end_line, "column": result.end_column}
    if result.rule_id:
        diag["code"] = {"value": result.rule_id}
    if result.suggestions:
        end = {
            "line": result.end_line or result.line,
            "column": result.end_column or result.column,
        }
        diag["suggestions"] = [
            {"range": {"start": dict(start), "end": dict(end)}, "text": text}
            for text in result.suggestions
        ]
    return diag


def format_rdjsonl(results: Iterable[LintResult]) -> str:
    return "\n".join(json.dumps(to_rdjson(r), ensure_ascii=False) for r in results)

__all__ = ["to_rdjson", "format_rdjsonl", "SEVERITY_MAP"]
