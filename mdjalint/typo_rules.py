"""技術用語・日本語表記の誤記チェック。

Markdown を剥がした文字列ではオフセットが崩れるため、常に元の内容を走査する。

走査順:
1. 技術用語の誤記（英単語境界で一致、全件）
2. 日本語の表記（各語について最初の 1 件のみ）
3. カタカナ語の長音符の連続
"""
from __future__ import annotations
import re
from typing import Any, Iterator, List, Mapping, Tuple

from .dictionary import Lexicon
from .result import INFO, WARNING, LintResult, point_result, span_result
from .rules import PatternRule, word_pattern

LONG_VOWEL_RULE = PatternRule(
    pattern=re.compile(r"[ァ-ヴ]ー{2,}"),
    message="長音符が連続しています: 「{match}」",
    severity=INFO,
    rule_id="TYPO_LONG_VOWEL",
)

_DEFAULT_LEXICON = Lexicon()


def iter_corrections(entries: Mapping[str, Any]) -> Iterator[Tuple[str, str]]:
    """(誤, 正) の組を返す。文字列以外の値と、誤と正が同一の項目は飛ばす。"""
    for incorrect, correct in entries.items():
        if not isinstance(correct, str) or not incorrect or incorrect == correct:
            continue
        yield incorrect, correct


def term_rules(entries: Mapping[str, Any], rule_id: str) -> Iterator[PatternRule]:
    for incorrect, correct in iter_corrections(entries):
        yield PatternRule(
            pattern=word_pattern(incorrect),
            message=f"「{incorrect}」は「{correct}」の誤記の可能性があります。",
            severity=WARNING,
            suggestion=correct,
            rule_id=rule_id,
        )


def check_terms(file_path: str, content: str, entries: Mapping[str, Any], rule_id: str) -> List[LintResult]:
    results: List[LintResult] = []
    for rule in term_rules(entries, rule_id):
        for start, end, _ in rule.spans(content):
            results.append(span_result(
                file_path, content, start, end, rule.message, rule.severity,
                suggestions=[rule.suggestion], rule_id=rule.rule_id,
            ))
    return results


def check_japanese(file_path: str, content: str, entries: Mapping[str, Any]) -> List[LintResult]:
    results: List[LintResult] = []
    for typo, correct in iter_corrections(entries):
        # 語ごとに最初の出現のみ
        index = content.find(typo)
        if index < 0:
            continue
        results.append(span_result(
            file_path, content, index, index + len(typo),
            f"「{typo}」は「{correct}」を推奨します。", WARNING,
            suggestions=[correct], rule_id="TYPO_JAPANESE",
        ))
    return results


def check_long_vowels(file_path: str, content: str, rule: PatternRule = LONG_VOWEL_RULE) -> List[LintResult]:
    return [
        point_result(file_path, content, start, rule.describe(matched), rule.severity, rule.rule_id)
        for start, _end, matched in rule.spans(content)
    ]


def check(file_path: str, content: str, lexicon: Lexicon | None = None) -> List[LintResult]:
    lexicon = lexicon or _DEFAULT_LEXICON
    results = check_terms(file_path, content, lexicon.tech_typos, "TYPO_TECH_TERM")
    results.extend(check_japanese(file_path, content, lexicon.japanese_typos))
    results.extend(check_long_vowels(file_path, content))
    return results

__all__ = ["check", "check_terms", "check_japanese", "check_long_vowels", "iter_corrections", "LONG_VOWEL_RULE"]
