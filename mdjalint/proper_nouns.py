"""固有名詞の表記ゆれチェック。

組込みの固有名詞辞書にカスタム辞書を重ね（同じキーはカスタム優先）、
その後で複数語からなる技術用語の表記を確認する。
"""
from __future__ import annotations
import re
from pathlib import Path
from typing import List, Set, Tuple

from .dictionary import Lexicon, build_lexicon
from .result import INFO, LintResult, span_result
from .rules import PatternRule
from .typo_rules import check_terms

_SPACE = r"[ \t　]"

TECH_PHRASE_RULES: Tuple[PatternRule, ...] = (
    PatternRule(
        pattern=re.compile(r"(?<![A-Za-z0-9_])API" + _SPACE + r"+キー"),
        message="APIキーは一語で表記することを推奨します。",
        severity=INFO,
        suggestion="APIキー",
        rule_id="TECH_PHRASE",
    ),
    PatternRule(
        pattern=re.compile(r"(?<![A-Za-z0-9_])WEB" + _SPACE + r"*API(?![A-Za-z0-9_])"),
        message="Web APIの表記を推奨します。",
        severity=INFO,
        suggestion="Web API",
        rule_id="TECH_PHRASE",
    ),
    PatternRule(
        pattern=re.compile(r"(?<![A-Za-z0-9_])web" + _SPACE + r"*api(?![A-Za-z0-9_])", re.IGNORECASE),
        message="Web APIの表記を推奨します。",
        severity=INFO,
        suggestion="Web API",
        rule_id="TECH_PHRASE",
    ),
)


def check_phrases(file_path: str, content: str, rules: Tuple[PatternRule, ...] = TECH_PHRASE_RULES) -> List[LintResult]:
    results: List[LintResult] = []
    seen: Set[Tuple[int, int]] = set()
    for rule in rules:
        for start, end, matched in rule.spans(content):
            # 既に正しい表記、または前のルールで指摘済みの範囲は飛ばす
            if matched == rule.suggestion or (start, end) in seen:
                continue
            seen.add((start, end))
            results.append(span_result(
                file_path, content, start, end, rule.message, rule.severity,
                suggestions=[rule.suggestion], rule_id=rule.rule_id,
            ))
    return results


def check(
    file_path: str,
    content: str,
    custom_dictionary_path: str | Path | None = None,
    lexicon: Lexicon | None = None,
) -> List[LintResult]:
    if lexicon is None:
        lexicon = build_lexicon(custom_dictionary_path)
    results = check_terms(file_path, content, lexicon.proper_noun_entries(), "PROPER_NOUN")
    results.extend(check_phrases(file_path, content))
    return results

__all__ = ["check", "check_phrases", "TECH_PHRASE_RULES"]
