"""読みやすさのチェック（行単位）。

各行について Markdown を剥がした文字列を作り、文の長さ・助詞の重なり・読点の
多用・全角半角の混在・スペースの入れ方を調べる。位置を特定できるもの
（長文・連続助詞・長音符）は実際の桁を、それ以外は行頭 (桁 1) を報告する。

コードフェンス (```) の行とその内側は対象外。
"""
from __future__ import annotations
import re
from typing import Iterator, List

from .markdown_extractor import extract_text, is_fence_line
from .result import INFO, LintResult
from .rules import PatternRule

SENTENCE_LIMIT: int = 120  # 1文の長さしきい値（文字数）
COMMA_LIMIT: int = 4       # 1行あたりの読点しきい値

PARTICLES = "がのをにへとでや"

_SENTENCE_END_RE = re.compile(r"[。！？]")

PARTICLE_RUN_RULE = PatternRule(
    pattern=re.compile(f"[{PARTICLES}]{{2,}}"),
    message="助詞が連続しています: 「{match}」",
    rule_id="READ_PARTICLE_RUN",
)
# 「が…が」「の…の」など、同じ助詞が1行に2回以上
DUPLICATE_PARTICLE_RULE = PatternRule(
    pattern=re.compile("|".join(f"{p}.*{p}" for p in PARTICLES)),
    message="同じ助詞が重複して使用されている可能性があります。",
    rule_id="READ_DUPLICATE_PARTICLE",
)
LONG_VOWEL_RULE = PatternRule(
    pattern=re.compile(r"[ァ-ヴ]ー{2,}"),
    message="カタカナ語の長音符が不適切な可能性があります: 「{match}」",
    rule_id="READ_LONG_VOWEL",
)
MIXED_WIDTH_RULE = PatternRule(
    pattern=re.compile(r"[０-９][0-9]|[0-9][０-９]|[Ａ-Ｚａ-ｚ][A-Za-z]|[A-Za-z][Ａ-Ｚａ-ｚ]"),
    message="半角と全角の文字が混在しています。統一することを推奨します。",
    rule_id="READ_MIXED_WIDTH",
)
PUNCT_SPACE_RULE = PatternRule(
    pattern=re.compile(r"[！？][^\s　]"),
    message="感嘆符・疑問符の後にはスペースを入れることを推奨します。",
    rule_id="READ_PUNCT_SPACE",
)
ALNUM_SPACE_RULE = PatternRule(
    pattern=re.compile(r"[ぁ-んァ-ヶ一-龠々][a-zA-Z0-9]|[a-zA-Z0-9][ぁ-んァ-ヶ一-龠々]"),
    message="日本語と英数字の間にはスペースを入れることを推奨します。",
    rule_id="READ_ALNUM_SPACE",
)

# 元の行を走査し、行頭 (桁 1) で報告する行単位ルール
_LINE_LEVEL_RULES = (MIXED_WIDTH_RULE, PUNCT_SPACE_RULE, ALNUM_SPACE_RULE)


def _result(file_path: str, line_number: int, column: int, message: str, rule_id: str | None) -> LintResult:
    return LintResult(
        file_path=file_path,
        line=line_number,
        column=column,
        message=message,
        severity=INFO,
        rule_id=rule_id,
    )


def iter_prose_lines(content: str) -> Iterator[tuple[int, str]]:
    """(行番号, 行) を返す。コードフェンスとその内側の行は除く。"""
    in_code = False
    for index, line in enumerate(content.split("\n")):
        if is_fence_line(line):
            # 1行で閉じるフェンス (```x```) は状態を変えない
            if line.count("```") == 1:
                in_code = not in_code
            continue
        if not in_code:
            yield index + 1, line


def check_sentences(file_path: str, line_number: int, line: str, text: str, limit: int = SENTENCE_LIMIT) -> List[LintResult]:
    results: List[LintResult] = []
    for sentence in _SENTENCE_END_RE.split(text):
        if not sentence.strip() or len(sentence) <= limit:
            continue
        # 記法を剥がした文が元の行に見つからない場合は行頭
        start = max(line.find(sentence), 0)
        results.append(_result(
            file_path, line_number, start + 1,
            f"一文が長すぎます。現在{len(sentence)}文字です。{limit}文字以下を推奨します。",
            "READ_LONG_SENTENCE",
        ))
    return results


def check_line(
    file_path: str,
    line_number: int,
    line: str,
    sentence_limit: int = SENTENCE_LIMIT,
    comma_limit: int = COMMA_LIMIT,
) -> List[LintResult]:
    text = extract_text(line)
    if not text.strip():
        return []
    results = check_sentences(file_path, line_number, line, text, sentence_limit)

    for start, _end, run in PARTICLE_RUN_RULE.spans(line):
        results.append(_result(file_path, line_number, start + 1, PARTICLE_RUN_RULE.describe(run), PARTICLE_RUN_RULE.rule_id))

    if DUPLICATE_PARTICLE_RULE.first(text):
        results.append(_result(file_path, line_number, 1, DUPLICATE_PARTICLE_RULE.message, DUPLICATE_PARTICLE_RULE.rule_id))

    comma_count = line.count("、")
    if comma_count > comma_limit:
        results.append(_result(
            file_path, line_number, 1,
            f"読点が多すぎます。現在{comma_count}個です。文を分割することを検討してください。",
            "READ_COMMA_MANY",
        ))

    for start, _end, matched in LONG_VOWEL_RULE.spans(line):
        results.append(_result(file_path, line_number, start + 1, LONG_VOWEL_RULE.describe(matched), LONG_VOWEL_RULE.rule_id))

    for rule in _LINE_LEVEL_RULES:
        if rule.first(line):
            results.append(_result(file_path, line_number, 1, rule.message, rule.rule_id))
    return results


def check(
    file_path: str,
    content: str,
    sentence_limit: int = SENTENCE_LIMIT,
    comma_limit: int = COMMA_LIMIT,
) -> List[LintResult]:
    results: List[LintResult] = []
    for line_number, line in iter_prose_lines(content):
        results.extend(check_line(file_path, line_number, line, sentence_limit, comma_limit))
    return results

__all__ = [
    "check",
    "check_line",
    "check_sentences",
    "iter_prose_lines",
    "SENTENCE_LIMIT",
    "COMMA_LIMIT",
    "PARTICLES",
]
