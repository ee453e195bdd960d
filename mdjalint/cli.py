from __future__ import annotations
import argparse
import dataclasses
import json
import logging
import sys
import tomllib
from typing import Any, Dict, List

from .checker import lint_files
from .config import LintConfig, load_config
from .file_scanner import iter_files
from .rdjson import format_rdjsonl
from .result import SEVERITY_ORDER, LintResult
from .spellcheck import is_available as spell_available

# CLI 引数名 -> LintConfig の属性（未指定 None の場合は設定ファイルの値を使う）
_OVERRIDES = {
    "dict_file": "custom_dictionary",
    "pattern": "pattern",
    "sentence_limit": "sentence_limit",
    "comma_limit": "comma_limit",
    "min_severity": "min_severity",
    "jobs": "jobs",
    "spell": "spell",
    "spell_threshold": "spell_threshold",
}


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="mdjalint",
        description="日本語Markdownの誤記・表記ゆれ・読みやすさを校閲します"
    )
    p.add_argument("paths", nargs="+", help="校閲するファイル/ディレクトリ")
    p.add_argument("--config", help="設定ファイル(TOML: pyproject.toml など)の [tool.mdjalint] を読み込む")
    p.add_argument("--dict", dest="dict_file", metavar="FILE", help="カスタム辞書(YAML/JSON/1行1語のテキスト)")
    p.add_argument("--pattern", help="ディレクトリ走査時のファイル名パターン (既定: *.md)")
    out = p.add_mutually_exclusive_group()
    out.add_argument("--json", action="store_true", help="JSONで出力")
    out.add_argument("--rdjson", action="store_true", help="reviewdog の rdjsonl 形式で出力")
    p.add_argument("--min-severity", choices=list(SEVERITY_ORDER), help="この重大度未満を非表示にします (既定: INFO)")
    p.add_argument("--jobs", type=int, help="並列実行のワーカー数")
    p.add_argument("--sentence-limit", type=int, help="長文判定の閾値(文字数) (既定: 120)")
    p.add_argument("--comma-limit", type=int, help="1行あたりの読点数の閾値 (既定: 4)")
    p.add_argument("--spell", action="store_true", default=None, help="カスタム辞書の語彙に近い英単語を指摘(要: rapidfuzz)")
    p.add_argument("--spell-threshold", type=int, help="類似度の閾値 0-100 (既定: 85)")
    p.add_argument("--fail-on-issue", action="store_true", help="問題が1件でもあれば終了コード1")
    p.add_argument("-v", "--verbose", action="store_true", help="処理の経過を表示")
    return p


def resolve_config(args: argparse.Namespace) -> LintConfig:
    config = LintConfig()
    if args.config:
        try:
            config = load_config(args.config)
        except (OSError, tomllib.TOMLDecodeError, ValueError, TypeError) as e:
            print(f"[warn] failed to load config {args.config}: {e}", file=sys.stderr)
    overrides: Dict[str, Any] = {
        attr: getattr(args, name)
        for name, attr in _OVERRIDES.items()
        if getattr(args, name) is not None
    }
    return dataclasses.replace(config, **overrides)


def format_text(issues: List[LintResult]) -> str:
    if not issues:
        return "No issues found."
    lines = []
    for i in issues:
        # file:line:col 形式（エディタでクリック可能）
        base_msg = f"{i.file_path}:{i.line}:{i.column}: [{i.severity}] {i.message}"
        extra = []
        if i.suggestions:
            extra.append(f"suggest: {', '.join(i.suggestions)}")
        if i.rule_id:
            extra.append(f"rule: {i.rule_id}")
        if extra:
            base_msg += " | " + " | ".join(extra)
        lines.append(base_msg)
    lines.append(f"Total: {len(issues)} issue(s)")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="[%(levelname)s] %(message)s",
        stream=sys.stderr,
    )
    config = resolve_config(args)
    if config.spell and not spell_available():
        print("[warn] --spell が指定されましたが 'rapidfuzz' が見つかりません。スペルチェックはスキップします。", file=sys.stderr)
    if config.spell and not config.custom_dictionary:
        print("[warn] --spell には --dict で辞書ファイルを指定してください。スペルチェックはスキップします。", file=sys.stderr)

    files = list(iter_files(args.paths, pattern=config.pattern))
    issues = lint_files(files, config=config)

    # 重大度フィルタ
    minsev = SEVERITY_ORDER.get(config.min_severity, 0)
    issues = [i for i in issues if SEVERITY_ORDER.get(i.severity, 1) >= minsev]

    if args.json:
        print(json.dumps([i.to_dict() for i in issues], ensure_ascii=False, indent=2))
    elif args.rdjson:
        if issues:
            print(format_rdjsonl(issues))
    else:
        print(format_text(issues))

    if args.fail_on_issue and issues:
        return 1
    return 0

if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
