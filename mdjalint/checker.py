"""高レベル API: テキスト/ファイル/ファイル群に対する校閲

- 誤記チェック（技術用語・日本語表記・長音符）
- 固有名詞チェック（組込み + カスタム辞書）
- 読みやすさチェック（行単位）
- 辞書語彙との類似度チェック（任意）

結果は各チェッカーの走査順を保ったまま連結する。
"""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, List

from . import proper_nouns, readability, spellcheck, typo_rules
from .config import LintConfig
from .dictionary import Lexicon, build_lexicon
from .file_scanner import read_text
from .result import LintResult

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = LintConfig()


def lint_text(
    content: str,
    file_path: str = "<memory>",
    lexicon: Lexicon | None = None,
    config: LintConfig | None = None,
) -> List[LintResult]:
    config = config or _DEFAULT_CONFIG
    if lexicon is None:
        lexicon = build_lexicon(config.custom_dictionary)

    results = typo_rules.check(file_path, content, lexicon=lexicon)
    results.extend(proper_nouns.check(file_path, content, lexicon=lexicon))
    results.extend(readability.check(
        file_path,
        content,
        sentence_limit=config.sentence_limit,
        comma_limit=config.comma_limit,
    ))
    if config.spell and spellcheck.is_available():
        vocabulary = spellcheck.build_vocabulary(lexicon.custom)
        results.extend(spellcheck.run_spellcheck(
            file_path, content, vocabulary, threshold=config.spell_threshold,
        ))
    return results


def lint_file(
    path: str | Path,
    lexicon: Lexicon | None = None,
    config: LintConfig | None = None,
) -> List[LintResult]:
    content = read_text(Path(path))
    if content is None:
        logger.info("ファイルが見つからないか読み込めません: %s", path)
        return []
    logger.info("校閲中: %s", path)
    return lint_text(content, file_path=str(path), lexicon=lexicon, config=config)


def lint_files(
    paths: Iterable[str | Path],
    custom_dictionary_path: str | Path | None = None,
    config: LintConfig | None = None,
) -> List[LintResult]:
    config = config or _DEFAULT_CONFIG
    files = list(paths)
    if not files:
        logger.info("対象ファイルが見つかりません")
        return []
    logger.info("対象ファイル数: %d", len(files))

    # 辞書は一度だけ組み立てて全ファイルで共有
    lexicon = build_lexicon(custom_dictionary_path or config.custom_dictionary)

    results: List[LintResult] = []
    if config.jobs and config.jobs > 1:
        # map は入力順で返すため、ファイル単位の結果が混ざらない
        with ThreadPoolExecutor(max_workers=config.jobs) as ex:
            for file_results in ex.map(lambda p: lint_file(p, lexicon, config), files):
                results.extend(file_results)
    else:
        for path in files:
            results.extend(lint_file(path, lexicon, config))

    logger.info("総指摘数: %d", len(results))
    return results


__all__ = ["lint_text", "lint_file", "lint_files"]
