"""mdjalint
日本語（および日英混在）Markdown の簡易校閲ライブラリ。

主な提供機能:
- Markdown 記法を剥がしたプレーンテキストの抽出
- 技術用語・固有名詞の誤記、日本語表記の検出（カスタム辞書対応）
- 文の長さ・助詞の重なり・全角半角の混在などの読みやすさチェック
- reviewdog (rdjsonl) 形式での出力と CLI インターフェース
"""
from .checker import lint_text, lint_file, lint_files
from .result import LintResult

__all__ = [
    "lint_text",
    "lint_file",
    "lint_files",
    "LintResult",
]

__version__ = "0.1.0"
