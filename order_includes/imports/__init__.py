from __future__ import annotations

from .classifier import (
    DEFAULT_PLATFORM_PREFIXES,
    DEFAULT_THIRD_PARTY_PREFIXES,
    GoImportClassifier,
    ImportClassifier,
)
from .locator import find_import_block
from .ordering import compare_lines, mark_removed, sort_block, sort_key
from .rewriter import render_lines, render_text

__all__ = [
    "ImportClassifier",
    "GoImportClassifier",
    "DEFAULT_THIRD_PARTY_PREFIXES",
    "DEFAULT_PLATFORM_PREFIXES",
    "find_import_block",
    "mark_removed",
    "sort_key",
    "compare_lines",
    "sort_block",
    "render_lines",
    "render_text",
]
