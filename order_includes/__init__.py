"""order-includes: grouping and sorting of Go import blocks."""

from __future__ import annotations

from .formatter import format_file, format_text
from .imports import GoImportClassifier
from .runner import run_order
from .types import FileResult, FileStatus, ModuleKind

__all__ = [
    "GoImportClassifier",
    "ModuleKind",
    "FileStatus",
    "FileResult",
    "format_text",
    "format_file",
    "run_order",
]
