"""
Per-file pipeline:

    Unprocessed → BlockLocated → Normalized → Sorted → Rewritten

Two early exits leave the file untouched: a file without lines
(READ_FAILURE) and a file without an import block (NO_IMPORT_BLOCK).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Tuple

from .imports.classifier import ImportClassifier
from .imports.locator import find_import_block
from .imports.ordering import mark_removed, sort_block
from .imports.rewriter import render_text
from .types import FileResult, FileStatus, SourceLine

logger = logging.getLogger(__name__)

# Undecodable bytes and "\r" must survive the read/write round trip.
ENCODING = "utf-8"
ENCODING_ERRORS = "surrogateescape"


def split_lines(text: str) -> List[str]:
    """
    Split on "\\n" only. A final terminator does not start a new line,
    so an empty text has zero lines.
    """
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return parts


def read_text(path: Path) -> str:
    with path.open("r", encoding=ENCODING, errors=ENCODING_ERRORS, newline="") as f:
        return f.read()


def write_text(path: Path, text: str) -> None:
    # Whole-file overwrite, not an atomic replace.
    with path.open("w", encoding=ENCODING, errors=ENCODING_ERRORS, newline="") as f:
        f.write(text)


def format_text(text: str, classifier: ImportClassifier) -> Tuple[FileStatus, Optional[str]]:
    """
    Run the core on an in-memory file.

    Returns the status and, for DONE only, the new content.
    """
    texts = split_lines(text)
    if not texts:
        return FileStatus.READ_FAILURE, None

    block = find_import_block(texts)
    if block.is_empty:
        return FileStatus.NO_IMPORT_BLOCK, None
    logger.debug("import block: lines [%d, %d)", block.begin, block.end)

    lines = [SourceLine(t) for t in texts]
    removed = mark_removed(lines, block)
    logger.debug("blank lines dropped from block: %d", removed)

    sort_block(lines, block, classifier)
    return FileStatus.DONE, render_text(lines, block, classifier)


def format_file(path: Path, classifier: ImportClassifier) -> FileResult:
    """Process one file in place."""
    try:
        text = read_text(path)
    except OSError as e:
        # Unreadable and empty files are reported the same way.
        logger.debug("cannot read %s: %s", path, e)
        text = ""

    status, new_text = format_text(text, classifier)
    if new_text is not None:
        write_text(path, new_text)
    logger.debug("%s: %s", path, status.value)
    return FileResult(path=path, status=status)


__all__ = ["split_lines", "read_text", "write_text", "format_text", "format_file"]
