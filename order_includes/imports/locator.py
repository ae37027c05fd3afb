"""
Import block lookup.

The search is line based: a delimiter is recognised only when it is the whole
line once whitespace and a trailing ``//`` comment are removed. Parentheses
inside strings or comments of the block are not tracked, so a line made of a
lone ``)`` always closes the block.
"""

from __future__ import annotations

import logging
from typing import Sequence

from ..types import ImportBlock
from .text import strip_comment, strip_spaces

logger = logging.getLogger(__name__)

OPEN_DELIMITER = "import("
CLOSE_DELIMITER = ")"


def delimiter_text(text: str) -> str:
    """Text used for delimiter comparison."""
    return strip_comment(strip_spaces(text))


def find_import_block(texts: Sequence[str]) -> ImportBlock:
    """
    Locate the first ``import(`` ... ``)`` block.

    Returns the range of lines strictly between the delimiters. When there is
    no opening delimiter, or no closing delimiter after it, an empty range at
    the end of the sequence is returned.
    """
    total = len(texts)
    nothing = ImportBlock(total, total)

    begin = None
    for i, text in enumerate(texts):
        if delimiter_text(text) == OPEN_DELIMITER:
            begin = i + 1
            break
    if begin is None:
        logger.debug("no %r line found", OPEN_DELIMITER)
        return nothing

    for end in range(begin, total):
        if delimiter_text(texts[end]) == CLOSE_DELIMITER:
            return ImportBlock(begin, end)

    logger.debug("import block opened at line %d is never closed", begin)
    return nothing


__all__ = ["OPEN_DELIMITER", "CLOSE_DELIMITER", "delimiter_text", "find_import_block"]
