"""
Normalisation and ordering of the lines inside an import block.

Order inside the block:
  • kept lines before removed ones;
  • kept lines by group rank (stdlib < platform < third party < none);
  • same rank by normalized path text (alias and whitespace ignored).
"""

from __future__ import annotations

from typing import List, MutableSequence, Tuple

from ..types import MODULE_RANK, ImportBlock, SourceLine
from .classifier import ImportClassifier
from .text import is_blank, normalized_path

SortKey = Tuple[int, int, str]


def mark_removed(lines: MutableSequence[SourceLine], block: ImportBlock) -> int:
    """
    Tag every blank or whitespace-only line of the block as removed.
    Returns the number of newly tagged lines.
    """
    count = 0
    for i in range(block.begin, block.end):
        line = lines[i]
        if not line.removed and is_blank(line.text):
            lines[i] = line.as_removed()
            count += 1
    return count


def sort_key(line: SourceLine, classifier: ImportClassifier) -> SortKey:
    if line.removed:
        return 1, 0, ""
    rank = MODULE_RANK[classifier.classify_line(line)]
    return 0, rank, normalized_path(line.text)


def compare_lines(lhs: SourceLine, rhs: SourceLine, classifier: ImportClassifier) -> int:
    """Three-way comparison, consistent with sort_key."""
    if lhs.removed and rhs.removed:
        return 0
    if lhs.removed:
        return 1
    if rhs.removed:
        return -1

    lhs_rank = MODULE_RANK[classifier.classify_line(lhs)]
    rhs_rank = MODULE_RANK[classifier.classify_line(rhs)]
    if lhs_rank != rhs_rank:
        return -1 if lhs_rank < rhs_rank else 1

    lhs_path = normalized_path(lhs.text)
    rhs_path = normalized_path(rhs.text)
    if lhs_path == rhs_path:
        return 0
    return -1 if lhs_path < rhs_path else 1


def sort_block(lines: MutableSequence[SourceLine], block: ImportBlock, classifier: ImportClassifier) -> None:
    """Sort the block slice in place; lines outside the block are not touched."""
    if block.is_empty:
        return
    ordered: List[SourceLine] = sorted(
        lines[block.begin:block.end],
        key=lambda ln: sort_key(ln, classifier),
    )
    lines[block.begin:block.end] = ordered


__all__ = ["SortKey", "mark_removed", "sort_key", "compare_lines", "sort_block"]
