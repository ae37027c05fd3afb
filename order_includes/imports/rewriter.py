"""
Output generation for a processed file.

Removed lines are dropped. Inside the import block one blank line is put
between two neighbouring lines whose groups differ; blank-origin and
comment-only lines (group NONE) never get a separator next to them.
"""

from __future__ import annotations

from typing import List, Sequence

from ..types import ImportBlock, ModuleKind, SourceLine
from .classifier import ImportClassifier

NEWLINE = "\n"


def needs_separator(
    lines: Sequence[SourceLine],
    i: int,
    block: ImportBlock,
    classifier: ImportClassifier,
) -> bool:
    """Whether a blank line goes between lines[i] and lines[i + 1]."""
    if i + 1 >= len(lines):
        return False
    current, following = lines[i], lines[i + 1]
    if current.removed or following.removed:
        return False
    if i not in block or i + 1 not in block:
        return False
    kind = classifier.classify_line(current)
    next_kind = classifier.classify_line(following)
    if kind is ModuleKind.NONE or next_kind is ModuleKind.NONE:
        return False
    return kind is not next_kind


def render_lines(
    lines: Sequence[SourceLine],
    block: ImportBlock,
    classifier: ImportClassifier,
) -> List[str]:
    """Output lines (without terminators), separators included."""
    out: List[str] = []
    for i, line in enumerate(lines):
        if line.removed:
            continue
        out.append(line.text)
        if needs_separator(lines, i, block, classifier):
            out.append("")
    return out


def render_text(
    lines: Sequence[SourceLine],
    block: ImportBlock,
    classifier: ImportClassifier,
) -> str:
    """Whole file content; every emitted line ends with a newline."""
    return "".join(text + NEWLINE for text in render_lines(lines, block, classifier))


__all__ = ["needs_separator", "render_lines", "render_text"]
