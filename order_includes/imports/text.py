"""Small text helpers shared by the locator, the classifier and the sort key."""

from __future__ import annotations

QUOTE = '"'


def strip_spaces(text: str) -> str:
    """Remove every whitespace character, not only the leading/trailing ones."""
    return "".join(ch for ch in text if not ch.isspace())


def strip_comment(text: str) -> str:
    """Cut the text at the first ``//``."""
    pos = text.find("//")
    if pos < 0:
        return text
    return text[:pos]


def is_blank(text: str) -> bool:
    return not text or text.isspace()


def normalized_path(text: str) -> str:
    """
    Secondary sort key: whitespace removed, then everything before
    the first quote dropped (this discards the import alias).
    """
    squeezed = strip_spaces(text)
    pos = squeezed.find(QUOTE)
    if pos < 0:
        return squeezed
    return squeezed[pos:]


__all__ = ["QUOTE", "strip_spaces", "strip_comment", "is_blank", "normalized_path"]
