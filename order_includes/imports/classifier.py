"""
Classification of import block lines into module groups.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Sequence, Tuple

from ..types import ModuleKind, SourceLine
from .text import is_blank, strip_spaces

DEFAULT_THIRD_PARTY_PREFIXES: Tuple[str, ...] = (
    "github.com/",
    "gopkg.in/",
    "golang.org/",
    "pault.ag/",
)

DEFAULT_PLATFORM_PREFIXES: Tuple[str, ...] = (
    "platform/",
)

COMMENT_MARKER = "//"


class ImportClassifier(ABC):
    """Abstract base for per-line module classification."""

    @abstractmethod
    def classify(self, text: str) -> ModuleKind:
        """Category of a raw (not removed) line."""
        pass

    def classify_line(self, line: SourceLine) -> ModuleKind:
        if line.removed:
            return ModuleKind.NONE
        return self.classify(line.text)


class GoImportClassifier(ImportClassifier):
    """
    Go import classifier driven by quoted path prefixes.

    Rules, first match wins:
      1. a quoted path starting with a third-party prefix → THIRD_PARTY
      2. a quoted path starting with a platform prefix    → PLATFORM
      3. blank, whitespace-only or comment-only line      → NONE
      4. anything else                                    → STDLIB
    """

    def __init__(
        self,
        third_party_prefixes: Iterable[str] | None = None,
        platform_prefixes: Iterable[str] | None = None,
    ):
        if third_party_prefixes is None:
            third_party_prefixes = DEFAULT_THIRD_PARTY_PREFIXES
        if platform_prefixes is None:
            platform_prefixes = DEFAULT_PLATFORM_PREFIXES
        # Matching is done against '"' + prefix so that only the start
        # of a quoted path counts.
        self.third_party_prefixes = tuple(third_party_prefixes)
        self.platform_prefixes = tuple(platform_prefixes)
        self._third_party_needles = _quoted(self.third_party_prefixes)
        self._platform_needles = _quoted(self.platform_prefixes)

    def classify(self, text: str) -> ModuleKind:
        if _contains_any(text, self._third_party_needles):
            return ModuleKind.THIRD_PARTY
        if _contains_any(text, self._platform_needles):
            return ModuleKind.PLATFORM
        if is_blank(text):
            return ModuleKind.NONE
        if strip_spaces(text).startswith(COMMENT_MARKER):
            return ModuleKind.NONE
        return ModuleKind.STDLIB

    def __repr__(self) -> str:
        return (
            f"GoImportClassifier(third_party_prefixes={list(self.third_party_prefixes)!r}, "
            f"platform_prefixes={list(self.platform_prefixes)!r})"
        )


def _quoted(prefixes: Sequence[str]) -> Tuple[str, ...]:
    return tuple('"' + p for p in prefixes if p)


def _contains_any(text: str, needles: Sequence[str]) -> bool:
    return any(n in text for n in needles)


__all__ = [
    "ImportClassifier",
    "GoImportClassifier",
    "DEFAULT_THIRD_PARTY_PREFIXES",
    "DEFAULT_PLATFORM_PREFIXES",
    "COMMENT_MARKER",
]
