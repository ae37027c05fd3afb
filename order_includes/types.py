from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import Dict


# ---- Line categories ----

class ModuleKind(Enum):
    STDLIB = "stdlib"
    PLATFORM = "platform"
    THIRD_PARTY = "third_party"
    NONE = "none"  # blank, comment-only or removed line


# Group order inside the import block. Kept explicit so that reordering
# the enum members above never changes the output.
MODULE_RANK: Dict[ModuleKind, int] = {
    ModuleKind.STDLIB: 0,
    ModuleKind.PLATFORM: 1,
    ModuleKind.THIRD_PARTY: 2,
    ModuleKind.NONE: 3,
}


# ---- Lines and the import block ----

@dataclass(frozen=True)
class SourceLine:
    """
    One physical line of a source file.

    ``text`` has no trailing "\\n" (a "\\r" from CRLF files stays part of it).
    ``removed`` marks a line that must not be written back; the text is
    kept untouched so a removed line is never confused with real content.
    """
    text: str
    removed: bool = False

    def as_removed(self) -> SourceLine:
        return replace(self, removed=True)


@dataclass(frozen=True)
class ImportBlock:
    """
    Half-open range [begin, end) of lines strictly between
    the ``import(`` and ``)`` delimiters.
    """
    begin: int
    end: int

    @property
    def is_empty(self) -> bool:
        return self.begin >= self.end

    def __contains__(self, index: object) -> bool:
        return isinstance(index, int) and self.begin <= index < self.end

    def __len__(self) -> int:
        return max(0, self.end - self.begin)


# ---- Per-file outcome ----

class FileStatus(str, Enum):
    READ_FAILURE = "failed to read from file"
    NO_IMPORT_BLOCK = "no includes found"
    DONE = "done"


@dataclass(frozen=True)
class FileResult:
    path: Path
    status: FileStatus

    @property
    def message(self) -> str:
        return self.status.value

    def render(self) -> str:
        """Line printed by the CLI: ``[<path>][<message>]``."""
        return f"[{self.path}][{self.message}]"


__all__ = [
    "ModuleKind",
    "MODULE_RANK",
    "SourceLine",
    "ImportBlock",
    "FileStatus",
    "FileResult",
]
