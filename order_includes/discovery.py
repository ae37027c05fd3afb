"""
Target path → files to process.

A directory is walked recursively in sorted order (deterministic output),
a single file is taken as is when its suffix matches. Suffix matching is
exact and case-sensitive.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Set

import pathspec

from .config.model import OrderConfig

logger = logging.getLogger(__name__)


def build_exclude_spec(root: Path, patterns: Iterable[str], *, use_gitignore: bool) -> Optional[pathspec.PathSpec]:
    """
    PathSpec from the configured exclude patterns and, optionally,
    the root .gitignore. None when there is nothing to exclude.
    """
    lines: List[str] = [p for p in patterns if p.strip()]

    if use_gitignore:
        gitignore = root / ".gitignore"
        if gitignore.is_file():
            for ln in gitignore.read_text(encoding="utf-8", errors="ignore").splitlines():
                ln = ln.strip()
                if ln and not ln.startswith("#"):
                    lines.append(ln)

    if not lines:
        return None
    return pathspec.GitIgnoreSpec.from_lines(lines)


def _matches_extension(name: str, extensions: Set[str]) -> bool:
    return Path(name).suffix in extensions


def _walk_error(err: OSError) -> None:
    # os.walk skips unreadable directories silently otherwise
    raise err


def iter_target_files(target: Path, cfg: OrderConfig) -> Iterator[Path]:
    """
    Files under *target* that should be processed.

    A non-directory target is yielded when its suffix matches, even if it
    does not exist: reading it then fails and is reported per file.
    A directory that cannot be listed raises the underlying OSError.
    """
    extensions = set(cfg.extensions)

    if not target.is_dir():
        if _matches_extension(target.name, extensions):
            yield target
        else:
            logger.debug("skipping %s: extension not in %s", target, sorted(extensions))
        return

    spec = build_exclude_spec(target, cfg.exclude, use_gitignore=cfg.respect_gitignore)

    for dirpath, dirnames, filenames in os.walk(target, onerror=_walk_error):
        # Do not enter .git
        if ".git" in dirnames:
            dirnames.remove(".git")

        rel_base = Path(dirpath).relative_to(target)

        if spec is not None:
            keep: List[str] = []
            for d in dirnames:
                rel_dir = (rel_base / d).as_posix()
                if spec.match_file(rel_dir + "/"):
                    logger.debug("excluded directory %s", rel_dir)
                    continue
                keep.append(d)
            dirnames[:] = keep
        dirnames.sort()

        for fn in sorted(filenames):
            if not _matches_extension(fn, extensions):
                continue
            if spec is not None and spec.match_file((rel_base / fn).as_posix()):
                logger.debug("excluded file %s", (rel_base / fn).as_posix())
                continue
            yield Path(dirpath, fn)


__all__ = ["build_exclude_spec", "iter_target_files"]
