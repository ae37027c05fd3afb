from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from .config.model import OrderConfig
from .discovery import iter_target_files
from .errors import ProcessingError
from .formatter import format_file
from .report import FileReport, RunReport
from .types import FileResult
from .version import tool_version

logger = logging.getLogger(__name__)


def run_order(target: Path, cfg: Optional[OrderConfig] = None) -> List[FileResult]:
    """
    Process every matching file under *target*, one after another.

    Per-file outcomes never stop the run. Any other exception, including a
    directory that cannot be listed, is re-raised as ProcessingError with
    the original chained as __cause__.
    """
    cfg = cfg or OrderConfig()
    classifier = cfg.build_classifier()
    logger.debug("using %r", classifier)

    results: List[FileResult] = []
    current: Path = target
    try:
        for path in iter_target_files(target, cfg):
            current = path
            results.append(format_file(path, classifier))
            # failures while walking are reported against the target
            current = target
    except Exception as e:
        raise ProcessingError(current) from e
    return results


def build_report(target: Path, results: List[FileResult]) -> RunReport:
    return RunReport(
        tool_version=tool_version(),
        target=str(target),
        files=[FileReport.from_result(r) for r in results],
    )


__all__ = ["run_order", "build_report"]
