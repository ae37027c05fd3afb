from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List

from .config import load_config, resolve_config_path
from .errors import OrderIncludesError, UsageError
from .runner import build_report, run_order
from .types import FileStatus
from .version import tool_version

logger = logging.getLogger("order_includes")

DEBUG_ENV = "ORDER_INCLUDES_DEBUG"

# Exit codes
EXIT_OK = 0
EXIT_USAGE = -1
EXIT_UNEXPECTED = -2
EXIT_NO_FILES = -3

DESCRIPTION = """\
order-includes sorts includes in go files.
Includes are divided into three groups: stdlib, platform and third parties;
within the groups, they are sorted lexicographically.
"""

EPILOG = """\
examples:
  order-includes ../connection.go
  order-includes ../memsql/
"""


class _ArgumentParser(argparse.ArgumentParser):
    """argparse reports errors by exiting with 2; we need our own exit code."""

    def error(self, message: str):  # type: ignore[override]
        raise UsageError(message)


def _build_parser() -> argparse.ArgumentParser:
    p = _ArgumentParser(
        prog="order-includes",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {tool_version()}")
    p.add_argument("path", help="go file or directory (processed recursively)")
    p.add_argument(
        "--config",
        metavar="FILE",
        type=Path,
        help="YAML config (default: $ORDER_INCLUDES_CONFIG or ./.order-includes.yaml)",
    )
    p.add_argument(
        "--json",
        action="store_true",
        help="print a JSON report instead of one [path][result] line per file",
    )
    p.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="debug logging to stderr",
    )
    return p


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose or os.environ.get(DEBUG_ENV) else logging.WARNING
    logger.setLevel(level)
    if not logger.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        logger.addHandler(h)


def main(argv: List[str] | None = None) -> int:
    parser = _build_parser()
    try:
        ns = parser.parse_args(argv)
    except UsageError as e:
        sys.stderr.write(parser.format_help())
        sys.stderr.write(f"\nerror: {e}\n")
        return EXIT_USAGE

    _setup_logging(ns.verbose)
    target = Path(ns.path)

    try:
        cfg = load_config(resolve_config_path(ns.config))
    except OrderIncludesError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return EXIT_USAGE

    try:
        results = run_order(target, cfg)
        report = build_report(target, results)
    except Exception:
        logger.debug("run aborted", exc_info=True)
        sys.stderr.write("unexpected error occured\n")
        return EXIT_UNEXPECTED

    if ns.json:
        sys.stdout.write(report.to_json() + "\n")
    else:
        for r in results:
            sys.stdout.write(r.render() + "\n")

    logger.debug(
        "processed %d file(s): %d done, %d without includes, %d unreadable",
        report.processed,
        report.count(FileStatus.DONE),
        report.count(FileStatus.NO_IMPORT_BLOCK),
        report.count(FileStatus.READ_FAILURE),
    )

    if not results:
        sys.stderr.write("no go files to order includes\n")
        return EXIT_NO_FILES
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
