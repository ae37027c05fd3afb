"""
Shared helpers for the test suite.

Modules:
- file_utils: writing and reading test files, Go source builder
- cli_utils: running the CLI in a subprocess
"""

from .file_utils import write, read, go_source
from .cli_utils import run_cli, jload

__all__ = [
    "write",
    "read",
    "go_source",
    "run_cli",
    "jload",
]
