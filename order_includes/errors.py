"""
Exceptions raised by order-includes.

Errors the user can fix (bad configuration, bad invocation) inherit from
OrderIncludesError and are shown as a single clean message.

Anything else that escapes per-file processing is wrapped into
ProcessingError; the original exception stays available via __cause__.
"""

from __future__ import annotations

from pathlib import Path


class OrderIncludesError(Exception):
    """Base class for all user-facing errors."""
    pass


class ConfigError(OrderIncludesError):
    """Configuration file is missing, unreadable or invalid."""
    pass


class UsageError(OrderIncludesError):
    """Invalid command line."""
    pass


class ProcessingError(RuntimeError):
    """
    Unexpected failure while processing a single file.

    The message is generic on purpose; the cause is chained
    (``raise ProcessingError(path) from e``) for logs and tests.
    """

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"unexpected error while processing {path}")


__all__ = ["OrderIncludesError", "ConfigError", "UsageError", "ProcessingError"]
