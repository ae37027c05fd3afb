from __future__ import annotations

from importlib import metadata

_DIST_NAMES = ("order-includes", "order_includes")


def tool_version() -> str:
    """
    Version of the installed order-includes distribution, shown by
    ``--version`` and recorded in the JSON run report.

    Running from a source checkout without installing gives "0.0.0".
    """
    for dist in _DIST_NAMES:
        try:
            return metadata.version(dist)
        except metadata.PackageNotFoundError:
            continue
    return "0.0.0"


__all__ = ["tool_version"]
