from __future__ import annotations

from .load import CONFIG_ENV, DEFAULT_CFG_FILE, load_config, resolve_config_path
from .model import DEFAULT_EXTENSIONS, SCHEMA_VERSION, OrderConfig

__all__ = [
    "OrderConfig",
    "SCHEMA_VERSION",
    "DEFAULT_EXTENSIONS",
    "DEFAULT_CFG_FILE",
    "CONFIG_ENV",
    "load_config",
    "resolve_config_path",
]
