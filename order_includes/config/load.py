from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ..errors import ConfigError
from .model import SCHEMA_VERSION, OrderConfig

logger = logging.getLogger(__name__)

DEFAULT_CFG_FILE = ".order-includes.yaml"
CONFIG_ENV = "ORDER_INCLUDES_CONFIG"

# --------------------------------------------------------------------------- #
# YAML loader
# --------------------------------------------------------------------------- #
_yaml = YAML(typ="safe")


# --------------------------------------------------------------------------- #
# HELPERS
# --------------------------------------------------------------------------- #
def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open(encoding="utf-8") as f:
            raw = _yaml.load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: top level must be a mapping, got {type(raw).__name__}")
    return raw


def _format_validation_error(path: Path, err: ValidationError) -> str:
    parts = []
    for item in err.errors():
        loc = ".".join(str(x) for x in item.get("loc", ())) or "$"
        parts.append(f"{loc}: {item.get('msg', 'invalid value')}")
    return f"{path}: " + "; ".join(parts)


# --------------------------------------------------------------------------- #
# PUBLIC API
# --------------------------------------------------------------------------- #
def resolve_config_path(explicit: Optional[Path] = None, cwd: Optional[Path] = None) -> Optional[Path]:
    """
    Which config file applies, in priority order:
      • --config FILE (must exist);
      • $ORDER_INCLUDES_CONFIG (must exist);
      • .order-includes.yaml in the current directory, if present.
    None means built-in defaults.
    """
    if explicit is not None:
        if not explicit.is_file():
            raise ConfigError(f"Config file not found: {explicit}")
        return explicit

    env_value = os.environ.get(CONFIG_ENV)
    if env_value:
        env_path = Path(env_value)
        if not env_path.is_file():
            raise ConfigError(f"Config file not found: {env_path} (from ${CONFIG_ENV})")
        return env_path

    local = (cwd or Path.cwd()) / DEFAULT_CFG_FILE
    if local.is_file():
        return local
    return None


def load_config(path: Optional[Path]) -> OrderConfig:
    """
    Load and validate a config file.

    • path is None → defaults.
    • schema_version missing → current version is assumed.
    • unknown keys and wrong types → ConfigError naming the field.
    """
    if path is None:
        return OrderConfig()

    raw = _read_yaml(path)
    version = raw.get("schema_version", SCHEMA_VERSION)
    if isinstance(version, bool) or not isinstance(version, int):
        raise ConfigError(f"{path}: schema_version must be an integer, got {version!r}")
    if version != SCHEMA_VERSION:
        raise ConfigError(
            f"Unsupported config schema {version} "
            f"(tool expects {SCHEMA_VERSION})"
        )

    try:
        cfg = OrderConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(_format_validation_error(path, e)) from e

    logger.debug("config loaded from %s: %r", path, cfg)
    return cfg


__all__ = ["DEFAULT_CFG_FILE", "CONFIG_ENV", "resolve_config_path", "load_config"]
