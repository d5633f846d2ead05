"""
Filter configuration.

The only tunable is the stock threshold used by the grocery and
inventory problems. Values come from (highest first): command line,
YAML config file, defaults below.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 5


class ConfigError(ValueError):
    """Raised when configuration cannot be loaded or normalized."""
    pass


@dataclass(frozen=True)
class FilterConfig:
    threshold: float = DEFAULT_THRESHOLD


def _as_number(value: Any) -> float:
    if isinstance(value, bool):
        raise ConfigError(f"threshold must be a number, got {value!r}")
    if isinstance(value, int):
        return value
    try:
        number = float(str(value).strip())
    except ValueError:
        raise ConfigError(f"threshold must be a number, got {value!r}")
    # keep "5" and 5.0 printing as 5
    return int(number) if number.is_integer() else number


def config_from_dict(raw: Optional[Dict[str, Any]]) -> FilterConfig:
    # an empty YAML document loads as None
    if raw is None or raw == {}:
        return FilterConfig()
    if not isinstance(raw, dict):
        raise ConfigError(f"config must be a mapping, got {type(raw).__name__}")

    unknown = sorted(set(raw) - {"threshold"})
    if unknown:
        logger.warning("Ignoring unknown config keys: %s", ", ".join(unknown))

    if raw.get("threshold") is None:
        return FilterConfig()
    return FilterConfig(threshold=_as_number(raw["threshold"]))


def load_config(path: Path) -> FilterConfig:
    """Read a YAML config file. A missing or empty file yields defaults."""
    path = Path(path)
    if not path.exists():
        logger.info("config not found: %s (using defaults)", path)
        return FilterConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Failed to read config '{path}': {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse config '{path}': {e}") from e

    config = config_from_dict(raw)
    logger.info("config loaded: %s", path)
    return config


def merge_config(config: FilterConfig, threshold: Optional[float] = None) -> FilterConfig:
    """Apply a command-line override on top of a loaded config."""
    if threshold is None:
        return config
    return FilterConfig(threshold=_as_number(threshold))
