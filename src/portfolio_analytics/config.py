"""Configuration loading utilities.

Reads the YAML files that parameterize performance reports. Settings
live under an optional top-level ``portfolio_analytics`` section::

    portfolio_analytics:
      periodicity: monthly
      var_alpha: 0.05
      top_drawdowns: 3
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from .types import AnalyticsConfig

logger = logging.getLogger(__name__)

CONFIG_SECTION = "portfolio_analytics"


def load_config(path: str | Path) -> dict[str, Any]:
    """
    Load a YAML configuration file.

    Parameters
    ----------
    path : str | Path
        Path to the YAML configuration file.

    Returns
    -------
    dict[str, Any]
        Configuration dictionary, empty for an empty file.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist.
    yaml.YAMLError
        If the YAML is malformed.
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with open(path, "r") as f:
        config = yaml.safe_load(f)

    logger.info("Loaded configuration from %s", path)
    return config if config is not None else {}


def get_nested(config: dict[str, Any], *keys: str, default: Any = None) -> Any:
    """
    Get a nested value from a configuration dictionary.

    Examples
    --------
    >>> cfg = {"portfolio_analytics": {"var_alpha": 0.01}}
    >>> get_nested(cfg, "portfolio_analytics", "var_alpha")
    0.01
    >>> get_nested(cfg, "portfolio_analytics", "missing", default=5)
    5
    """
    result = config
    for key in keys:
        if isinstance(result, dict) and key in result:
            result = result[key]
        else:
            return default
    return result


def load_analytics_config(path: str | Path) -> AnalyticsConfig:
    """Load an :class:`AnalyticsConfig` from a YAML file.

    Keys are read from the ``portfolio_analytics`` section when present,
    otherwise from the top level. Missing keys take their defaults.
    """
    config = load_config(path)
    section = get_nested(config, CONFIG_SECTION, default=config)
    if not isinstance(section, dict):
        raise ValueError(f"Section '{CONFIG_SECTION}' must be a mapping, got {type(section).__name__}")
    return AnalyticsConfig.from_dict(section)
