"""
Configuration loader — reads an optional YAML file into BootstrapConfig.

Nothing is discovered implicitly: without an explicit path the
built-in defaults are used as they are.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from nodeseed.core.models.config import BootstrapConfig

logger = logging.getLogger(__name__)

# Optional top-level key wrapping the settings
CONFIG_SECTION = "nodeseed"


class ConfigError(Exception):
    """Raised when the configuration file is invalid or missing."""


def load_config(path: Path | None = None) -> BootstrapConfig:
    """Load and validate the bootstrap configuration.

    Args:
        path: Explicit path to a YAML config file. If None, defaults are used.

    Returns:
        Validated BootstrapConfig.

    Raises:
        ConfigError: If the file is missing or invalid.
    """
    if path is None:
        return BootstrapConfig()

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading bootstrap config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    # An empty file means "all defaults"
    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # The YAML may wrap everything under a "nodeseed" key or be flat
    if CONFIG_SECTION in data:
        data = data[CONFIG_SECTION] or {}
        if not isinstance(data, dict):
            raise ConfigError(f"Expected '{CONFIG_SECTION}' to be a mapping in {path}")

    try:
        config = BootstrapConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e

    logger.info("Loaded config: project_folder=%s", config.project_folder)
    return config
