"""nvmprune configuration.

This module provides the configuration model and loader for the optional
TOML file at ~/.config/nvmprune/config.toml. Every setting has a default,
so a missing file is not an error.

Example:
    nvm_dir = "~/.nvm"
    keep = ["18.20.4"]
    command_timeout = 300

    [colors]
    success = "#03b971"
"""

import logging
import tomllib
from pathlib import Path
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from nvmprune.core.paths import get_config_path

logger = logging.getLogger(__name__)

# Remote location of the latest nvm-cleanup script used by --update-self
DEFAULT_UPDATE_URL = (
    "https://raw.githubusercontent.com/Zwiqler94/Useful-Scripts/refs/heads/main/nvm-cleanup.sh"
)


class PruneConfig(BaseModel):
    """Settings read from the nvmprune configuration file.

    Attributes:
        nvm_dir: nvm base directory, used only when NVM_DIR is unset.
        keep: Versions that are always protected, merged with --keep.
        update_url: Source URL for --update-self.
        command_timeout: Per-command timeout for nvm and npm calls.
        colors: Raw theme overrides, validated by the theme module.
    """

    model_config = ConfigDict(extra="forbid")

    nvm_dir: Annotated[
        str | None,
        Field(description="nvm base directory (NVM_DIR takes precedence)"),
    ] = None
    keep: Annotated[
        list[str],
        Field(description="Versions protected from removal"),
    ] = []
    update_url: Annotated[
        str,
        Field(min_length=1, description="Self-update source URL"),
    ] = DEFAULT_UPDATE_URL
    command_timeout: Annotated[
        int,
        Field(ge=10, le=3600, description="Timeout in seconds (10-3600)"),
    ] = 300
    colors: Annotated[
        dict[str, str],
        Field(description="Theme color overrides"),
    ] = {}

    @field_validator("keep")
    @classmethod
    def strip_keep_entries(cls, v: list[str]) -> list[str]:
        """Drop blank keep entries."""
        return [entry.strip() for entry in v if entry.strip()]


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the configuration file is not valid TOML."""


def _read_toml(path: Path) -> dict[str, Any] | None:
    """Read a TOML file.

    Args:
        path: Path to the TOML file.

    Returns:
        Parsed document, or None if the file does not exist.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read.
    """
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except FileNotFoundError:
        return None
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {path}: {e}") from e


def load_config(path: Path | None = None) -> PruneConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated PruneConfig; defaults when the file does not exist.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()
    data = _read_toml(config_path)

    if data is None:
        logger.debug("No config file at %s, using defaults", config_path)
        return PruneConfig()

    try:
        config = PruneConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e

    logger.debug("Loaded config from %s", config_path)
    return config


def load_color_overrides(path: Path | None = None) -> dict[str, str]:
    """Read only the ``[colors]`` table of the configuration file.

    Used while building the console theme at import time, so every
    problem is logged and an empty mapping returned instead of raising.
    The full config is validated later by :func:`load_config`.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Mapping of color name to color string.
    """
    try:
        data = _read_toml(path or get_config_path())
    except ConfigError as e:
        logger.warning("Ignoring theme colors: %s", e)
        return {}

    if data is None:
        return {}

    colors_raw: object = data.get("colors", {})
    if not isinstance(colors_raw, dict):
        logger.warning("Invalid 'colors' section in config, expected a table")
        return {}

    return {str(k): v for k, v in colors_raw.items() if isinstance(v, str)}
