"""Path resolution for nvmprune.

Covers the XDG configuration location of nvmprune itself and the
on-disk layout of an nvm installation.

XDG defaults:
- Config: ~/.config/nvmprune/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "nvmprune"

# Subdirectory of NVM_DIR holding one directory per installed Node version
NODE_VERSIONS_SUBDIR = Path("versions") / "node"


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/nvmprune/ (or XDG_CONFIG_HOME/nvmprune/).
    """
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_config_path() -> Path:
    """Get the configuration file path.

    Returns:
        Path to ~/.config/nvmprune/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_default_nvm_dir() -> Path:
    """Get the nvm directory used when nothing else is configured.

    Returns:
        Path to ~/.nvm.
    """
    return Path.home() / ".nvm"


def resolve_nvm_dir(configured: str | None = None) -> Path:
    """Resolve the base directory of the nvm installation.

    Priority:
    1. NVM_DIR environment variable
    2. ``nvm_dir`` from the configuration file
    3. ~/.nvm

    Args:
        configured: Value of ``nvm_dir`` from the configuration file, if any.

    Returns:
        Expanded path to the nvm directory. It is not required to exist.
    """
    env_dir = os.environ.get("NVM_DIR")
    if env_dir:
        return Path(env_dir).expanduser()
    if configured:
        return Path(configured).expanduser()
    return get_default_nvm_dir()


def get_version_dir(nvm_dir: Path, version: str) -> Path:
    """Get the installation directory of a Node version.

    Args:
        nvm_dir: Base directory of the nvm installation.
        version: Normalized version string (no leading 'v').

    Returns:
        Path to NVM_DIR/versions/node/v<version>.
    """
    return nvm_dir / NODE_VERSIONS_SUBDIR / f"v{version}"
