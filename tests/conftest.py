"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from pathlib import Path

import pytest
from nvmprune.core.nvm import NvmEnvironment


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the config directory at an empty temporary location."""
    config_home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def nvm_dir(tmp_path: Path) -> Path:
    """Create a minimal nvm installation directory."""
    root = tmp_path / ".nvm"
    (root / "versions" / "node").mkdir(parents=True)
    (root / "nvm.sh").write_text("nvm() { :; }\n")
    return root


@pytest.fixture
def nvm_env(nvm_dir: Path) -> NvmEnvironment:
    """NvmEnvironment backed by the temporary nvm directory."""
    return NvmEnvironment(nvm_dir=nvm_dir, script=nvm_dir / "nvm.sh", timeout=10.0)


@pytest.fixture
def install_versions(nvm_dir: Path) -> Callable[..., None]:
    """Create on-disk installation directories for versions."""

    def _install(*versions: str, with_npm: bool = True) -> None:
        for version in versions:
            bin_dir = nvm_dir / "versions" / "node" / f"v{version}" / "bin"
            bin_dir.mkdir(parents=True)
            if with_npm:
                (bin_dir / "npm").write_text("#!/bin/sh\n")

    return _install


@pytest.fixture
def mock_nvm_ls_output() -> str:
    """Sample `nvm ls --no-colors` output for testing."""
    return """        v14.2.1
        v16.3.0
->      v18.2.0
         system
default -> 18 (-> v18.2.0)
iojs -> N/A (default)
unstable -> N/A (default)
node -> stable (-> v18.2.0) (default)
stable -> 18.2 (-> v18.2.0) (default)
lts/* -> lts/hydrogen (-> N/A)
lts/gallium -> v16.20.2 (-> N/A)"""


@pytest.fixture
def mock_npm_ls_output() -> str:
    """Sample `npm -g ls --depth=0 --json` output for testing."""
    return """{
  "name": "lib",
  "dependencies": {
    "corepack": {"version": "0.17.0", "overridden": false},
    "npm": {"version": "9.6.7", "overridden": false},
    "typescript": {"version": "5.4.5", "overridden": false}
  }
}"""


@pytest.fixture
def mock_empty_output() -> str:
    """Empty output for testing edge cases."""
    return ""
