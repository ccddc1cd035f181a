"""nvm environment discovery and command execution.

nvm is a shell function rather than an executable, so every nvm command
runs in a fresh bash process that sources ``nvm.sh`` first. Versions are
resolved to explicit :class:`NodeRuntime` objects instead of relying on
nvm's process-wide "current version".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from nvmprune.core.paths import get_version_dir, resolve_nvm_dir
from nvmprune.models.package import NodeRuntime
from nvmprune.utils.shell import CommandResult, command_exists, run_command

logger = logging.getLogger(__name__)

# Sources nvm.sh ($1) without activating a version, then runs nvm with the
# remaining arguments.
_NVM_WRAPPER = '. "$1" --no-use && shift && nvm "$@"'


class NvmError(RuntimeError):
    """Base exception for nvm problems."""


class NvmNotFoundError(NvmError):
    """Raised when no nvm installation can be located."""


class NvmCommandError(NvmError):
    """Raised when an nvm command exits with a non-zero status."""

    def __init__(self, args: list[str], result: CommandResult) -> None:
        self.args_used = args
        self.result = result
        detail = result.stderr.strip() or result.stdout.strip() or "no output"
        super().__init__(f"nvm {' '.join(args)} failed (exit {result.returncode}): {detail}")


class VersionNotInstalledError(NvmError):
    """Raised when a version has no installation directory on disk."""


def _is_nonempty_file(path: Path) -> bool:
    """Mirror the shell's ``-s`` test."""
    try:
        return path.is_file() and path.stat().st_size > 0
    except OSError:
        return False


def _brew_nvm_script() -> Path | None:
    """Locate nvm.sh inside a Homebrew installation, if any.

    Returns:
        Path to $(brew --prefix)/opt/nvm/nvm.sh, or None.
    """
    if not command_exists("brew"):
        return None
    try:
        result = run_command(["brew", "--prefix"], timeout=30.0)
    except (FileNotFoundError, OSError) as e:
        logger.debug("brew --prefix could not run: %s", e)
        return None
    if not result.success or not result.stdout.strip():
        return None
    script = Path(result.stdout.strip()) / "opt" / "nvm" / "nvm.sh"
    return script if _is_nonempty_file(script) else None


def locate_nvm_script(nvm_dir: Path) -> Path:
    """Find the nvm.sh script to source.

    Args:
        nvm_dir: Base directory of the nvm installation.

    Returns:
        Path to nvm.sh in nvm_dir, or in the Homebrew prefix as fallback.

    Raises:
        NvmNotFoundError: If neither location has a non-empty nvm.sh.
    """
    script = nvm_dir / "nvm.sh"
    if _is_nonempty_file(script):
        return script

    brew_script = _brew_nvm_script()
    if brew_script is not None:
        logger.debug("Using Homebrew nvm at %s", brew_script)
        return brew_script

    msg = "Could not find nvm. Set NVM_DIR or install nvm."
    raise NvmNotFoundError(msg)


@dataclass(frozen=True, slots=True)
class NvmEnvironment:
    """A located nvm installation.

    Attributes:
        nvm_dir: Base directory holding installed versions (NVM_DIR).
        script: The nvm.sh file sourced before every nvm command.
        timeout: Per-command timeout in seconds.
    """

    nvm_dir: Path
    script: Path
    timeout: float = 300.0

    @classmethod
    def discover(cls, configured_dir: str | None = None, timeout: float = 300.0) -> NvmEnvironment:
        """Locate nvm from NVM_DIR, the config file, or ~/.nvm.

        Args:
            configured_dir: ``nvm_dir`` from the configuration file, if any.
            timeout: Per-command timeout in seconds.

        Returns:
            NvmEnvironment ready to run commands.

        Raises:
            NvmNotFoundError: If nvm cannot be located.
        """
        nvm_dir = resolve_nvm_dir(configured_dir)
        script = locate_nvm_script(nvm_dir)
        logger.debug("Located nvm: NVM_DIR=%s script=%s", nvm_dir, script)
        return cls(nvm_dir=nvm_dir, script=script, timeout=timeout)

    def run(self, args: list[str]) -> CommandResult:
        """Run an nvm command in a fresh bash process.

        Args:
            args: Arguments passed to the nvm function (e.g. ["ls", "--no-colors"]).

        Returns:
            CommandResult of the bash process.

        Raises:
            FileNotFoundError: If bash is not installed.
            subprocess.TimeoutExpired: If the command exceeds the timeout.
        """
        command = ["bash", "-c", _NVM_WRAPPER, "nvmprune", str(self.script), *args]
        logger.debug("Running nvm %s", " ".join(args))
        return run_command(
            command,
            timeout=self.timeout,
            env={"NVM_DIR": str(self.nvm_dir)},
        )

    def version_dir(self, version: str) -> Path:
        """Installation directory of a version."""
        return get_version_dir(self.nvm_dir, version)

    def is_present(self, version: str) -> bool:
        """Check if a version has an installation directory on disk."""
        return self.version_dir(version).is_dir()

    def use(self, version: str) -> NodeRuntime:
        """Switch to a version for subsequent package queries.

        Args:
            version: Normalized version string.

        Returns:
            NodeRuntime describing the version's installation.

        Raises:
            VersionNotInstalledError: If the version is not on disk.
        """
        install_dir = self.version_dir(version)
        if not install_dir.is_dir():
            msg = f"Node v{version} is not installed in {install_dir.parent}"
            raise VersionNotInstalledError(msg)
        logger.debug("Using Node v%s from %s", version, install_dir)
        return NodeRuntime(version=version, install_dir=install_dir)
