"""Global npm package and Node runtime models."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True, slots=True)
class NodeRuntime:
    """A Node version resolved to its on-disk installation.

    Passed explicitly to every npm call so each query states which
    version it targets.

    Attributes:
        version: Normalized version string.
        install_dir: NVM_DIR/versions/node/v<version>.
    """

    version: str
    install_dir: Path

    @property
    def bin_dir(self) -> Path:
        """Directory holding the node and npm executables."""
        return self.install_dir / "bin"


@dataclass(frozen=True, slots=True)
class GlobalPackage:
    """A package installed globally for one Node version.

    Attributes:
        name: Package name (e.g., 'typescript', '@angular/cli').
        node_version: Node version whose global prefix holds the package.
        version: Installed package version, if npm reported one.
    """

    name: str
    node_version: str
    version: str | None = field(default=None)

    def __post_init__(self) -> None:
        """Validate package data after initialization."""
        if not self.name:
            msg = "Package name cannot be empty"
            raise ValueError(msg)

    @property
    def label(self) -> str:
        """Return 'name@version' when the version is known."""
        if self.version:
            return f"{self.name}@{self.version}"
        return self.name
