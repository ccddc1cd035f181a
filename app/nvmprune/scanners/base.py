"""Abstract base classes for read-only queries.

A version scanner answers "which Node versions are installed and which
one is active"; a package scanner answers "which global packages does a
given Node version have".
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator

from nvmprune.models.package import GlobalPackage, NodeRuntime
from nvmprune.models.version import sort_versions


class VersionScanner(ABC):
    """Abstract base class for Node version queries.

    Example:
        >>> scanner = NodeVersionScanner(env)
        >>> scanner.installed()
        ('14.2.1', '16.3.0', '18.2.0')
    """

    @abstractmethod
    def scan(self) -> Iterator[str]:
        """Yield installed versions as reported by the version manager.

        Yields:
            Normalized version strings, possibly repeated and unordered.

        Raises:
            RuntimeError: If the version manager query fails.
        """

    @abstractmethod
    def current(self) -> str | None:
        """Return the active version, or None if it cannot be determined."""

    def installed(self) -> tuple[str, ...]:
        """Return installed versions, de-duplicated and sorted ascending."""
        return sort_versions(self.scan())


class PackageScanner(ABC):
    """Abstract base class for global package queries."""

    @abstractmethod
    def is_available(self, runtime: NodeRuntime) -> bool:
        """Check if the package manager exists for a runtime."""

    @abstractmethod
    def scan(self, runtime: NodeRuntime) -> Iterator[GlobalPackage]:
        """Yield the global packages of a runtime.

        The package manager's own bootstrap package is never yielded.

        Args:
            runtime: Node runtime whose global prefix is listed.

        Yields:
            GlobalPackage for each reviewable package.
        """
