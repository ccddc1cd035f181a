"""Abstract base classes for mutating operations.

Operators never raise for a failed external command; they report the
outcome as an :class:`ActionResult` and leave the failure policy to the
calling workflow.
"""

from abc import ABC, abstractmethod

from nvmprune.models.action import ActionResult
from nvmprune.models.package import NodeRuntime


class VersionOperator(ABC):
    """Abstract base class for removing Node versions.

    Example:
        >>> operator = NvmOperator(env)
        >>> result = operator.uninstall("16.3.0")
        >>> result.success
        True
    """

    @abstractmethod
    def uninstall(self, version: str) -> ActionResult:
        """Uninstall one Node version.

        Args:
            version: Normalized version string.

        Returns:
            ActionResult describing the outcome.
        """


class PackageOperator(ABC):
    """Abstract base class for removing global packages."""

    @abstractmethod
    def remove(self, runtime: NodeRuntime, package: str) -> ActionResult:
        """Remove one global package from a runtime.

        Args:
            runtime: Node runtime whose global prefix holds the package.
            package: Package name.

        Returns:
            ActionResult describing the outcome.
        """
