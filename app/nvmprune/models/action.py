"""Action models for nvm and npm operations.

This module defines data structures for the two mutations nvmprune
performs (uninstalling a Node version, removing a global package) and
their execution results.
"""

from dataclasses import dataclass
from enum import Enum


class ActionType(Enum):
    """Type of mutation.

    Attributes:
        UNINSTALL: Uninstall a Node version through nvm.
        REMOVE: Remove a global npm package from one Node version.
    """

    UNINSTALL = "uninstall"
    REMOVE = "remove"


@dataclass(frozen=True, slots=True)
class Action:
    """Represents a single mutation to be executed.

    Attributes:
        action_type: The type of action.
        node_version: Node version the action applies to.
        package: Global package name for REMOVE actions, None otherwise.
    """

    action_type: ActionType
    node_version: str
    package: str | None = None

    def __post_init__(self) -> None:
        """Validate action data after initialization."""
        if not self.node_version:
            msg = "Node version cannot be empty"
            raise ValueError(msg)
        if self.action_type == ActionType.REMOVE and not self.package:
            msg = "Remove actions need a package name"
            raise ValueError(msg)

    @property
    def target(self) -> str:
        """Human-readable target of the action."""
        if self.package:
            return f"{self.package} (v{self.node_version})"
        return f"v{self.node_version}"


@dataclass(frozen=True, slots=True)
class ActionResult:
    """Result of executing an action.

    Attributes:
        action: The action that was executed.
        success: Whether the action completed successfully.
        message: Optional success message or additional information.
        error: Optional error message if the action failed.
    """

    action: Action
    success: bool
    message: str | None = None
    error: str | None = None

    @property
    def failed(self) -> bool:
        """Check if the action failed."""
        return not self.success


def create_uninstall_action(version: str) -> Action:
    """Create an action uninstalling a Node version."""
    return Action(action_type=ActionType.UNINSTALL, node_version=version)


def create_remove_action(package: str, version: str) -> Action:
    """Create an action removing a global package from a Node version."""
    return Action(action_type=ActionType.REMOVE, node_version=version, package=package)
