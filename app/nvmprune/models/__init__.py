"""Data models for nvmprune.

This module exports the core data structures used throughout the application.
"""

from nvmprune.models.action import (
    Action,
    ActionResult,
    ActionType,
    create_remove_action,
    create_uninstall_action,
)
from nvmprune.models.package import GlobalPackage, NodeRuntime
from nvmprune.models.version import PrunePlan, normalize_version, sort_versions

__all__ = [
    "Action",
    "ActionResult",
    "ActionType",
    "GlobalPackage",
    "NodeRuntime",
    "PrunePlan",
    "create_remove_action",
    "create_uninstall_action",
    "normalize_version",
    "sort_versions",
]
