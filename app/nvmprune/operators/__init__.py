"""Mutating operations against nvm and npm.

This module exports the operator classes for uninstalling versions and
removing global packages.
"""

from nvmprune.operators.base import PackageOperator, VersionOperator
from nvmprune.operators.npm import NpmOperator
from nvmprune.operators.nvm import NvmOperator

__all__ = ["NpmOperator", "NvmOperator", "PackageOperator", "VersionOperator"]
