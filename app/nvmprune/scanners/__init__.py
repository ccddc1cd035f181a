"""Read-only queries against nvm and npm.

This module exports the scanner classes for installed versions and
global packages.
"""

from nvmprune.scanners.base import PackageScanner, VersionScanner
from nvmprune.scanners.npm import GlobalPackageScanner
from nvmprune.scanners.nvm import NodeVersionScanner

__all__ = ["GlobalPackageScanner", "NodeVersionScanner", "PackageScanner", "VersionScanner"]
