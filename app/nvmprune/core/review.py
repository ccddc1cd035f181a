"""Global npm package review workflow.

Visits every remaining Node version, lists its global packages and
offers to remove them one by one. A failed removal is reported and the
review moves on.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from nvmprune.core.nvm import VersionNotInstalledError
from nvmprune.utils.formatting import console, print_success, print_warning

if TYPE_CHECKING:
    from collections.abc import Iterable

    from nvmprune.core.nvm import NvmEnvironment
    from nvmprune.core.prompt import Confirmer
    from nvmprune.models.action import ActionResult
    from nvmprune.operators.base import PackageOperator
    from nvmprune.scanners.base import PackageScanner

logger = logging.getLogger(__name__)


class GlobalsReviewWorkflow:
    """Offers per-package removal of global packages.

    Attributes:
        env: nvm installation used to resolve each version's runtime.
        scanner: Lists the global packages of a runtime.
        operator: Removes a global package from a runtime.
        confirmer: Asks before each removal.
    """

    def __init__(
        self,
        env: NvmEnvironment,
        scanner: PackageScanner,
        operator: PackageOperator,
        confirmer: Confirmer,
    ) -> None:
        self._env = env
        self._scanner = scanner
        self._operator = operator
        self._confirmer = confirmer

    def run(self, remaining: Iterable[str]) -> list[ActionResult]:
        """Review every version in order.

        Args:
            remaining: Versions left after the uninstall step.

        Returns:
            Results of every attempted removal.
        """
        versions = tuple(remaining)
        console.print()
        console.print(
            "Reviewing global npm packages for remaining versions: "
            f"{' '.join(versions) if versions else 'none'}",
            markup=False,
        )

        results: list[ActionResult] = []
        for version in versions:
            results.extend(self.review_version(version))
        return results

    def review_version(self, version: str) -> list[ActionResult]:
        """Review the global packages of one version.

        Args:
            version: Normalized version string.

        Returns:
            Results of the removals attempted for this version.
        """
        console.print(f"[header]----- Global npm review for v{version} -----[/]")

        try:
            runtime = self._env.use(version)
        except VersionNotInstalledError as e:
            print_warning(f"{e}. Skipping.")
            return []

        if not self._scanner.is_available(runtime):
            print_warning(f"npm not found for v{version}. Skipping.")
            return []

        packages = list(self._scanner.scan(runtime))
        if not packages:
            console.print("No global packages (besides npm).", markup=False)
            return []

        console.print("Found:")
        for package in packages:
            console.print(f"  - {package.label}", markup=False)

        results: list[ActionResult] = []
        for package in packages:
            prompt = f"Remove global package '{package.name}' from v{version}? [y/N] "
            if not self._confirmer.confirm(prompt):
                console.print(f"Keeping {package.name}", markup=False)
                continue

            result = self._operator.remove(runtime, package.name)
            results.append(result)
            if result.success:
                print_success(f"Removed {package.name}")
            else:
                logger.debug("Removal of %s failed: %s", package.name, result.error)
                print_warning(f"Failed to remove {package.name} (continuing).")

        return results
