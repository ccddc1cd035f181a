"""Version uninstall workflow.

Reports the plan, then walks the candidates in order: versions missing
on disk are skipped, every other candidate is confirmed (unless
auto-confirmed) and uninstalled. The first failed uninstall aborts the
run.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from nvmprune.utils.formatting import (
    console,
    create_plan_table,
    print_info,
    print_success,
    print_warning,
)

if TYPE_CHECKING:
    from nvmprune.core.nvm import NvmEnvironment
    from nvmprune.core.prompt import Confirmer
    from nvmprune.models.action import ActionResult
    from nvmprune.models.version import PrunePlan
    from nvmprune.operators.base import VersionOperator

logger = logging.getLogger(__name__)


class UninstallAbortedError(RuntimeError):
    """Raised when an uninstall fails and the run must stop.

    Attributes:
        result: The failed uninstall result.
        remaining: Installed versions left at the point of failure.
    """

    def __init__(self, result: ActionResult, remaining: tuple[str, ...]) -> None:
        self.result = result
        self.remaining = remaining
        super().__init__(
            f"Uninstall of {result.action.target} failed: {result.error or 'unknown error'}"
        )


def _join(versions: tuple[str, ...]) -> str:
    return " ".join(versions) if versions else "none"


def report_plan(plan: PrunePlan, dry_run: bool = False) -> None:
    """Print installed, current, kept, and targeted versions.

    Args:
        plan: The computed uninstall plan.
        dry_run: Whether this is a dry-run.
    """
    if plan.installed:
        console.print(create_plan_table(plan, dry_run=dry_run))

    console.print(f"Installed via nvm: {_join(plan.installed)}", markup=False)
    if plan.current:
        console.print(f"Current in use: v{plan.current}", markup=False)
    if plan.keep:
        console.print(f"Explicitly keeping: {_join(plan.keep)}", markup=False)

    if plan.has_candidates:
        console.print(f"Will target for uninstall: {_join(plan.candidates)}", markup=False)
    else:
        print_success("Nothing to uninstall.")


class UninstallWorkflow:
    """Uninstalls the candidate versions of a plan.

    Attributes:
        env: nvm installation, used to detect versions missing on disk.
        operator: Operator performing the uninstalls.
        confirmer: Asks before each uninstall unless auto-confirmed.
    """

    def __init__(
        self,
        env: NvmEnvironment,
        operator: VersionOperator,
        confirmer: Confirmer,
    ) -> None:
        self._env = env
        self._operator = operator
        self._confirmer = confirmer

    def run(
        self,
        plan: PrunePlan,
        dry_run: bool = False,
        assume_yes: bool = False,
    ) -> tuple[str, ...]:
        """Execute the plan.

        Args:
            plan: The computed uninstall plan.
            dry_run: Report the plan only; never uninstall.
            assume_yes: Uninstall without asking.

        Returns:
            Installed versions minus the ones successfully uninstalled.

        Raises:
            UninstallAbortedError: If an uninstall fails.
        """
        report_plan(plan, dry_run=dry_run)

        if dry_run:
            print_info("[dry-run] No changes made.")
            return plan.installed

        if not plan.has_candidates:
            return plan.installed

        remaining = list(plan.installed)

        for version in plan.candidates:
            if not self._env.is_present(version):
                print_warning(f"Not present in nvm dir: v{version}. Skipping.")
                logger.debug("No directory at %s", self._env.version_dir(version))
                continue

            if assume_yes:
                console.print(f"Uninstalling v{version}", markup=False)
            elif not self._confirmer.confirm(f"Uninstall Node v{version}? [y/N] "):
                console.print(f"Skipping v{version}", markup=False)
                continue

            result = self._operator.uninstall(version)
            if result.failed:
                raise UninstallAbortedError(result, tuple(remaining))

            print_success(result.message or f"Uninstalled v{version}")
            remaining.remove(version)

        return tuple(remaining)
