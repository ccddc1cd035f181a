"""npm global package operator implementation.

Removes global packages with ``npm -g rm``.
"""

import logging
import subprocess

from nvmprune.models.action import ActionResult, create_remove_action
from nvmprune.models.package import NodeRuntime
from nvmprune.operators.base import PackageOperator
from nvmprune.scanners.npm import runtime_env
from nvmprune.utils.shell import run_command

logger = logging.getLogger(__name__)


class NpmOperator(PackageOperator):
    """Operator removing global npm packages."""

    def __init__(self, timeout: float = 300.0) -> None:
        """Initialize the operator.

        Args:
            timeout: Timeout in seconds for each npm call.
        """
        self._timeout = timeout

    def remove(self, runtime: NodeRuntime, package: str) -> ActionResult:
        """Remove a global package with the runtime's npm.

        Args:
            runtime: Node runtime whose global prefix holds the package.
            package: Package name.

        Returns:
            ActionResult; failures carry npm's error output.
        """
        action = create_remove_action(package, runtime.version)
        logger.info("Executing npm -g rm %s for v%s", package, runtime.version)

        try:
            result = run_command(
                ["npm", "-g", "rm", package],
                timeout=self._timeout,
                env=runtime_env(runtime),
            )
        except (FileNotFoundError, OSError, subprocess.TimeoutExpired) as e:
            logger.warning("npm -g rm %s could not run: %s", package, e)
            return ActionResult(action=action, success=False, error=str(e))

        if not result.success:
            error = result.stderr.strip() or "npm -g rm failed"
            logger.warning("npm -g rm %s failed: %s", package, error)
            return ActionResult(action=action, success=False, error=error)

        return ActionResult(action=action, success=True, message=f"Removed {package}")
