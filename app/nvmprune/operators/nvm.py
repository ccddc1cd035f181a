"""nvm version operator implementation.

Uninstalls Node versions with ``nvm uninstall``.
"""

import logging
import subprocess

from nvmprune.core.nvm import NvmEnvironment
from nvmprune.models.action import ActionResult, create_uninstall_action
from nvmprune.operators.base import VersionOperator

logger = logging.getLogger(__name__)


class NvmOperator(VersionOperator):
    """Operator removing Node versions through nvm."""

    def __init__(self, env: NvmEnvironment) -> None:
        """Initialize the operator.

        Args:
            env: Located nvm installation.
        """
        self._env = env

    def uninstall(self, version: str) -> ActionResult:
        """Uninstall a Node version with ``nvm uninstall``.

        Args:
            version: Normalized version string.

        Returns:
            ActionResult; failures carry nvm's own error output.
        """
        action = create_uninstall_action(version)
        logger.info("Executing nvm uninstall v%s", version)

        try:
            result = self._env.run(["uninstall", version])
        except (FileNotFoundError, OSError, subprocess.TimeoutExpired) as e:
            logger.error("nvm uninstall v%s could not run: %s", version, e)
            return ActionResult(action=action, success=False, error=str(e))

        if not result.success:
            error = result.stderr.strip() or result.stdout.strip() or "nvm uninstall failed"
            logger.error("nvm uninstall v%s failed: %s", version, error)
            return ActionResult(action=action, success=False, error=error)

        message = result.stdout.strip() or f"Uninstalled node v{version}"
        logger.debug("nvm uninstall v%s: %s", version, message)
        return ActionResult(action=action, success=True, message=message)
