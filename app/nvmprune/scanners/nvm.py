"""nvm version scanner implementation.

Lists installed versions with ``nvm ls`` and detects the active version
with ``node -v``.
"""

import logging
import re
import subprocess
from collections.abc import Iterator

from nvmprune.core.nvm import NvmCommandError, NvmEnvironment
from nvmprune.models.version import normalize_version
from nvmprune.scanners.base import VersionScanner
from nvmprune.utils.shell import run_command

logger = logging.getLogger(__name__)

# An installed-version line of `nvm ls --no-colors`: optional "->" marker,
# the version, optional "*" (system-installed marker). Alias lines such as
# "default -> 18 (-> v18.2.0)" never match.
_VERSION_LINE_RE = re.compile(r"^\s*(?:->)?\s*v(\d+\.\d+\.\d+)\s*\*?\s*$")


def parse_nvm_ls(output: str) -> list[str]:
    """Extract installed versions from ``nvm ls --no-colors`` output.

    Args:
        output: Raw stdout of nvm ls.

    Returns:
        Versions in output order, without a leading 'v'.
    """
    versions: list[str] = []
    for line in output.splitlines():
        match = _VERSION_LINE_RE.match(line)
        if match is None:
            if line.strip():
                logger.debug("Ignoring nvm ls line: %r", line[:100])
            continue
        versions.append(match.group(1))
    return versions


class NodeVersionScanner(VersionScanner):
    """Scanner for Node versions managed by nvm."""

    def __init__(self, env: NvmEnvironment) -> None:
        """Initialize the scanner.

        Args:
            env: Located nvm installation.
        """
        self._env = env

    def scan(self) -> Iterator[str]:
        """Yield versions listed by ``nvm ls``.

        Raises:
            NvmCommandError: If nvm ls exits with a non-zero status.
        """
        args = ["ls", "--no-colors"]
        result = self._env.run(args)
        if not result.success:
            raise NvmCommandError(args, result)

        yield from parse_nvm_ls(result.stdout)

    def current(self) -> str | None:
        """Return the version printed by ``node -v``.

        A missing node binary or a failing call means no current version,
        not an error.
        """
        try:
            result = run_command(["node", "-v"], timeout=30.0)
        except (FileNotFoundError, OSError, subprocess.TimeoutExpired) as e:
            logger.debug("node -v could not run: %s", e)
            return None

        if not result.success:
            logger.debug("node -v failed: %s", result.stderr.strip())
            return None

        version = normalize_version(result.stdout)
        return version or None
