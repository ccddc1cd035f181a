"""npm global package scanner implementation.

Lists the global packages of one Node version with
``npm -g ls --depth=0 --json``.
"""

import json
import logging
import os
import subprocess
from collections.abc import Iterator
from typing import Any

from nvmprune.models.package import GlobalPackage, NodeRuntime
from nvmprune.scanners.base import PackageScanner
from nvmprune.utils.shell import run_command

logger = logging.getLogger(__name__)

# npm ships as a global package of every Node version and is never reviewed
BOOTSTRAP_PACKAGE = "npm"


def runtime_env(runtime: NodeRuntime) -> dict[str, str]:
    """Environment that makes ``node`` and ``npm`` resolve to a runtime.

    Args:
        runtime: Node runtime to target.

    Returns:
        Environment overrides with the runtime's bin directory first on PATH.
    """
    path = os.environ.get("PATH", "")
    bin_dir = str(runtime.bin_dir)
    return {"PATH": f"{bin_dir}{os.pathsep}{path}" if path else bin_dir}


def parse_npm_ls(output: str, node_version: str) -> list[GlobalPackage]:
    """Parse ``npm ls --json`` output into global packages.

    Unparseable or empty output yields no packages.

    Args:
        output: Raw stdout of npm ls.
        node_version: Version owning the global prefix.

    Returns:
        Packages in listing order, excluding npm itself.
    """
    if not output.strip():
        return []

    try:
        data: Any = json.loads(output)
    except json.JSONDecodeError as e:
        logger.debug("Unparseable npm ls output: %s", e)
        return []

    if not isinstance(data, dict):
        return []

    dependencies = data.get("dependencies") or {}
    if not isinstance(dependencies, dict):
        return []

    packages: list[GlobalPackage] = []
    for name, info in dependencies.items():
        if not name or name == BOOTSTRAP_PACKAGE:
            continue
        version = info.get("version") if isinstance(info, dict) else None
        packages.append(
            GlobalPackage(
                name=name,
                node_version=node_version,
                version=version if isinstance(version, str) else None,
            )
        )
    return packages


class GlobalPackageScanner(PackageScanner):
    """Scanner for global npm packages."""

    def __init__(self, timeout: float = 300.0) -> None:
        """Initialize the scanner.

        Args:
            timeout: Timeout in seconds for each npm call.
        """
        self._timeout = timeout

    def is_available(self, runtime: NodeRuntime) -> bool:
        """Check if the runtime ships an npm executable."""
        return (runtime.bin_dir / "npm").exists()

    def scan(self, runtime: NodeRuntime) -> Iterator[GlobalPackage]:
        """Yield the global packages of a runtime.

        npm ls exits non-zero for problems such as missing peer
        dependencies while still printing a valid listing, so the exit
        status is only logged. Failing to run npm at all yields nothing.

        Args:
            runtime: Node runtime whose global prefix is listed.

        Yields:
            GlobalPackage for each package except npm itself.
        """
        args = ["npm", "-g", "ls", "--depth=0", "--json"]
        logger.debug("Listing global packages for v%s", runtime.version)

        try:
            result = run_command(args, timeout=self._timeout, env=runtime_env(runtime))
        except (FileNotFoundError, OSError, subprocess.TimeoutExpired) as e:
            logger.warning("npm ls could not run for v%s: %s", runtime.version, e)
            return

        if not result.success:
            logger.debug(
                "npm ls exited %d for v%s: %s",
                result.returncode,
                runtime.version,
                result.stderr.strip()[:200],
            )

        yield from parse_npm_ls(result.stdout, runtime.version)
