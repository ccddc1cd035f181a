"""Self-update from a remote URL.

Replaces the running program with the body fetched from a URL. Kept
separate from the uninstall and review workflows; nothing else runs in
an update invocation.
"""

import logging
import os
import stat
from pathlib import Path
from tempfile import NamedTemporaryFile

import requests
from requests.exceptions import RequestException

import nvmprune

logger = logging.getLogger(__name__)

# Seconds to wait for the update server
DEFAULT_TIMEOUT: float = 30.0

_PACKAGE_DIR = Path(nvmprune.__file__).resolve().parent


def _executable_mode(mode: int) -> int:
    """Add execute bits wherever read is allowed, like ``chmod +x``."""
    if mode & stat.S_IRUSR:
        mode |= stat.S_IXUSR
    if mode & stat.S_IRGRP:
        mode |= stat.S_IXGRP
    if mode & stat.S_IROTH:
        mode |= stat.S_IXOTH
    return mode


def is_standalone_program(target: Path) -> bool:
    """Check if a path is a program file that may be replaced.

    Python sources and anything inside the installed package are refused;
    under ``python -m nvmprune`` the running program is the package itself.
    """
    resolved = target.resolve()
    if resolved.suffix == ".py":
        return False
    return not resolved.is_relative_to(_PACKAGE_DIR)


def fetch_update(url: str, timeout: float = DEFAULT_TIMEOUT) -> bytes:
    """Download the latest program body.

    Args:
        url: Remote location of the program.
        timeout: Seconds to wait for the server.

    Returns:
        Response body.

    Raises:
        requests.exceptions.RequestException: On network or HTTP errors.
    """
    response = requests.get(url, timeout=timeout)
    response.raise_for_status()
    return response.content


def replace_file(target: Path, content: bytes) -> None:
    """Atomically replace a file and mark it executable.

    The content is written to a temporary file in the same directory and
    renamed over the target with os.replace().

    Args:
        target: File to replace.
        content: New file content.

    Raises:
        OSError: If the file cannot be written.
    """
    try:
        mode = stat.S_IMODE(target.stat().st_mode)
    except FileNotFoundError:
        mode = 0o644

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=target.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            f.write(content)
        os.chmod(tmp_path, _executable_mode(mode))
        os.replace(tmp_path, target)
    except OSError:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise


def update_self(target: Path, url: str, timeout: float = DEFAULT_TIMEOUT) -> bool:
    """Replace ``target`` with the content served at ``url``.

    Args:
        target: Path of the running program.
        url: Remote location of the latest version.
        timeout: Seconds to wait for the server.

    Returns:
        True if the file was replaced, False if the target is not a
        standalone program or fetching or writing failed.
    """
    if not is_standalone_program(target):
        logger.warning("Refusing to replace %s: not a standalone program file", target)
        return False

    logger.info("Updating %s from %s", target, url)
    try:
        content = fetch_update(url, timeout=timeout)
    except RequestException as e:
        logger.warning("Self-update download failed: %s", e)
        return False

    try:
        replace_file(target, content)
    except OSError as e:
        logger.warning("Self-update could not write %s: %s", target, e)
        return False

    logger.debug("Wrote %d bytes to %s", len(content), target)
    return True
