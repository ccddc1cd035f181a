"""Node version models.

Versions are plain ``major.minor.patch`` strings without a leading 'v'.
This module holds the helpers that normalize and order them, and the
immutable plan computed once per run.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass

_SEMVER_RE = re.compile(r"^(\d+)\.(\d+)\.(\d+)$")


def normalize_version(raw: str) -> str:
    """Normalize a version string.

    Strips surrounding whitespace and a single leading 'v' or 'V'.

    Args:
        raw: Version as typed by the user or printed by a tool.

    Returns:
        Normalized version string, e.g. '18.2.0'.
    """
    version = raw.strip()
    if version[:1] in ("v", "V"):
        version = version[1:]
    return version


def is_semver(version: str) -> bool:
    """Check if a normalized version has the major.minor.patch form."""
    return _SEMVER_RE.match(version) is not None


def version_key(version: str) -> tuple[int, int, int]:
    """Sort key ordering versions numerically.

    Args:
        version: Normalized major.minor.patch string.

    Returns:
        Tuple of (major, minor, patch).

    Raises:
        ValueError: If the version is not major.minor.patch.
    """
    match = _SEMVER_RE.match(version)
    if match is None:
        msg = f"Not a major.minor.patch version: {version!r}"
        raise ValueError(msg)
    return int(match.group(1)), int(match.group(2)), int(match.group(3))


def sort_versions(versions: Iterable[str]) -> tuple[str, ...]:
    """De-duplicate and sort versions ascending.

    Args:
        versions: Normalized major.minor.patch strings.

    Returns:
        Tuple of unique versions in ascending numeric order.
    """
    return tuple(sorted(set(versions), key=version_key))


def unique_in_order(versions: Iterable[str]) -> tuple[str, ...]:
    """Normalize versions and drop duplicates, keeping first-seen order."""
    seen: dict[str, None] = {}
    for raw in versions:
        version = normalize_version(raw)
        if version:
            seen.setdefault(version, None)
    return tuple(seen)


@dataclass(frozen=True, slots=True)
class PrunePlan:
    """The uninstall plan computed once at the start of a run.

    Attributes:
        installed: Installed versions, sorted ascending.
        current: Active version reported by node, or None if unknown.
        keep: Explicitly kept versions (normalized, de-duplicated).
        candidates: Installed versions eligible for removal, in installed order.
    """

    installed: tuple[str, ...]
    current: str | None
    keep: tuple[str, ...]
    candidates: tuple[str, ...]

    @property
    def has_candidates(self) -> bool:
        """Check if anything is eligible for removal."""
        return bool(self.candidates)

    def status_of(self, version: str) -> str:
        """Describe why a version is or isn't targeted.

        Returns:
            'current', 'kept' or 'candidate'.
        """
        if self.current and version == self.current:
            return "current"
        if version in self.keep:
            return "kept"
        return "candidate"
