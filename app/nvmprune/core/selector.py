"""Uninstall candidate selection.

A version is protected when it is the active version or explicitly kept;
every other installed version is a candidate for removal.
"""

from collections.abc import Iterable

from nvmprune.models.version import PrunePlan, normalize_version, unique_in_order


def select_candidates(
    installed: Iterable[str],
    current: str | None,
    keep: Iterable[str],
) -> tuple[str, ...]:
    """Compute the versions eligible for removal.

    Args:
        installed: Installed versions, in the order to preserve.
        current: Active version, or None/empty if unknown.
        keep: Explicitly kept versions; a leading 'v' is ignored.

    Returns:
        Installed versions that are neither current nor kept, in input order.
    """
    protected = {normalize_version(k) for k in keep}
    if current:
        protected.add(normalize_version(current))
    return tuple(v for v in installed if v not in protected)


def build_plan(
    installed: Iterable[str],
    current: str | None,
    keep: Iterable[str],
) -> PrunePlan:
    """Build the immutable plan for one run.

    Args:
        installed: Installed versions, sorted ascending.
        current: Active version, or None if unknown.
        keep: Kept versions from --keep and the config file.

    Returns:
        PrunePlan with normalized keep-list and computed candidates.
    """
    installed_versions = tuple(installed)
    current_version = normalize_version(current) if current else None
    keep_versions = unique_in_order(keep)
    return PrunePlan(
        installed=installed_versions,
        current=current_version or None,
        keep=keep_versions,
        candidates=select_candidates(installed_versions, current_version, keep_versions),
    )
