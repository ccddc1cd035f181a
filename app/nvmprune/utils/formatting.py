"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from nvmprune.core.theme import get_theme

if TYPE_CHECKING:
    from nvmprune.models.version import PrunePlan


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{escape(message)}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{escape(message)}[/]")


def create_plan_table(plan: PrunePlan, dry_run: bool = False) -> Table:
    """Create a table listing installed versions and what happens to them.

    Args:
        plan: The computed uninstall plan.
        dry_run: Whether this is a dry-run (changes table title).

    Returns:
        Rich Table with one row per installed version.
    """
    title = "Installed Node Versions (Dry Run)" if dry_run else "Installed Node Versions"

    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Version", no_wrap=True)
    table.add_column("Status")

    for version in plan.installed:
        status = plan.status_of(version)
        if status == "current":
            label = "[version.current]in use[/]"
        elif status == "kept":
            label = "[version.kept]kept[/]"
        else:
            label = "[version.candidate]uninstall[/]"
        table.add_row(f"v{version}", label)

    return table
