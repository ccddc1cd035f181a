"""Shared Rich display functions for action results."""

from rich.markup import escape
from rich.table import Table

from nvmprune.models.action import ActionResult
from nvmprune.utils.formatting import console, print_success


def create_results_table(results: list[ActionResult]) -> Table:
    """Create a Rich table displaying action results.

    Successful results show "OK" status; failed results show "FAIL" with
    the error message.

    Args:
        results: List of action results to display.

    Returns:
        Rich Table configured for results display.
    """
    table = Table(
        title="Results",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Status", width=8, justify="center")
    table.add_column("Action", width=10)
    table.add_column("Target", no_wrap=True)
    table.add_column("Message")

    for result in results:
        if result.success:
            status = "[success]OK[/success]"
            message = result.message or ""
        else:
            status = "[error]FAIL[/error]"
            message = result.error or "Unknown error"

        table.add_row(
            status,
            result.action.action_type.value,
            escape(result.action.target),
            f"[muted]{escape(message)}[/muted]",
        )

    return table


def print_results_summary(results: list[ActionResult]) -> None:
    """Print a summary of action results.

    Shows a success message when all actions succeed, or a count of
    succeeded/failed actions when there are failures. Produces no output
    for an empty list.

    Args:
        results: List of action results.
    """
    if not results:
        return

    success_count = sum(1 for r in results if r.success)
    fail_count = sum(1 for r in results if r.failed)

    if fail_count == 0:
        print_success(f"All {success_count} removal(s) completed successfully.")
    else:
        console.print(
            f"\n[success]{success_count} succeeded[/success], [error]{fail_count} failed[/error]"
        )
