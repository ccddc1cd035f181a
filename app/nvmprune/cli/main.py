"""Main CLI application entry point.

Defines the Typer application: a single command that prunes nvm-managed
Node versions, optionally reviews global npm packages, or self-updates.
"""

import logging
import subprocess
import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.logging import RichHandler

from nvmprune import __version__
from nvmprune.cli.display import create_results_table, print_results_summary
from nvmprune.core.config import ConfigError, PruneConfig, load_config
from nvmprune.core.nvm import NvmEnvironment, NvmError, NvmNotFoundError
from nvmprune.core.prompt import Confirmer, get_line_reader
from nvmprune.core.prune import UninstallAbortedError, UninstallWorkflow
from nvmprune.core.review import GlobalsReviewWorkflow
from nvmprune.core.selector import build_plan
from nvmprune.core.selfupdate import update_self
from nvmprune.models.version import is_semver, normalize_version
from nvmprune.operators.npm import NpmOperator
from nvmprune.operators.nvm import NvmOperator
from nvmprune.scanners.npm import GlobalPackageScanner
from nvmprune.scanners.nvm import NodeVersionScanner
from nvmprune.utils.formatting import console, err_console, print_error, print_warning

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="nvmprune",
    help="Remove Node versions managed by nvm, except your current version.",
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"nvmprune version {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    """Route log records to the error console.

    Args:
        verbose: Emit DEBUG records instead of WARNING and above.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _run_self_update() -> None:
    """Replace the running program and exit 0, whatever the outcome."""
    try:
        config = load_config()
    except ConfigError as e:
        print_warning(f"Ignoring config: {e}")
        config = PruneConfig()

    target = Path(sys.argv[0]).resolve()
    console.print(f"Updating {target} from {config.update_url} ...", markup=False)

    if update_self(target, config.update_url):
        console.print("Update complete.")
    else:
        console.print("Update failed.")
    raise typer.Exit(code=0)


def _check_keep_values(keep: list[str]) -> None:
    """Warn about --keep values that can never match an installed version."""
    for value in keep:
        if not is_semver(normalize_version(value)):
            print_warning(f"--keep {value} is not a major.minor.patch version")


@app.command()
def prune(
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            "-n",
            help="Show what would happen. No uninstalls.",
        ),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option(
            "--yes",
            "-y",
            help="Do not prompt. Uninstall all candidates.",
        ),
    ] = False,
    keep: Annotated[
        list[str] | None,
        typer.Option(
            "--keep",
            metavar="vX.Y.Z",
            help="Keep a specific version. Repeat as needed.",
        ),
    ] = None,
    review_globals: Annotated[
        bool,
        typer.Option(
            "--review-globals",
            help="After uninstalls, review remaining versions' global npm packages "
            "and optionally remove them package-by-package.",
        ),
    ] = False,
    self_update: Annotated[
        bool,
        typer.Option(
            "--update-self",
            help="Replace this program with the latest version and exit.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Remove Node versions managed by nvm, except your current version.

    The current version and every --keep version (plus any listed in the
    config file) are never uninstalled.

    Examples:
        nvmprune --dry-run                  # Preview the plan
        nvmprune --yes --keep v18.20.4      # Uninstall the rest without asking
        nvmprune --review-globals           # Also review global npm packages
    """
    _configure_logging(verbose)

    if self_update:
        _run_self_update()

    try:
        config = load_config()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    keep_values = [*config.keep, *(keep or [])]
    _check_keep_values(keep_values)

    try:
        env = NvmEnvironment.discover(config.nvm_dir, timeout=float(config.command_timeout))
    except NvmNotFoundError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    scanner = NodeVersionScanner(env)
    try:
        installed = scanner.installed()
    except (NvmError, FileNotFoundError, OSError, subprocess.TimeoutExpired) as e:
        print_error(f"Could not list installed versions: {e}")
        raise typer.Exit(code=1) from e

    plan = build_plan(installed, scanner.current(), keep_values)
    confirmer = Confirmer(get_line_reader())

    workflow = UninstallWorkflow(env, NvmOperator(env), confirmer)
    try:
        remaining = workflow.run(plan, dry_run=dry_run, assume_yes=yes)
    except UninstallAbortedError as e:
        print_error(str(e))
        removed = [v for v in plan.installed if v not in e.remaining]
        if removed:
            console.print(f"Uninstalled before the failure: {' '.join(removed)}", markup=False)
        raise typer.Exit(code=1) from e

    if dry_run:
        return

    if review_globals:
        timeout = float(config.command_timeout)
        review = GlobalsReviewWorkflow(
            env,
            GlobalPackageScanner(timeout=timeout),
            NpmOperator(timeout=timeout),
            confirmer,
        )
        results = review.run(remaining)
        if results:
            console.print(create_results_table(results))
            print_results_summary(results)

    console.print("Done.")


if __name__ == "__main__":
    app()
