"""CLI package for nvmprune.

This package contains the Typer application.
"""

from nvmprune.cli.main import app

__all__ = ["app"]
