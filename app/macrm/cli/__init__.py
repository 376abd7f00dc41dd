"""CLI package for macrm.

This package contains the Typer application and all subcommands.
"""

from macrm.cli.main import app

__all__ = ["app"]
