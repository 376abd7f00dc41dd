"""CLI commands for macrm.

This package contains all subcommand implementations.
"""

from macrm.cli.commands import config, info, listing, remove, search

__all__ = ["config", "info", "listing", "remove", "search"]
