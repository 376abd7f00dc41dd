"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from macrm import __version__
from macrm.cli.commands import config, info, listing, remove, search
from macrm.utils.formatting import err_console

# Create main Typer app
app = typer.Typer(
    name="macrm",
    help="Remove macOS applications together with their leftover files.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"macrm version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route log records to stderr through Rich.

    Args:
        verbose: If True, log at DEBUG level, otherwise WARNING.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
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
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
) -> None:
    """macrm - Remove macOS applications and their residual files.

    Finds .app bundles in /Applications and ~/Applications, locates the
    caches, preferences and support files they leave in ~/Library, and
    deletes everything after confirmation.
    """
    configure_logging(verbose)


# Register commands
app.command(name="list")(listing.list_apps)
app.command(name="search")(search.search_apps)
app.command(name="info")(info.show_info)
app.command(name="remove")(remove.remove_app)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
