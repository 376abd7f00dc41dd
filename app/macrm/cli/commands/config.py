"""Configuration commands.

Show, locate and initialize the macrm configuration file.
"""

from typing import Annotated

import typer
from rich.table import Table

from macrm.core.config import ConfigError, MacrmConfig, load_config, save_config
from macrm.core.paths import get_config_path
from macrm.utils.formatting import console, print_error, print_success

app = typer.Typer(
    help="Show or initialize configuration.",
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Show the effective configuration."""
    path = get_config_path()
    try:
        config = load_config(path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    source = str(path) if path.exists() else "defaults (no config file)"
    table = Table(
        title=f"Configuration: {source}",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Setting", style="bold")
    table.add_column("Value", style="info")
    for key, value in config.model_dump().items():
        table.add_row(key, str(value))
    console.print(table)


@app.command()
def path() -> None:
    """Print the configuration file path."""
    typer.echo(str(get_config_path()))


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a configuration file with default settings."""
    config_path = get_config_path()
    if config_path.exists() and not force:
        print_error(f"Config already exists: {config_path} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        saved = save_config(MacrmConfig(), config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Wrote default configuration to {saved}")
