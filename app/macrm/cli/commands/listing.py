"""List command implementation.

Lists every installed application with its size.
"""

from typing import Annotated

import typer

from macrm.bundles.catalog import PathCatalog
from macrm.cli.display import create_apps_table, print_apps_json
from macrm.cli.types import OutputFormat
from macrm.utils.formatting import console, print_info


def list_apps(
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format: table or json.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """List installed applications in /Applications and ~/Applications."""
    bundles = PathCatalog().list_application_details()

    if output_format == OutputFormat.JSON:
        print_apps_json(bundles)
        return

    if not bundles:
        print_info("No applications found.")
        return

    console.print(create_apps_table(bundles, f"Installed Applications ({len(bundles)})"))
