"""Search command implementation.

Filters installed applications by a case-insensitive name substring.
"""

from typing import Annotated

import typer
from rich.markup import escape

from macrm.bundles.catalog import PathCatalog
from macrm.cli.display import create_apps_table, print_apps_json
from macrm.cli.types import OutputFormat
from macrm.filesystem.sizing import tree_size_or_zero
from macrm.utils.formatting import console, print_info


def search_apps(
    term: Annotated[str, typer.Argument(help="Text to look for in application names.")],
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
    """Search installed applications by name.

    Examples:
        macrm search chrome
        macrm search "visual studio"
    """
    matches = [
        bundle.with_details(size_bytes=tree_size_or_zero(bundle.path), identifier=None)
        for bundle in PathCatalog().search_applications(term)
    ]

    if output_format == OutputFormat.JSON:
        print_apps_json(matches)
        return

    if not matches:
        print_info(f'No applications found for "{escape(term)}".')
        return

    title = f'Results for "{escape(term)}" ({len(matches)} found)'
    console.print(create_apps_table(matches, title))
