"""Info command implementation.

Shows what removing an application would delete, without deleting.
"""

from typing import Annotated

import typer
from rich.markup import escape

from macrm.bundles.catalog import PathCatalog
from macrm.cli.display import print_plan
from macrm.removal.planner import build_plan
from macrm.utils.formatting import print_error, print_info


def show_info(
    name: Annotated[str, typer.Argument(help="Application name, e.g. \"Google Chrome\".")],
) -> None:
    """Show an application's bundle, identifier and residual files."""
    bundle_path = PathCatalog().find_application(name)
    if bundle_path is None:
        print_error(f'Application "{escape(name)}" not found.')
        print_info(f"Use 'macrm search {escape(name)}' to look it up.")
        raise typer.Exit(code=1)

    print_plan(build_plan(bundle_path))
