"""Remove command implementation.

Removes an application bundle together with its residual files after
showing an itemized report and asking for confirmation.
"""

from typing import Annotated

import typer
from rich.markup import escape

from macrm.bundles.catalog import PathCatalog
from macrm.cli.display import print_plan, print_progress, print_results_summary
from macrm.cli.types import load_config_or_default
from macrm.models.removal import RemovalOutcome
from macrm.removal.engine import RemovalEngine
from macrm.removal.planner import build_plan
from macrm.removal.process import is_running
from macrm.utils.formatting import err_console, print_error, print_info, print_warning


def remove_app(
    name: Annotated[str, typer.Argument(help="Application name, e.g. \"Google Chrome\".")],
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompts."),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be deleted."),
    ] = False,
) -> None:
    """Remove an application and its residual files.

    Examples:
        macrm remove "Google Chrome"
        macrm remove slack --dry-run
    """
    bundle_path = PathCatalog().find_application(name)
    if bundle_path is None:
        print_error(f'Application "{escape(name)}" not found.')
        print_info(f"Use 'macrm search {escape(name)}' to look it up.")
        raise typer.Exit(code=1)

    config = load_config_or_default()
    plan = build_plan(bundle_path)
    app_name = plan.bundle.name
    print_plan(plan)

    if not dry_run and not yes:
        confirmed = typer.confirm("\nProceed with removal?", default=False)
        if not confirmed:
            print_info("Cancelled.")
            raise typer.Exit(code=0)

    if not dry_run and config.confirm_running and not yes and is_running(app_name):
        quit_app = typer.confirm(f'"{app_name}" is running. Quit it?', default=False)
        if not quit_app:
            print_warning("Quit the application before removing it.")
            raise typer.Exit(code=0)

    engine = RemovalEngine(grace_delay=config.grace_delay_seconds, dry_run=dry_run)
    outcomes: list[RemovalOutcome] = []
    for event in engine.iter_removal(app_name, bundle_path, plan.residual_paths):
        if event.is_done:
            break
        if event.outcome is not None:
            outcomes.append(event.outcome)
        print_progress(event)

    print_results_summary(outcomes)

    failures = [o for o in outcomes if not o.success]
    if failures:
        for outcome in failures:
            err_console.print(f"  - {escape(str(outcome.path))}: {escape(outcome.error or '')}")
        err_console.print(
            "\n[warning]Hint:[/] some files may require administrator permission."
        )
        err_console.print(f'Try: sudo macrm remove "{escape(name)}"')
        raise typer.Exit(code=1)
