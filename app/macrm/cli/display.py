"""Shared Rich display functions for applications and removals.

Provides table builders and printers used by the list, search, info
and remove commands.
"""

import json

from rich.markup import escape
from rich.table import Table

from macrm.models.bundle import ApplicationBundle
from macrm.models.removal import ProgressEvent, RemovalOutcome, RemovalPlan
from macrm.utils.formatting import console


def create_apps_table(bundles: list[ApplicationBundle], title: str) -> Table:
    """Create a Rich table listing applications with ordinal and size.

    Args:
        bundles: Applications to display, sizes already computed.
        title: Table title.

    Returns:
        Rich Table configured for application display.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
        row_styles=["", "on grey7"],
    )
    table.add_column("#", style="muted", justify="right")
    table.add_column("Application", style="bundle", no_wrap=True)
    table.add_column("Size", style="info", justify="right")

    for index, bundle in enumerate(bundles, start=1):
        table.add_row(str(index), escape(bundle.name), bundle.size_human)

    return table


def print_apps_json(bundles: list[ApplicationBundle]) -> None:
    """Display applications as JSON."""
    data = [
        {
            "name": b.name,
            "path": str(b.path),
            "size_bytes": b.size_bytes,
            "identifier": b.identifier,
        }
        for b in bundles
    ]
    console.print_json(json.dumps(data))


def print_plan(plan: RemovalPlan) -> None:
    """Display an itemized removal plan: bundle, residuals and total.

    Args:
        plan: The plan to display.
    """
    bundle = plan.bundle
    console.print(f"\n[bold_header]Remove: {escape(bundle.name)}[/]\n")
    console.print(f"  Application: {escape(str(bundle.path))} [info]({bundle.size_human})[/]")
    if bundle.identifier:
        console.print(f"  Bundle ID:   [muted]{escape(bundle.identifier)}[/]")

    if plan.residuals:
        table = Table(
            title="Residual Files",
            show_header=True,
            header_style="bold_header",
            border_style="border",
        )
        table.add_column("Path", style="residual")
        table.add_column("Size", style="info", justify="right")
        for entry in plan.residuals:
            table.add_row(escape(str(entry.path)), entry.size_human)
        console.print()
        console.print(table)
    else:
        console.print("\n  [muted]No residual files found.[/]")

    console.print(f"\n  Total to be removed: [bold]{plan.total_human}[/]")


def print_progress(event: ProgressEvent) -> None:
    """Render one removal progress line."""
    outcome = event.outcome
    if outcome is None:
        console.print(escape(event.message), style="muted")
    elif outcome.dry_run:
        console.print(f"  [info]DRY-RUN[/] {escape(str(outcome.path))}")
    elif outcome.success:
        console.print(f"  [success]OK[/]    {escape(str(outcome.path))}")
    else:
        console.print(
            f"  [error]ERROR[/] {escape(str(outcome.path))}: {escape(outcome.error or '')}"
        )


def print_results_summary(outcomes: list[RemovalOutcome]) -> None:
    """Print counts of removed and failed paths."""
    success_count = sum(1 for o in outcomes if o.success)
    fail_count = len(outcomes) - success_count
    dry_count = sum(1 for o in outcomes if o.dry_run)
    if dry_count:
        console.print(f"\n[info]Dry-run: {dry_count} path(s) would be removed.[/]")
    elif fail_count:
        console.print(f"\n[warning]{success_count} removed, {fail_count} failed[/]")
    else:
        console.print(f"\n[success]All {success_count} path(s) removed.[/]")
