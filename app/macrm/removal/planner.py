"""Removal planning.

Gathers everything about an application that the user must see before
confirming a removal: the bundle with its size and identifier, and
every residual entry with its size.
"""

from pathlib import Path

from macrm.bundles.identity import resolve_identifier
from macrm.filesystem.residuals import ResidualFinder
from macrm.filesystem.sizing import tree_size_or_zero
from macrm.models.bundle import ApplicationBundle, ResidualEntry
from macrm.models.removal import RemovalPlan


def build_plan(bundle_path: Path, finder: ResidualFinder | None = None) -> RemovalPlan:
    """Build the removal plan for a bundle.

    Args:
        bundle_path: Path to the .app bundle.
        finder: Residual finder to use. Defaults to one scanning ~/Library.

    Returns:
        RemovalPlan with sized bundle and residual entries.
    """
    finder = finder or ResidualFinder()

    bundle = ApplicationBundle.from_path(bundle_path).with_details(
        size_bytes=tree_size_or_zero(bundle_path),
        identifier=resolve_identifier(bundle_path),
    )
    residuals = tuple(
        ResidualEntry(path=path, size_bytes=tree_size_or_zero(path))
        for path in finder.find_residual_files(bundle.name, bundle.identifier)
    )
    return RemovalPlan(bundle=bundle, residuals=residuals)
