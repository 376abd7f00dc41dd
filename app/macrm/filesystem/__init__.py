"""Filesystem scanning, sizing and deletion.

This module provides residual file discovery and disk usage accounting.
Deletion lives in :mod:`macrm.filesystem.operator`.
"""

from macrm.filesystem.residuals import ResidualFinder, matches_term
from macrm.filesystem.sizing import format_size, tree_size, tree_size_or_zero

__all__ = [
    "ResidualFinder",
    "format_size",
    "matches_term",
    "tree_size",
    "tree_size_or_zero",
]
