"""Application bundle discovery and identification."""

from macrm.bundles.catalog import PathCatalog
from macrm.bundles.identity import resolve_identifier

__all__ = ["PathCatalog", "resolve_identifier"]
