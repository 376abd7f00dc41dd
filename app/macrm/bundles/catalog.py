"""Installed application discovery.

Enumerates .app bundles in /Applications and ~/Applications and resolves
a bundle from a user-supplied name.
"""

import logging
from pathlib import Path

from macrm.bundles.identity import resolve_identifier
from macrm.core.paths import BUNDLE_SUFFIX, get_application_roots
from macrm.filesystem.sizing import tree_size_or_zero
from macrm.models.bundle import ApplicationBundle

logger = logging.getLogger(__name__)


class PathCatalog:
    """Catalog of installed application bundles.

    Args:
        roots: Application root directories in priority order. Defaults to
            /Applications, then ~/Applications.
    """

    def __init__(self, roots: tuple[Path, ...] | None = None) -> None:
        self._roots = roots if roots is not None else get_application_roots()

    @property
    def roots(self) -> tuple[Path, ...]:
        """Application roots in priority order."""
        return self._roots

    def list_applications(self) -> list[ApplicationBundle]:
        """List every bundle in the application roots.

        Returns:
            Bundles sorted case-insensitively by name. Ties keep root
            order, then directory enumeration order.
        """
        paths: list[Path] = []
        for root in self._roots:
            paths.extend(p for p in self._iter_root(root) if p.suffix == BUNDLE_SUFFIX)

        paths.sort(key=lambda p: p.stem.lower())
        return [ApplicationBundle.from_path(p) for p in paths]

    def list_application_details(self) -> list[ApplicationBundle]:
        """List every bundle with size and identifier resolved.

        Returns:
            Bundles in the same order as :meth:`list_applications`.
        """
        return [
            bundle.with_details(
                size_bytes=tree_size_or_zero(bundle.path),
                identifier=resolve_identifier(bundle.path),
            )
            for bundle in self.list_applications()
        ]

    def search_applications(self, term: str) -> list[ApplicationBundle]:
        """List bundles whose name contains ``term`` (case-insensitive)."""
        term_lower = term.lower()
        return [b for b in self.list_applications() if term_lower in b.name.lower()]

    def find_application(self, name: str) -> Path | None:
        """Resolve an application name to its bundle path.

        Tries an exact filename in each root first, then a
        case-insensitive filename scan of each root.

        Args:
            name: Application name, with or without the .app suffix.

        Returns:
            Path to the bundle, or None if no root contains a match.
        """
        filename = name if name.endswith(BUNDLE_SUFFIX) else f"{name}{BUNDLE_SUFFIX}"

        for root in self._roots:
            candidate = root / filename
            if candidate.exists():
                # Case-insensitive volumes accept any casing; keep the on-disk one.
                return self._match_entry(root, filename) or candidate

        for root in self._roots:
            entry = self._match_entry(root, filename)
            if entry is not None:
                return entry

        return None

    def _match_entry(self, root: Path, filename: str) -> Path | None:
        """Return the entry of ``root`` named ``filename``, ignoring case.

        An entry with the exact spelling wins over other casings.
        """
        entries = self._iter_root(root)
        for entry in entries:
            if entry.name == filename:
                return entry
        filename_lower = filename.lower()
        for entry in entries:
            if entry.name.lower() == filename_lower:
                return entry
        return None

    @staticmethod
    def _iter_root(root: Path) -> list[Path]:
        """List a root directory, treating unreadable roots as empty."""
        try:
            return list(root.iterdir())
        except OSError as e:
            logger.debug("Skipping application root %s: %s", root, e)
            return []
