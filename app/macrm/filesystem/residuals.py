"""Residual file discovery for removed applications.

Scans the per-user ~/Library directories for entries whose name matches
the application's display name or bundle identifier. Matching is broad
on purpose: any exact, case-insensitive or substring hit qualifies.
"""

import logging
from pathlib import Path

from macrm.core.paths import get_preferences_dir, get_residual_search_dirs

logger = logging.getLogger(__name__)


def matches_term(entry_name: str, term: str) -> bool:
    """Check whether a directory entry name matches a search term.

    Args:
        entry_name: Basename of the candidate entry.
        term: Application name or bundle identifier.

    Returns:
        True on exact, case-insensitive, or substring match.
    """
    entry_lower = entry_name.lower()
    term_lower = term.lower()
    return (
        entry_name == term
        or entry_lower == term_lower
        or term in entry_name
        or term_lower in entry_lower
    )


class ResidualFinder:
    """Finds leftover files and directories belonging to an application.

    Args:
        search_dirs: Directories to scan. Defaults to the ten ~/Library
            residual directories.
        preferences_dir: Directory probed for ``<identifier>.plist``.
            Defaults to ~/Library/Preferences.
    """

    def __init__(
        self,
        *,
        search_dirs: tuple[Path, ...] | None = None,
        preferences_dir: Path | None = None,
    ) -> None:
        self._search_dirs = search_dirs if search_dirs is not None else get_residual_search_dirs()
        self._preferences_dir = preferences_dir or get_preferences_dir()

    @property
    def search_dirs(self) -> tuple[Path, ...]:
        """Directories scanned for residual entries."""
        return self._search_dirs

    def find_residual_files(self, name: str, identifier: str | None = None) -> list[Path]:
        """Find residual paths for an application.

        Args:
            name: Application display name.
            identifier: Bundle identifier, if known.

        Returns:
            Matching paths, deduplicated and sorted by path string.
        """
        if not name:
            logger.warning("Empty application name matches every residual entry")

        terms = [name]
        if identifier:
            terms.append(identifier)

        found: list[Path] = []
        for directory in self._search_dirs:
            if not directory.exists():
                continue
            found.extend(self._scan_directory(directory, terms))

        if identifier:
            plist = self._preferences_dir / f"{identifier}.plist"
            if plist.exists():
                found.append(plist)

        return sorted(set(found), key=str)

    def _scan_directory(self, directory: Path, terms: list[str]) -> list[Path]:
        """Return the entries of one directory that match any term.

        Args:
            directory: Directory to list.
            terms: Search terms, checked in order.

        Returns:
            Matching entries in enumeration order.
        """
        try:
            entries = list(directory.iterdir())
        except OSError as e:
            logger.debug("Cannot read %s: %s", directory, e)
            return []

        matches: list[Path] = []
        for entry in entries:
            if any(matches_term(entry.name, term) for term in terms):
                matches.append(entry)
        return matches
