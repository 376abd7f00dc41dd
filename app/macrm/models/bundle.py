"""Application bundle models.

This module defines the data structures for installed application
bundles and the residual files associated with them.
"""

from dataclasses import dataclass, field, replace
from pathlib import Path

from macrm.filesystem.sizing import format_size


@dataclass(frozen=True, slots=True)
class ApplicationBundle:
    """Represents an installed .app bundle.

    Attributes:
        name: Display name (bundle filename without the .app suffix).
        path: Absolute path to the bundle directory.
        size_bytes: Recursive size in bytes, None until computed.
        identifier: Bundle identifier (e.g., 'com.google.Chrome'), if known.
    """

    name: str
    path: Path
    size_bytes: int | None = field(default=None)
    identifier: str | None = field(default=None)

    @classmethod
    def from_path(cls, path: Path) -> "ApplicationBundle":
        """Create a bundle from its path, using the filename stem as name."""
        return cls(name=path.stem, path=path)

    def with_details(self, size_bytes: int, identifier: str | None) -> "ApplicationBundle":
        """Return a copy with size and identifier filled in."""
        return replace(self, size_bytes=size_bytes, identifier=identifier)

    @property
    def size_human(self) -> str:
        """Return human-readable size string."""
        if self.size_bytes is None:
            return "unknown"
        return format_size(self.size_bytes)


@dataclass(frozen=True, slots=True)
class ResidualEntry:
    """A leftover file or directory belonging to an application.

    Attributes:
        path: Absolute path of the residual entry.
        size_bytes: Recursive size in bytes.
    """

    path: Path
    size_bytes: int

    @property
    def size_human(self) -> str:
        """Return human-readable size string."""
        return format_size(self.size_bytes)
