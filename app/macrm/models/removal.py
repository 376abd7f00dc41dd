"""Removal operation models.

Defines the per-path outcome of a deletion, the engine state machine,
the progress events streamed to a foreground, and the removal plan
presented to the user before confirmation.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from macrm.filesystem.sizing import format_size
from macrm.models.bundle import ApplicationBundle, ResidualEntry


class RemovalState(str, Enum):
    """State of a removal operation.

    Attributes:
        IDLE: Not started.
        CHECKING: Checking whether the application is running.
        TERMINATING: Quit requested, waiting for the grace delay.
        DELETING: Deleting the bundle and residual paths.
        COMPLETED: Every path has been attempted.
    """

    IDLE = "idle"
    CHECKING = "checking"
    TERMINATING = "terminating"
    DELETING = "deleting"
    COMPLETED = "completed"


@dataclass(frozen=True, slots=True)
class RemovalOutcome:
    """Result of deleting a single path.

    Attributes:
        path: Path that was operated on.
        success: Whether the deletion completed successfully.
        error: Error message if the deletion failed, None otherwise.
        dry_run: Whether this was a dry-run (no actual deletion).
    """

    path: Path
    success: bool
    error: str | None = None
    dry_run: bool = False


class ProgressKind(str, Enum):
    """Kind of progress event emitted during removal."""

    LINE = "line"
    DONE = "done"


@dataclass(frozen=True, slots=True)
class ProgressEvent:
    """A single event in the removal progress stream.

    Attributes:
        kind: LINE for a log line, DONE for the terminal event.
        message: Human-readable text (empty for DONE).
        outcome: Deletion outcome this line reports, if any.
    """

    kind: ProgressKind
    message: str = ""
    outcome: RemovalOutcome | None = None

    @property
    def is_done(self) -> bool:
        """Check if this is the terminal event."""
        return self.kind == ProgressKind.DONE


@dataclass(frozen=True, slots=True)
class RemovalPlan:
    """Everything that will be deleted for one application.

    Attributes:
        bundle: The application bundle, with size and identifier resolved.
        residuals: Residual entries sorted by path.
    """

    bundle: ApplicationBundle
    residuals: tuple[ResidualEntry, ...] = field(default=())

    @property
    def residual_paths(self) -> list[Path]:
        """Residual paths in deletion order."""
        return [entry.path for entry in self.residuals]

    @property
    def residual_bytes(self) -> int:
        """Combined size of all residual entries."""
        return sum(entry.size_bytes for entry in self.residuals)

    @property
    def total_bytes(self) -> int:
        """Bundle size plus every residual size."""
        return (self.bundle.size_bytes or 0) + self.residual_bytes

    @property
    def total_human(self) -> str:
        """Return human-readable total size."""
        return format_size(self.total_bytes)
