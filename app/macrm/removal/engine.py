"""Application removal engine.

Runs the removal sequence for one application:

    IDLE -> CHECKING -> TERMINATING (only if running) -> DELETING -> COMPLETED

The sequence is exposed as an ordered stream of progress events so any
foreground can render it: the CLI consumes it directly, while
:class:`RemovalWorker` runs it on a background thread and hands events
over through a queue.
"""

import logging
import queue
import threading
import time
from collections.abc import Iterator
from pathlib import Path

from macrm.core.config import DEFAULT_GRACE_DELAY_SECONDS
from macrm.filesystem.operator import FilesystemOperator
from macrm.models.removal import ProgressEvent, ProgressKind, RemovalOutcome, RemovalState
from macrm.removal.process import is_running, request_quit

logger = logging.getLogger(__name__)


class RemovalEngine:
    """Deletes an application bundle and its residual paths.

    Args:
        grace_delay: Seconds to wait after asking a running application to
            quit. Termination is never verified.
        dry_run: If True, report what would be deleted without deleting.
    """

    def __init__(
        self,
        *,
        grace_delay: float = DEFAULT_GRACE_DELAY_SECONDS,
        dry_run: bool = False,
    ) -> None:
        self._grace_delay = grace_delay
        self._operator = FilesystemOperator(dry_run=dry_run)
        self.state = RemovalState.IDLE

    def iter_removal(
        self,
        name: str,
        bundle_path: Path,
        residual_paths: list[Path],
    ) -> Iterator[ProgressEvent]:
        """Run the removal sequence, yielding progress as it happens.

        The bundle is deleted first, then each residual path in the given
        order. A failed deletion is reported and the sequence continues.

        Args:
            name: Application display name, used for the liveness check.
            bundle_path: Path to the .app bundle.
            residual_paths: Residual paths to delete after the bundle.

        Yields:
            LINE events for each step and outcome, then one DONE event.
        """
        self.state = RemovalState.CHECKING
        if is_running(name):
            if self._operator.dry_run:
                yield ProgressEvent(
                    ProgressKind.LINE, f'"{name}" is running and would be asked to quit'
                )
            else:
                self.state = RemovalState.TERMINATING
                yield ProgressEvent(ProgressKind.LINE, f'"{name}" is running, asking it to quit...')
                request_quit(name)
                time.sleep(self._grace_delay)

        self.state = RemovalState.DELETING
        failures = 0
        for path in [bundle_path, *residual_paths]:
            yield ProgressEvent(ProgressKind.LINE, f"Removing {path}...")
            outcome = self._operator.delete_one(path)
            if outcome.success:
                yield ProgressEvent(ProgressKind.LINE, f"  {path} - OK", outcome)
            else:
                failures += 1
                logger.warning("Failed to remove %s: %s", path, outcome.error)
                yield ProgressEvent(
                    ProgressKind.LINE, f"  {path} - ERROR: {outcome.error}", outcome
                )

        self.state = RemovalState.COMPLETED
        if failures:
            yield ProgressEvent(ProgressKind.LINE, f'"{name}" removed with {failures} error(s).')
        else:
            yield ProgressEvent(ProgressKind.LINE, f'"{name}" removed successfully!')
        yield ProgressEvent(ProgressKind.DONE)

    def remove_application(
        self,
        name: str,
        bundle_path: Path,
        residual_paths: list[Path],
    ) -> list[RemovalOutcome]:
        """Run the removal sequence to completion.

        Args:
            name: Application display name.
            bundle_path: Path to the .app bundle.
            residual_paths: Residual paths to delete after the bundle.

        Returns:
            One outcome per attempted path, in attempt order.
        """
        return [
            event.outcome
            for event in self.iter_removal(name, bundle_path, residual_paths)
            if event.outcome is not None
        ]


class RemovalWorker:
    """Runs a removal on a background thread and queues its progress.

    The foreground calls :meth:`poll` periodically to collect new events.
    Only one removal can be in flight per worker and it cannot be
    cancelled once started.

    Args:
        engine: Engine that performs the removal.
    """

    def __init__(self, engine: RemovalEngine) -> None:
        self._engine = engine
        self._events: queue.Queue[ProgressEvent] = queue.Queue()
        self._thread: threading.Thread | None = None
        self._done = False

    @property
    def running(self) -> bool:
        """True from start() until the DONE event has been polled."""
        return self._thread is not None and not self._done

    @property
    def done(self) -> bool:
        """True once the DONE event has been polled."""
        return self._done

    def start(self, name: str, bundle_path: Path, residual_paths: list[Path]) -> None:
        """Start the removal in a daemon thread.

        Raises:
            RuntimeError: If a removal is already in flight.
        """
        if self.running:
            msg = "A removal is already in progress"
            raise RuntimeError(msg)

        self._done = False
        paths = list(residual_paths)

        def run() -> None:
            try:
                for event in self._engine.iter_removal(name, bundle_path, paths):
                    if event.is_done:
                        break
                    self._events.put(event)
            except Exception as e:
                logger.exception("Removal of %s aborted", name)
                self._events.put(ProgressEvent(ProgressKind.LINE, f"Removal aborted: {e}"))
            finally:
                self._events.put(ProgressEvent(ProgressKind.DONE))

        self._thread = threading.Thread(target=run, name="macrm-removal", daemon=True)
        self._thread.start()

    def poll(self) -> list[ProgressEvent]:
        """Drain queued events without blocking.

        Returns:
            Events produced since the last poll, in order.
        """
        events: list[ProgressEvent] = []
        while True:
            try:
                event = self._events.get_nowait()
            except queue.Empty:
                break
            events.append(event)
            if event.is_done:
                self._done = True
        return events

    def join(self, timeout: float | None = None) -> None:
        """Wait for the background thread to finish."""
        if self._thread is not None:
            self._thread.join(timeout)
