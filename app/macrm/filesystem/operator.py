"""Filesystem deletion operator.

Deletes application bundles and residual paths one at a time, with
dry-run support and per-path failure isolation.
"""

import logging
import shutil
from pathlib import Path

from macrm.models.removal import RemovalOutcome

logger = logging.getLogger(__name__)


def delete_path(path: Path, *, dry_run: bool = False) -> RemovalOutcome:
    """Delete a single file or directory tree.

    Dispatches on the path type:
    - Directories: shutil.rmtree
    - Files and symlinks: Path.unlink

    Args:
        path: Path to delete.
        dry_run: If True, report success without deleting.

    Returns:
        RemovalOutcome indicating success or failure.
    """
    if dry_run:
        logger.info("Dry-run: would delete %s", path)
        return RemovalOutcome(path=path, success=True, dry_run=True)

    try:
        # Directories (but not symlinks to directories)
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
            return RemovalOutcome(path=path, success=True)

        # Files, symlinks, and dead symlinks
        if path.exists() or path.is_symlink():
            path.unlink()
            return RemovalOutcome(path=path, success=True)

        return RemovalOutcome(
            path=path,
            success=False,
            error=f"Path does not exist: {path}",
        )

    except OSError as e:
        logger.debug("Failed to delete %s: %s", path, e)
        return RemovalOutcome(path=path, success=False, error=str(e))


class FilesystemOperator:
    """Deletes paths one at a time under a fixed dry-run setting.

    Attributes:
        _dry_run: If True, simulate deletions without modifying the filesystem.
    """

    def __init__(self, dry_run: bool = False) -> None:
        self._dry_run = dry_run

    @property
    def dry_run(self) -> bool:
        """Whether deletions are simulated."""
        return self._dry_run

    def delete_one(self, path: Path) -> RemovalOutcome:
        """Delete a single path."""
        return delete_path(path, dry_run=self._dry_run)
