"""Unit tests for path deletion.

Tests deletion of directories, files and symlinks, dry-run mode, and
per-path failure isolation.
"""

from pathlib import Path
from unittest.mock import patch

from macrm.filesystem.operator import FilesystemOperator, delete_path


class TestDeletePath:
    """Tests for delete_path function."""

    def test_delete_directory(self, tmp_path: Path) -> None:
        """Directories are removed recursively."""
        target = tmp_path / "Foo.app"
        (target / "Contents").mkdir(parents=True)
        (target / "Contents" / "Info.plist").write_text("x")

        outcome = delete_path(target)

        assert outcome.success is True
        assert outcome.path == target
        assert not target.exists()

    def test_delete_file(self, tmp_path: Path) -> None:
        """Files are unlinked."""
        target = tmp_path / "com.example.foo.plist"
        target.write_text("x")

        outcome = delete_path(target)

        assert outcome.success is True
        assert not target.exists()

    def test_delete_symlink_keeps_target(self, tmp_path: Path) -> None:
        """Deleting a symlink to a directory removes only the link."""
        real = tmp_path / "real"
        real.mkdir()
        link = tmp_path / "link"
        link.symlink_to(real)

        outcome = delete_path(link)

        assert outcome.success is True
        assert not link.is_symlink()
        assert real.exists()

    def test_nonexistent_path_fails(self, tmp_path: Path) -> None:
        """A path that no longer exists is a failure."""
        outcome = delete_path(tmp_path / "gone")

        assert outcome.success is False
        assert outcome.error is not None
        assert "does not exist" in outcome.error

    def test_permission_error_reported(self, tmp_path: Path) -> None:
        """OS errors become failed outcomes with the error message."""
        target = tmp_path / "locked"
        target.mkdir()

        with patch(
            "macrm.filesystem.operator.shutil.rmtree",
            side_effect=PermissionError(13, "Permission denied"),
        ):
            outcome = delete_path(target)

        assert outcome.success is False
        assert outcome.error is not None
        assert "Permission denied" in outcome.error
        assert target.exists()

    def test_dry_run_keeps_path(self, tmp_path: Path) -> None:
        """Dry-run reports success without deleting."""
        target = tmp_path / "keep"
        target.mkdir()

        outcome = delete_path(target, dry_run=True)

        assert outcome.success is True
        assert outcome.dry_run is True
        assert target.exists()


class TestFilesystemOperator:
    """Tests for FilesystemOperator."""

    def test_delete_one_honors_dry_run(self, tmp_path: Path) -> None:
        """A dry-run operator reports success and leaves the path in place."""
        target = tmp_path / "keep"
        target.write_text("x")
        operator = FilesystemOperator(dry_run=True)

        outcome = operator.delete_one(target)

        assert operator.dry_run is True
        assert outcome.success is True
        assert outcome.dry_run is True
        assert target.exists()

    def test_delete_one_reports_missing_path(self, tmp_path: Path) -> None:
        """A missing path is a failed outcome, not an exception."""
        outcome = FilesystemOperator().delete_one(tmp_path / "missing")

        assert outcome.success is False
        assert outcome.error is not None
        assert "does not exist" in outcome.error
