"""Unit tests for disk usage accounting."""

from pathlib import Path

import pytest
from macrm.filesystem.sizing import format_size, tree_size, tree_size_or_zero


class TestTreeSize:
    """Tests for tree_size function."""

    def test_single_file(self, tmp_path: Path) -> None:
        """A file's size is its byte length."""
        target = tmp_path / "file.bin"
        target.write_bytes(b"x" * 42)

        assert tree_size(target) == 42

    def test_directory_sums_children(self, tmp_path: Path) -> None:
        """Files of 100, 200 and 300 bytes add up to 600."""
        for name, size in (("a", 100), ("b", 200), ("c", 300)):
            (tmp_path / name).write_bytes(b"x" * size)

        assert tree_size(tmp_path) == 600

    def test_nested_directories(self, tmp_path: Path) -> None:
        """Subdirectories are measured recursively."""
        nested = tmp_path / "one" / "two"
        nested.mkdir(parents=True)
        (tmp_path / "top").write_bytes(b"x" * 10)
        (nested / "deep").write_bytes(b"x" * 5)

        assert tree_size(tmp_path) == 15

    def test_unreadable_child_counts_as_zero(self, tmp_path: Path) -> None:
        """A child that cannot be stat'd contributes zero, no error raised."""
        (tmp_path / "a").write_bytes(b"x" * 100)
        (tmp_path / "b").write_bytes(b"x" * 200)
        (tmp_path / "broken").symlink_to(tmp_path / "missing-target")

        assert tree_size(tmp_path) == 300

    def test_symlinks_are_followed(self, tmp_path: Path) -> None:
        """A symlink to a file counts the target's size."""
        data = tmp_path / "data"
        data.mkdir()
        (data / "file").write_bytes(b"x" * 64)
        measured = tmp_path / "measured"
        measured.mkdir()
        (measured / "link").symlink_to(data / "file")

        assert tree_size(measured) == 64

    def test_empty_directory(self, tmp_path: Path) -> None:
        """An empty directory has size zero."""
        assert tree_size(tmp_path) == 0

    def test_missing_root_raises(self, tmp_path: Path) -> None:
        """Failure to stat the root itself propagates."""
        with pytest.raises(FileNotFoundError):
            tree_size(tmp_path / "missing")

    def test_or_zero_absorbs_missing_root(self, tmp_path: Path) -> None:
        """tree_size_or_zero returns 0 for a missing root."""
        assert tree_size_or_zero(tmp_path / "missing") == 0


class TestFormatSize:
    """Tests for format_size function."""

    @pytest.mark.parametrize(
        ("size", "expected"),
        [
            (0, "0 B"),
            (1023, "1023 B"),
            (1024, "1.0 KB"),
            (1536, "1.5 KB"),
            (1048576, "1.0 MB"),
            (1073741824, "1.0 GB"),
            (5 * 1073741824, "5.0 GB"),
        ],
    )
    def test_binary_units(self, size: int, expected: str) -> None:
        """Sizes use 1024-based units with one decimal above bytes."""
        assert format_size(size) == expected
