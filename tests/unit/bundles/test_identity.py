"""Unit tests for bundle identifier resolution."""

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from macrm.bundles.identity import resolve_identifier
from macrm.utils.shell import CommandResult


@pytest.fixture
def bundle(tmp_path: Path) -> Path:
    """A bundle with a Contents/Info.plist."""
    path = tmp_path / "Foo.app"
    (path / "Contents").mkdir(parents=True)
    (path / "Contents" / "Info.plist").write_text("<plist/>")
    return path


class TestResolveIdentifier:
    """Tests for resolve_identifier."""

    def test_missing_plist_returns_none(self, tmp_path: Path) -> None:
        """No Info.plist means no identifier, and no command is run."""
        bundle = tmp_path / "Bare.app"
        bundle.mkdir()

        with patch("macrm.bundles.identity.run_command") as mock_run:
            assert resolve_identifier(bundle) is None

        mock_run.assert_not_called()

    def test_reads_and_strips_identifier(self, bundle: Path) -> None:
        """The defaults output is stripped of whitespace."""
        mock_run = MagicMock(
            return_value=CommandResult(stdout="  com.example.foo\n", stderr="", returncode=0)
        )
        with patch("macrm.bundles.identity.run_command", mock_run):
            result = resolve_identifier(bundle)

        assert result == "com.example.foo"
        args = mock_run.call_args.args[0]
        assert args == [
            "defaults",
            "read",
            str(bundle / "Contents" / "Info.plist"),
            "CFBundleIdentifier",
        ]

    def test_nonzero_exit_returns_none(self, bundle: Path) -> None:
        """A missing key (non-zero exit) yields None."""
        failure = CommandResult(stdout="", stderr="does not exist", returncode=1)
        with patch("macrm.bundles.identity.run_command", return_value=failure):
            assert resolve_identifier(bundle) is None

    def test_missing_tool_returns_none(self, bundle: Path) -> None:
        """A missing defaults executable yields None."""
        with patch("macrm.bundles.identity.run_command", side_effect=FileNotFoundError):
            assert resolve_identifier(bundle) is None

    def test_timeout_returns_none(self, bundle: Path) -> None:
        """A hung reader yields None."""
        with patch(
            "macrm.bundles.identity.run_command",
            side_effect=subprocess.TimeoutExpired(cmd="defaults", timeout=10),
        ):
            assert resolve_identifier(bundle) is None

    def test_empty_output_returns_none(self, bundle: Path) -> None:
        """Blank output is treated as no identifier."""
        blank = CommandResult(stdout="\n", stderr="", returncode=0)
        with patch("macrm.bundles.identity.run_command", return_value=blank):
            assert resolve_identifier(bundle) is None
