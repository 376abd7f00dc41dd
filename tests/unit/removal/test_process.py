"""Unit tests for running-application detection and quit requests."""

from unittest.mock import MagicMock, patch

from macrm.removal.process import is_running, request_quit
from macrm.utils.shell import CommandResult


class TestIsRunning:
    """Tests for is_running."""

    def test_running_when_pgrep_matches(self) -> None:
        """pgrep exit 0 means a matching process exists."""
        mock_run = MagicMock(return_value=CommandResult(stdout="123\n", stderr="", returncode=0))
        with patch("macrm.removal.process.run_command", mock_run):
            assert is_running("Slack") is True

        assert mock_run.call_args.args[0] == ["pgrep", "-f", "Slack.app"]

    def test_not_running_when_no_match(self) -> None:
        """pgrep exit 1 means no process."""
        result = CommandResult(stdout="", stderr="", returncode=1)
        with patch("macrm.removal.process.run_command", return_value=result):
            assert is_running("Slack") is False

    def test_missing_pgrep_is_not_running(self) -> None:
        """A missing pgrep degrades to not running."""
        with patch("macrm.removal.process.run_command", side_effect=FileNotFoundError):
            assert is_running("Slack") is False


class TestRequestQuit:
    """Tests for request_quit."""

    def test_sends_applescript(self) -> None:
        """The quit request goes through osascript."""
        mock_run = MagicMock(return_value=CommandResult(stdout="", stderr="", returncode=0))
        with patch("macrm.removal.process.run_command", mock_run):
            request_quit("Google Chrome")

        assert mock_run.call_args.args[0] == [
            "osascript",
            "-e",
            'tell application "Google Chrome" to quit',
        ]

    def test_quotes_are_escaped(self) -> None:
        """Double quotes in the name cannot break out of the script string."""
        mock_run = MagicMock(return_value=CommandResult(stdout="", stderr="", returncode=0))
        with patch("macrm.removal.process.run_command", mock_run):
            request_quit('Say "Hi"')

        assert mock_run.call_args.args[0][2] == 'tell application "Say \\"Hi\\"" to quit'

    def test_failures_are_ignored(self) -> None:
        """Quit failures never raise."""
        with patch("macrm.removal.process.run_command", side_effect=OSError("boom")):
            request_quit("Slack")

        failure = CommandResult(stdout="", stderr="not running", returncode=1)
        with patch("macrm.removal.process.run_command", return_value=failure):
            request_quit("Slack")
