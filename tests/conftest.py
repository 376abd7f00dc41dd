"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from dataclasses import dataclass
from pathlib import Path

import pytest
from macrm.core.paths import get_residual_search_dirs
from macrm.utils.shell import CommandResult


@dataclass
class MacHome:
    """Fake macOS layout rooted in a temporary directory."""

    home: Path
    system_apps: Path
    user_apps: Path
    library: Path

    def make_bundle(self, name: str, size: int = 0, root: Path | None = None) -> Path:
        """Create ``<root>/<name>.app`` holding one file of ``size`` bytes."""
        bundle = (root or self.system_apps) / f"{name}.app"
        contents = bundle / "Contents"
        contents.mkdir(parents=True)
        (contents / "binary").write_bytes(b"x" * size)
        return bundle

    def library_dir(self, name: str) -> Path:
        """Return ~/Library/<name>, creating it."""
        path = self.library / name
        path.mkdir(parents=True, exist_ok=True)
        return path


def _not_available(*_args: object, **_kwargs: object) -> CommandResult:
    """Simulate an external tool that exits non-zero."""
    return CommandResult(stdout="", stderr="", returncode=1)


@pytest.fixture
def mac_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> MacHome:
    """Point HOME and /Applications at a temporary tree.

    External tools (defaults, pgrep, osascript) report failure, so no
    identifier is resolved and no application is running.
    """
    home = tmp_path / "home"
    home.mkdir()
    system_apps = tmp_path / "Applications"
    system_apps.mkdir()
    user_apps = home / "Applications"
    user_apps.mkdir()

    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.setattr("macrm.core.paths.SYSTEM_APPLICATIONS_DIR", system_apps)
    monkeypatch.setattr("macrm.bundles.identity.run_command", _not_available)
    monkeypatch.setattr("macrm.removal.process.run_command", _not_available)

    layout = MacHome(
        home=home,
        system_apps=system_apps,
        user_apps=user_apps,
        library=home / "Library",
    )
    for directory in get_residual_search_dirs():
        directory.mkdir(parents=True, exist_ok=True)
    return layout
