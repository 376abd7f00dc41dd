"""Path management for macrm.

This module provides the well-known locations macrm works with:

- Application roots: /Applications and ~/Applications
- Residual data directories under ~/Library
- The macrm configuration directory (XDG-compliant): ~/.config/macrm/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "macrm"

# Used when HOME is not set
FALLBACK_HOME = "/Users/unknown"

BUNDLE_SUFFIX = ".app"

SYSTEM_APPLICATIONS_DIR = Path("/Applications")

# Per-user Library directories searched for residual files, in scan order
_LIBRARY_RESIDUAL_DIRS: tuple[str, ...] = (
    "Application Support",
    "Caches",
    "Preferences",
    "Logs",
    "Containers",
    "Group Containers",
    "Saved Application State",
    "WebKit",
    "HTTPStorages",
    "Cookies",
)


def get_home() -> Path:
    """Get the current user's home directory from the HOME variable.

    Returns:
        Path from $HOME, or /Users/unknown if HOME is unset.
    """
    return Path(os.environ.get("HOME", FALLBACK_HOME))


def get_library_dir() -> Path:
    """Get the per-user Library directory.

    Returns:
        Path to ~/Library.
    """
    return get_home() / "Library"


def get_application_roots() -> tuple[Path, ...]:
    """Get application roots in lookup priority order.

    Returns:
        Tuple of (/Applications, ~/Applications).
    """
    return (SYSTEM_APPLICATIONS_DIR, get_home() / "Applications")


def get_residual_search_dirs() -> tuple[Path, ...]:
    """Get the per-user directories scanned for residual files.

    Returns:
        Tuple of ten ~/Library subdirectories.
    """
    library = get_library_dir()
    return tuple(library / name for name in _LIBRARY_RESIDUAL_DIRS)


def get_preferences_dir() -> Path:
    """Get the per-user preferences directory.

    Returns:
        Path to ~/Library/Preferences.
    """
    return get_library_dir() / "Preferences"


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Respects XDG_CONFIG_HOME when set.

    Returns:
        Path to ~/.config/macrm/ (or XDG_CONFIG_HOME/macrm/).
    """
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / APP_NAME
    return get_home() / ".config" / APP_NAME


def get_config_path() -> Path:
    """Get the configuration file path.

    Returns:
        Path to ~/.config/macrm/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_user_theme_path() -> Path:
    """Get the user theme override path.

    Returns:
        Path to ~/.config/macrm/theme.toml.
    """
    return get_config_dir() / "theme.toml"
