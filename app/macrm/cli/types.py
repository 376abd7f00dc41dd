"""Shared types and helpers for CLI commands."""

from enum import Enum

from macrm.core.config import ConfigError, MacrmConfig, load_config
from macrm.utils.formatting import print_warning


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


def load_config_or_default() -> MacrmConfig:
    """Load the user configuration, falling back to defaults on error.

    Returns:
        The loaded configuration, or defaults if it is invalid.
    """
    try:
        return load_config()
    except ConfigError as e:
        print_warning(f"{e}. Using default settings.")
        return MacrmConfig()
