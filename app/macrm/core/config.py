"""User configuration for macrm.

Configuration is stored in ~/.config/macrm/config.toml. Every setting has
a default, so a missing file is equivalent to an empty one.
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from macrm.core.paths import get_config_path

logger = logging.getLogger(__name__)

DEFAULT_GRACE_DELAY_SECONDS = 2.0


class MacrmConfig(BaseModel):
    """Settings controlling application removal.

    Attributes:
        grace_delay_seconds: Wait after asking a running application to quit.
        confirm_running: Ask before quitting a running application.
    """

    model_config = ConfigDict(extra="forbid")

    grace_delay_seconds: Annotated[
        float,
        Field(ge=0.0, le=60.0, description="Seconds to wait after a quit request (0-60)"),
    ] = DEFAULT_GRACE_DELAY_SECONDS
    confirm_running: Annotated[
        bool,
        Field(description="Prompt before quitting a running application"),
    ] = True


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the configuration file is not valid TOML."""


def load_config(path: Path | None = None) -> MacrmConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default path.

    Returns:
        Validated MacrmConfig. Defaults if the file does not exist.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or fails validation.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        logger.debug("No config file at %s, using defaults", config_path)
        return MacrmConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    try:
        return MacrmConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e


def save_config(config: MacrmConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file atomically.

    Args:
        config: Configuration to write.
        path: Destination. If None, uses the default path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(config.model_dump(), f)
        # os.replace() is atomic on POSIX
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config {config_path}: {e}") from e

    return config_path
