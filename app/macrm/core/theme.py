"""Color theme for macrm output.

Colors come from the bundled ``data/theme.toml``; any key can be overridden
in ``~/.config/macrm/theme.toml``.
"""

import functools
import logging
import re
import tomllib
from importlib import resources
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

from macrm.core.paths import get_user_theme_path

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})")


class ThemeColors(BaseModel):
    """Hex colors (#RGB or #RRGGBB) for each style macrm renders."""

    model_config = ConfigDict(extra="forbid")

    muted: str = "#b2bec3"
    header: str = "#69B9A1"
    border: str = "#29526d"
    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"
    bundle: str = "#69B9A1"
    residual: str = "#0e8ac8"

    @field_validator("*", mode="before")
    @classmethod
    def _check_hex(cls, value: object) -> str:
        if not isinstance(value, str) or not _HEX_COLOR.fullmatch(value.strip()):
            msg = f"expected a #RGB or #RRGGBB color, got {value!r}"
            raise ValueError(msg)
        return value.strip()


def get_bundled_theme_path() -> Path:
    """Path to the theme shipped inside the package."""
    return Path(str(resources.files("macrm.data").joinpath("theme.toml")))


def read_theme_file(path: Path) -> dict[str, str]:
    """Read the ``[colors]`` table of a theme file.

    A missing, unreadable or malformed file yields an empty mapping.
    Non-string values are dropped.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return {}

    colors = data.get("colors", {})
    if not isinstance(colors, dict):
        logger.warning("Ignoring theme file %s: 'colors' is not a table", path)
        return {}
    return {key: value for key, value in colors.items() if isinstance(value, str)}


def load_theme() -> ThemeColors:
    """Merge user overrides onto the bundled colors.

    Falls back to the built-in defaults if the merged colors do not validate.
    """
    colors = read_theme_file(get_bundled_theme_path())
    colors.update(read_theme_file(get_user_theme_path()))
    try:
        return ThemeColors(**colors)
    except ValidationError as e:
        logger.warning("Invalid theme colors, using defaults: %s", e)
        return ThemeColors()


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Build the Rich theme used by the shared consoles."""
    colors = colors or load_theme()
    return Theme(
        {
            "muted": colors.muted,
            "bold_header": f"bold {colors.header}",
            "border": colors.border,
            "success": colors.success,
            "warning": colors.warning,
            "error": f"bold {colors.error}",
            "info": colors.info,
            "bundle": f"bold {colors.bundle}",
            "residual": colors.residual,
        }
    )


@functools.cache
def get_theme() -> Theme:
    """Rich theme, loaded once per process."""
    return get_rich_theme()
