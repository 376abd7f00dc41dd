"""Bundle identifier resolution.

Reads CFBundleIdentifier from a bundle's Info.plist through the
``defaults`` tool. Absence is the common case, so every failure
returns None instead of raising.
"""

import logging
import subprocess
from pathlib import Path

from macrm.utils.shell import run_command

logger = logging.getLogger(__name__)

INFO_PLIST = Path("Contents") / "Info.plist"
IDENTIFIER_KEY = "CFBundleIdentifier"


def resolve_identifier(bundle_path: Path) -> str | None:
    """Get the bundle identifier of an application.

    Args:
        bundle_path: Path to the .app bundle.

    Returns:
        Identifier such as 'com.google.Chrome', or None if unavailable.
    """
    plist = bundle_path / INFO_PLIST
    if not plist.exists():
        return None

    try:
        result = run_command(["defaults", "read", str(plist), IDENTIFIER_KEY], timeout=10.0)
    except (FileNotFoundError, OSError, subprocess.TimeoutExpired) as e:
        logger.debug("Cannot read identifier from %s: %s", plist, e)
        return None

    if not result.success:
        logger.debug("defaults read failed for %s: %s", plist, result.stderr.strip())
        return None

    identifier = result.stdout.strip()
    return identifier or None
