"""Running-application detection and quit requests.

Both operations are best-effort: a missing tool or failed command never
raises, it only degrades to "not running" or a no-op.
"""

import logging
import subprocess

from macrm.core.paths import BUNDLE_SUFFIX
from macrm.utils.shell import run_command

logger = logging.getLogger(__name__)


def is_running(name: str) -> bool:
    """Check whether a process of the application is running.

    Matches any process whose command line contains ``<name>.app``.

    Args:
        name: Application display name.

    Returns:
        True if pgrep found a matching process.
    """
    try:
        result = run_command(["pgrep", "-f", f"{name}{BUNDLE_SUFFIX}"], timeout=10.0)
    except (FileNotFoundError, OSError, subprocess.TimeoutExpired) as e:
        logger.debug("Cannot query process table: %s", e)
        return False
    return result.success


def request_quit(name: str) -> None:
    """Ask an application to quit via AppleScript.

    Fire-and-forget: the result is not checked.

    Args:
        name: Application display name.
    """
    escaped = name.replace("\\", "\\\\").replace('"', '\\"')
    script = f'tell application "{escaped}" to quit'
    try:
        result = run_command(["osascript", "-e", script], timeout=30.0)
    except (FileNotFoundError, OSError, subprocess.TimeoutExpired) as e:
        logger.debug("Quit request for %s failed: %s", name, e)
        return
    if not result.success:
        logger.debug("osascript quit for %s returned %d", name, result.returncode)
