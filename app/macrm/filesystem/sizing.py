"""Disk usage accounting for files and directory trees.

Only the initial stat of the requested path can fail. Below it, any
entry that cannot be stat'd or listed counts as zero bytes.
"""

import logging
import os
import stat
from pathlib import Path

logger = logging.getLogger(__name__)

_KB = 1024
_MB = _KB * 1024
_GB = _MB * 1024


def tree_size(path: Path) -> int:
    """Compute the total size in bytes of a file or directory tree.

    Symlinks are followed as encountered; there is no cycle detection.

    Args:
        path: File or directory to measure.

    Returns:
        Size in bytes. For directories, the sum over all descendants.

    Raises:
        OSError: If ``path`` itself cannot be stat'd.
    """
    st = os.stat(path)
    if not stat.S_ISDIR(st.st_mode):
        return st.st_size
    return _directory_size(path)


def tree_size_or_zero(path: Path) -> int:
    """Compute the size of a tree, returning 0 if the root cannot be stat'd.

    Args:
        path: File or directory to measure.

    Returns:
        Size in bytes, or 0 on failure.
    """
    try:
        return tree_size(path)
    except OSError as e:
        logger.debug("Cannot measure %s: %s", path, e)
        return 0


def _directory_size(path: Path) -> int:
    """Sum the sizes of a directory's children, recursing into subdirectories."""
    total = 0
    try:
        with os.scandir(path) as entries:
            children = list(entries)
    except OSError as e:
        logger.debug("Cannot list %s: %s", path, e)
        return 0

    for child in children:
        try:
            st = os.stat(child.path)
        except OSError as e:
            logger.debug("Cannot stat %s: %s", child.path, e)
            continue
        if stat.S_ISDIR(st.st_mode):
            total += _directory_size(Path(child.path))
        else:
            total += st.st_size
    return total


def format_size(size_bytes: int) -> str:
    """Format a byte count as a human-readable string with binary units.

    Args:
        size_bytes: Number of bytes.

    Returns:
        e.g. "1023 B", "1.0 KB", "2.5 MB", "1.0 GB".
    """
    if size_bytes >= _GB:
        return f"{size_bytes / _GB:.1f} GB"
    if size_bytes >= _MB:
        return f"{size_bytes / _MB:.1f} MB"
    if size_bytes >= _KB:
        return f"{size_bytes / _KB:.1f} KB"
    return f"{size_bytes} B"
