"""Utility modules for macrm.

This module exports commonly used utility functions.
"""

from macrm.utils.formatting import (
    console,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from macrm.utils.shell import CommandResult, run_command

__all__ = [
    "CommandResult",
    "console",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "run_command",
]
