"""Utility modules for freespace.

This module exports commonly used utility functions.
"""

from freespace.utils.formatting import (
    console,
    err_console,
    format_mb,
    print_error,
    print_success,
)
from freespace.utils.shell import CommandResult, command_exists, run_command, sync_filesystems

__all__ = [
    "CommandResult",
    "command_exists",
    "console",
    "err_console",
    "format_mb",
    "print_error",
    "print_success",
    "run_command",
    "sync_filesystems",
]
