"""
Base utilities for command implementations.

This module provides common helper functions that command modules can use
to reduce code duplication and maintain consistency.
"""

from ..process import Process


def write_error(process: Process, message: str, prefix_command: bool = True):
    """
    Write an error message to stderr.

    Args:
        process: The process object
        message: The error message
        prefix_command: If True, prefix message with command name
    """
    if prefix_command:
        process.stderr.write(f"{process.command}: {message}\n")
    else:
        process.stderr.write(f"{message}\n")


def require_args(process: Process, min_args: int, usage: str = "") -> bool:
    """
    Check that at least ``min_args`` arguments were given.

    Args:
        process: The process object
        min_args: Minimum required arguments
        usage: Usage string to display on error

    Returns:
        True if valid, False if invalid (error already written to stderr)
    """
    if len(process.args) >= min_args:
        return True

    write_error(process, "missing operand")
    if usage:
        process.stderr.write(f"usage: {usage}\n")
    return False


def report_directory_error(process: Process, path: str) -> int:
    """
    Report a directory that can't be entered.

    Any failure (missing, not a directory, no permission) is reported the
    same way, on stdout.

    Returns:
        Exit code (always 1)
    """
    process.stdout.write(f"{process.command}: {path}: No such file or directory\n")
    return 1


__all__ = [
    'write_error',
    'require_args',
    'report_directory_error',
]
