"""
Built-in shell commands registry.

All built-in commands live in the commands/ directory.
This module is a thin wrapper that loads and exposes those commands.
"""

from .commands import load_all_commands, BUILTINS

# Load all command modules to populate the registry
load_all_commands()


def get_builtin(command: str):
    """
    Get a built-in command executor.

    Matching is exact and case-sensitive.

    Args:
        command: The command name to look up

    Returns:
        The command function, or None if not found

    Example:
        >>> executor = get_builtin('echo')
        >>> if executor:
        ...     executor(process)
    """
    return BUILTINS.get(command)


def is_builtin(command: str) -> bool:
    """Check if a command name is a shell builtin."""
    return command in BUILTINS
