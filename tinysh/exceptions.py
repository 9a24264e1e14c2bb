"""
Custom exception hierarchy for tinysh.

This module defines a structured exception hierarchy that provides:
- Clear error categorization
- Consistent error messages
- Proper exit codes

Usage:
    from tinysh.exceptions import ShellExit, ShellFatalError

    try:
        shell.execute(line)
    except ShellExit as e:
        return e.exit_code
"""

from typing import Optional


class ShellError(Exception):
    """
    Base class for all shell errors.

    All custom exceptions should inherit from this class.
    This allows catching all shell-specific errors with a single except clause.

    Attributes:
        message: Error message
        exit_code: Suggested exit code (default: 1)
    """

    def __init__(self, message: str, exit_code: int = 1):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code

    def __str__(self):
        return self.message


class ConfigError(ShellError):
    """
    Raised when a configuration value is invalid.

    Example:
        raise ConfigError("spawner", "vfork")
    """

    def __init__(self, option: str, value: str, message: Optional[str] = None):
        if message is None:
            message = f"invalid value for {option}: {value!r}"
        super().__init__(message, exit_code=2)
        self.option = option
        self.value = value


# =============================================================================
# Interpreter Lifecycle
# =============================================================================

class EndOfInput(ShellError):
    """Raised when the input stream is closed."""

    def __init__(self):
        super().__init__("end of input", exit_code=0)


class ShellExit(ShellError):
    """
    Raised by the exit builtin to end the interpreter.

    Example:
        raise ShellExit(42)
    """

    def __init__(self, exit_code: int = 0):
        super().__init__(f"exit {exit_code}", exit_code=exit_code)


class ShellFatalError(ShellError):
    """
    Raised when the interpreter cannot continue.

    Unlike command errors, this is not caught by the REPL loop.
    """
    pass


# =============================================================================
# Command Errors
# =============================================================================

class CommandError(ShellError):
    """
    Base class for command-related errors.

    Raised when command execution fails.
    """

    def __init__(self, command: str, message: str, exit_code: int = 1):
        super().__init__(message, exit_code)
        self.command = command


class CommandNotFoundError(CommandError):
    """
    Raised when a command is neither a builtin nor found on PATH.

    Example:
        raise CommandNotFoundError("nonexistent")
    """

    def __init__(self, command: str):
        message = f"{command}: command not found"
        super().__init__(command, message, exit_code=127)


class InvalidArgumentError(CommandError):
    """
    Raised when invalid arguments are provided to a command.

    Example:
        raise InvalidArgumentError("exit", "abc", "numeric argument required")
    """

    def __init__(self, command: str, argument: str, details: Optional[str] = None):
        message = f"{command}: {argument}: {details or 'invalid argument'}"
        super().__init__(command, message, exit_code=2)
        self.argument = argument


class SpawnError(ShellError):
    """
    Raised when a resolved executable cannot be started.

    Example:
        raise SpawnError("/usr/bin/gone", "No such file or directory")
    """

    def __init__(self, path: str, details: str):
        super().__init__(f"{path}: {details}", exit_code=1)
        self.path = path
