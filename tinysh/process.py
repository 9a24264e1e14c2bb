"""Process class and child-process spawning for command execution"""

import io
import logging
import os
import subprocess
from abc import ABC, abstractmethod
from typing import List, Optional, Callable, TextIO, TYPE_CHECKING

from .exceptions import (
    CommandNotFoundError,
    ConfigError,
    ShellExit,
    ShellFatalError,
    SpawnError,
)

if TYPE_CHECKING:
    from .context import CommandContext

logger = logging.getLogger(__name__)


def build_argv(command: str, args: List[str]) -> List[str]:
    """
    Build the argument vector for a child process.

    argv[0] is the command name as typed, not the resolved path.
    The vector grows with the arguments; there is no fixed cap.
    """
    argv = [command]
    argv.extend(args)
    return argv


def _normalize_status(status: int) -> int:
    # Killed by a signal: report the conventional 128+N
    if status < 0:
        return 128 - status
    return status


class Spawner(ABC):
    """
    Launches an executable as a child process and waits for it.

    The child inherits the parent's stdin, stdout, stderr and environment.
    Implementations block until the child exits or is killed.
    """

    @abstractmethod
    def spawn(self, path: str, argv: List[str]) -> int:
        """
        Run ``path`` with ``argv`` and wait for it.

        Args:
            path: Resolved executable path
            argv: Argument vector, argv[0] being the command name

        Returns:
            Exit status of the child (128+N if killed by signal N)

        Raises:
            SpawnError: If the executable could not be started
        """
        pass


class SubprocessSpawner(Spawner):
    """Spawner built on the subprocess module."""

    def spawn(self, path: str, argv: List[str]) -> int:
        try:
            completed = subprocess.run(argv, executable=path)
        except OSError as e:
            raise SpawnError(path, e.strerror or str(e))
        return _normalize_status(completed.returncode)


class ForkExecSpawner(Spawner):
    """
    Spawner built on fork/execv/waitpid (POSIX only).

    If the exec fails in the child, the child exits with status 1 and the
    parent sees an ordinary exit.
    """

    def spawn(self, path: str, argv: List[str]) -> int:
        pid = os.fork()
        if pid == 0:
            try:
                os.execv(path, argv)
            except (OSError, ValueError):
                pass
            os._exit(1)

        _, status = os.waitpid(pid, 0)
        return _normalize_status(os.waitstatus_to_exitcode(status))


SPAWNERS = {
    'subprocess': SubprocessSpawner,
    'fork': ForkExecSpawner,
}


def make_spawner(name: str) -> Spawner:
    """Create a spawner by its configuration name."""
    if name == 'fork' and not hasattr(os, 'fork'):
        raise ConfigError('spawner', name,
                          "fork spawner is not available on this platform")
    return SPAWNERS[name]()


class Process:
    """Represents a single command invocation"""

    def __init__(
        self,
        command: str,
        args: List[str],
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        executor: Optional[Callable] = None,
        context: Optional['CommandContext'] = None,
        executable: Optional[str] = None,
    ):
        """
        Initialize a process

        Args:
            command: Command name as typed
            args: Command arguments
            stdout: Output stream (text)
            stderr: Error stream (text)
            executor: Callable that executes the command
            context: CommandContext with environment, filesystem and spawner
            executable: Resolved path, for external commands
        """
        self.command = command
        self.args = args
        self.stdout = stdout if stdout is not None else io.StringIO()
        self.stderr = stderr if stderr is not None else io.StringIO()
        self.executor = executor
        self.executable = executable

        if context is None:
            from .context import CommandContext
            context = CommandContext()
        self.context = context

        self.exit_code = 0

    def execute(self) -> int:
        """
        Execute the process

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        if self.executor is None:
            error = CommandNotFoundError(self.command)
            self.stdout.write(f"{error}\n")
            self.exit_code = error.exit_code
            return self.exit_code

        try:
            self.exit_code = self.executor(self)
        except KeyboardInterrupt:
            raise
        except (ShellExit, ShellFatalError):
            # Interpreter-level outcomes are handled by the REPL loop
            raise
        except Exception as e:
            logger.debug("command %r failed", self.command, exc_info=True)
            self.stderr.write(f"Error executing '{self.command}': {str(e)}\n")
            self.exit_code = 1

        self.stdout.flush()
        self.stderr.flush()

        return self.exit_code

    def get_stdout(self) -> str:
        """Get stdout contents (only for in-memory streams)"""
        return self.stdout.getvalue()

    def get_stderr(self) -> str:
        """Get stderr contents (only for in-memory streams)"""
        return self.stderr.getvalue()

    def __repr__(self):
        args_str = ' '.join(self.args) if self.args else ''
        return f"Process({self.command} {args_str})"


def execute_external(process: Process) -> int:
    """
    Executor for commands resolved on PATH.

    Buffered shell output is flushed first so it appears before anything
    the child writes. The child's status becomes the command status; it is
    never reported to the user.
    """
    argv = build_argv(process.command, process.args)
    process.stdout.flush()
    process.stderr.flush()

    logger.debug("spawning %s argv=%r", process.executable, argv)
    try:
        status = process.context.spawner.spawn(process.executable, argv)
    except SpawnError as e:
        logger.debug("cannot execute %s", e)
        return 1

    logger.debug("%s exited with status %d", process.command, status)
    return status


__all__ = [
    'Process',
    'Spawner',
    'SubprocessSpawner',
    'ForkExecSpawner',
    'SPAWNERS',
    'make_spawner',
    'build_argv',
    'execute_external',
]
