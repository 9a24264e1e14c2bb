"""
Shell - the read/dispatch/print loop.

Each iteration writes the prompt, reads one line, and routes the command
either to a builtin or, via PATH lookup, to an external program.
"""

import logging
import sys
from typing import Optional, TextIO

from .builtins import get_builtin
from .config import ShellConfig
from .context import CommandContext
from .exceptions import EndOfInput, ShellExit
from .lexer import CommandLine
from .process import Process, execute_external, make_spawner

logger = logging.getLogger(__name__)


class Shell:
    """
    Interactive command interpreter.

    Attributes:
        config: Shell settings
        context: Environment, filesystem, resolver and spawner shared by commands
        stdin: Line source
        stdout: Prompt and command output
        stderr: Error output for builtins
        last_exit_code: Status of the most recent command
    """

    def __init__(
        self,
        config: Optional[ShellConfig] = None,
        context: Optional[CommandContext] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ):
        self.config = config or ShellConfig()
        if context is None:
            context = CommandContext(spawner=make_spawner(self.config.spawner))
        self.context = context
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        self.last_exit_code = 0

    def read_line(self) -> str:
        """
        Read one raw line; the terminator is removed when it is parsed.

        Raises:
            EndOfInput: If the input stream is exhausted
        """
        line = self.stdin.readline()
        if not line:
            raise EndOfInput()
        return line

    def create_process(self, command: CommandLine) -> Process:
        """
        Build the process for a parsed command.

        Builtins win over PATH; a name that is neither gets no executor,
        which makes the process report "command not found".
        """
        executor = get_builtin(command.name)
        executable = None

        if executor is not None:
            logger.debug("dispatching builtin %s", command.name)
        else:
            executable = self.context.find_executable(command.name)
            if executable is not None:
                executor = execute_external

        return Process(
            command=command.name,
            args=command.args,
            stdout=self.stdout,
            stderr=self.stderr,
            executor=executor,
            context=self.context,
            executable=executable,
        )

    def execute(self, line: str) -> int:
        """
        Execute one command line.

        Args:
            line: Raw line, with or without its trailing line-feed

        Returns:
            Exit code of the command (an empty line leaves it unchanged)

        Raises:
            ShellExit: If the line ran the exit builtin
            ShellFatalError: If the shell can't continue
        """
        command = CommandLine.parse(line)
        if command is None:
            return self.last_exit_code

        logger.debug("tokens: %r %r", command.name, command.args)
        try:
            self.last_exit_code = self.create_process(command).execute()
        finally:
            self.stdout.flush()
        return self.last_exit_code

    def run(self) -> int:
        """
        Run the interactive loop until end of input or exit.

        Returns:
            The shell's exit status: 0 at end of input, or the exit code
        """
        while True:
            self.stdout.write(self.config.prompt)
            self.stdout.flush()

            try:
                line = self.read_line()
            except EndOfInput:
                logger.debug("end of input")
                return 0

            try:
                self.execute(line)
            except ShellExit as e:
                logger.debug("exit requested with status %d", e.exit_code)
                return e.exit_code
