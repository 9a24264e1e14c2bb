"""
EXIT command - leave the shell.
"""

import re

from ..exceptions import InvalidArgumentError, ShellExit
from ..process import Process
from . import register_command
from .base import write_error

_DECIMAL = re.compile(r'[0-9]+')


def parse_exit_code(command: str, value: str) -> int:
    """
    Parse an exit code as an unsigned 8-bit decimal integer.

    Raises:
        InvalidArgumentError: If value isn't a decimal number in 0..255
    """
    if not _DECIMAL.fullmatch(value) or int(value) > 255:
        raise InvalidArgumentError(command, value, "numeric argument required")
    return int(value)


@register_command('exit')
def cmd_exit(process: Process) -> int:
    """
    Exit the shell

    Usage: exit [code]

    Examples:
      exit      # exit with status 0
      exit 42   # exit with status 42

    A malformed code is reported and the shell keeps running.
    Arguments after the first are ignored.
    """
    if not process.args:
        raise ShellExit(0)

    try:
        code = parse_exit_code(process.command, process.args[0])
    except InvalidArgumentError as e:
        write_error(process, str(e), prefix_command=False)
        return e.exit_code

    raise ShellExit(code)
