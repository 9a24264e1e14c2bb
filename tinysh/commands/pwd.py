"""
PWD command - print working directory.
"""

from ..exceptions import ShellFatalError
from ..process import Process
from . import register_command


@register_command('pwd')
def cmd_pwd(process: Process) -> int:
    """
    Print working directory

    Usage: pwd

    Failing to read the working directory ends the shell.
    """
    try:
        cwd = process.context.get_cwd()
    except OSError as e:
        raise ShellFatalError(f"pwd: cannot get current directory: {e}") from e

    process.stdout.write(f"{cwd}\n")
    return 0
