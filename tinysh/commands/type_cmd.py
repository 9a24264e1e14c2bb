"""
TYPE command - describe how a name would be interpreted.
"""

from ..process import Process
from . import register_command
from .base import require_args


@register_command('type')
def cmd_type(process: Process) -> int:
    """
    Describe a command name

    Usage: type name

    Examples:
      type cd     # cd is a shell builtin
      type ls     # ls is /bin/ls
    """
    if not require_args(process, 1, usage="type name"):
        return 1

    name = process.args[0]

    if process.context.is_builtin(name):
        process.stdout.write(f"{name} is a shell builtin\n")
        return 0

    path = process.context.find_executable(name)
    if path is None:
        process.stdout.write(f"{name}: not found\n")
        return 1

    process.stdout.write(f"{name} is {path}\n")
    return 0
