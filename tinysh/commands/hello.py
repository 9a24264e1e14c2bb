"""
HELLO command - print a greeting.
"""

from ..process import Process
from . import register_command


@register_command('hello')
def cmd_hello(process: Process) -> int:
    """
    Print a greeting

    Usage: hello
    """
    process.stdout.write("Hello, World!\n")
    return 0
