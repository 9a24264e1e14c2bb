"""
ECHO command - print arguments.
"""

from ..process import Process
from . import register_command


@register_command('echo')
def cmd_echo(process: Process) -> int:
    """
    Print arguments

    Usage: echo [arg ...]

    Every argument is followed by a single space, including the last one,
    so ``echo a b`` writes ``"a b \\n"``. Without arguments only the
    newline is written.
    """
    for word in process.args:
        process.stdout.write(f"{word} ")
    process.stdout.write("\n")
    return 0
