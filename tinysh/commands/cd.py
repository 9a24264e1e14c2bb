"""
CD command - change working directory.
"""

import logging

from ..path_manager import expand_home
from ..process import Process
from . import register_command
from .base import report_directory_error

logger = logging.getLogger(__name__)


@register_command('cd')
def cmd_cd(process: Process) -> int:
    """
    Change the working directory

    Usage: cd [path]

    Examples:
      cd          # go to $HOME
      cd ~/src    # go to $HOME/src
      cd ..       # go up one level

    Only a leading ``~`` or ``~/`` is expanded; ``~user`` is used as-is.
    On failure the working directory is left unchanged.
    """
    home = process.context.get_variable('HOME')

    if process.args:
        target = expand_home(process.args[0], home)
    else:
        target = home

    if target is None:
        process.stdout.write("cd: HOME not set\n")
        return 1

    try:
        process.context.change_directory(target)
    except (OSError, ValueError) as e:
        logger.debug("chdir %s failed: %s", target, e)
        return report_directory_error(process, target)

    return 0
