"""PATH lookup and home-directory handling for tinysh.

This module provides the PathResolver class which handles:
- Searching PATH directories for an executable
- Executable permission checks on candidates
- Expanding a leading ``~`` to HOME
"""

import logging
import os
import stat
from typing import List, Optional

from .filesystem_interface import FileSystemInterface
from .variable_manager import Environment

logger = logging.getLogger(__name__)

PATH_SEPARATOR = ":"
EXEC_MASK = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


class PathResolver:
    """Resolves bare command names to executable paths.

    Nothing is cached: every lookup re-reads PATH and re-checks the
    filesystem, so a lookup always sees the current environment and
    working directory.

    Attributes:
        env: Environment the PATH variable is read from
        filesystem: Filesystem used to inspect candidates
    """

    def __init__(self, env: Environment, filesystem: FileSystemInterface):
        """Initialize the resolver.

        Args:
            env: Environment providing PATH
            filesystem: Filesystem providing file modes
        """
        self.env = env
        self.filesystem = filesystem

    def search_dirs(self) -> List[str]:
        """Get the PATH directories in search order.

        Returns:
            Directories from PATH, empty entries dropped. Empty if PATH is unset.
        """
        path_env = self.env.get("PATH")
        if path_env is None:
            return []
        return [d for d in path_env.split(PATH_SEPARATOR) if d]

    def is_executable(self, path: str) -> bool:
        """Check if a path is an executable regular file.

        The file must exist, be openable, and have at least one of the
        owner, group or other execute bits set. Any error while checking
        counts as "not executable".

        Args:
            path: Candidate file path

        Returns:
            True if the candidate can be run
        """
        try:
            mode = self.filesystem.get_mode(path)
        except (OSError, ValueError) as e:
            logger.debug("rejecting %s: %s", path, e)
            return False

        if not stat.S_ISREG(mode):
            logger.debug("rejecting %s: not a regular file", path)
            return False

        return bool(mode & EXEC_MASK)

    def find_executable(self, name: str) -> Optional[str]:
        """Search PATH for an executable named ``name``.

        Directories are tried in PATH order and the first match wins.

        Args:
            name: Command name as typed

        Returns:
            Full path of the executable, or None if not found

        Examples:
            With PATH='/a:/b' and foo executable in both:
                find_executable('foo') -> '/a/foo'
        """
        for directory in self.search_dirs():
            # The name always lands under the directory, even if it is absolute
            candidate = os.path.join(directory, name.lstrip("/"))
            if self.is_executable(candidate):
                logger.debug("resolved %s -> %s", name, candidate)
                return candidate

        logger.debug("%s not found on PATH", name)
        return None


def expand_home(path: str, home: Optional[str]) -> Optional[str]:
    """Expand a leading ``~`` in a path.

    Only ``~`` and ``~/rest`` are expanded; ``~user`` forms and paths
    without a leading tilde are returned unchanged.

    Args:
        path: Path as typed
        home: Value of HOME, or None if unset

    Returns:
        The expanded path, or None if expansion was needed but HOME is unset

    Examples:
        expand_home('~', '/home/u') -> '/home/u'
        expand_home('~/x', '/home/u') -> '/home/u/x'
        expand_home('docs', None) -> 'docs'
    """
    if path != "~" and not path.startswith("~/"):
        return path

    if home is None:
        return None

    if path == "~":
        return home

    rest = path[2:].lstrip("/")
    if not rest:
        return home
    return os.path.join(home, rest)
