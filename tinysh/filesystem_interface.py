"""
FileSystemInterface - Abstract interface for filesystem operations.

This module provides the FileSystemInterface abstract base class that lets
the PATH resolver and the builtins work against any filesystem
implementation (the local OS, or an in-memory fake in tests).
"""

import os
from abc import ABC, abstractmethod


class FileSystemInterface(ABC):
    """
    Abstract interface for the filesystem operations the shell needs.

    Implementations:
    - LocalFileSystem (the real process filesystem and working directory)
    - MockFileSystem (tests, see tests/conftest.py)
    """

    @abstractmethod
    def get_mode(self, path: str) -> int:
        """
        Open a file and return its mode bits.

        The file must be opened to be inspected; any handle acquired for
        the check is released before returning.

        Args:
            path: File path

        Returns:
            st_mode of the opened file

        Raises:
            OSError: If the file doesn't exist or can't be opened
        """
        pass

    @abstractmethod
    def get_cwd(self) -> str:
        """
        Get the current working directory.

        Raises:
            OSError: If the directory can't be determined (e.g. removed)
        """
        pass

    @abstractmethod
    def change_directory(self, path: str) -> None:
        """
        Change the current working directory.

        Args:
            path: Absolute or relative directory path

        Raises:
            OSError: If the path doesn't exist, isn't a directory or
                     isn't accessible. The working directory is unchanged.
        """
        pass


class LocalFileSystem(FileSystemInterface):
    """Filesystem backed by the process's own OS state."""

    def get_mode(self, path: str) -> int:
        fd = os.open(path, os.O_RDONLY)
        try:
            return os.fstat(fd).st_mode
        finally:
            os.close(fd)

    def get_cwd(self) -> str:
        return os.getcwd()

    def change_directory(self, path: str) -> None:
        os.chdir(path)
