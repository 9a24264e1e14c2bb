"""
Pytest configuration and shared fixtures for tinysh tests.

This module provides reusable test fixtures for:
- Mock filesystem implementation
- Recording spawner (no real child processes)
- Shell instances over in-memory streams
"""

import io
import os
import stat
from typing import Dict, List, Optional, Set, Tuple

import pytest

from tinysh.config import ShellConfig
from tinysh.context import CommandContext
from tinysh.filesystem_interface import FileSystemInterface
from tinysh.process import Process, Spawner
from tinysh.shell import Shell
from tinysh.variable_manager import Environment


# ============================================================================
# Mock Filesystem Implementation
# ============================================================================

class MockFileSystem(FileSystemInterface):
    """
    In-memory filesystem for testing without touching real OS state.

    Files are tracked by path and permission bits; directories by path.
    """

    def __init__(self, cwd: str = '/'):
        self.files: Dict[str, int] = {}
        self.directories: Set[str] = {'/'}
        self.unreadable: Set[str] = set()
        self.opened: List[str] = []
        self.cwd = cwd
        self.cwd_lost = False

    def _abspath(self, path: str) -> str:
        if not path.startswith('/'):
            path = os.path.join(self.cwd, path)
        return os.path.normpath(path)

    def add_directory(self, path: str) -> None:
        """Create a directory and its parents."""
        current = ''
        for part in path.strip('/').split('/'):
            current += '/' + part
            self.directories.add(current)

    def add_file(self, path: str, mode: int = 0o644) -> None:
        """Create a regular file with the given permission bits."""
        self.add_directory(os.path.dirname(path))
        self.files[path] = mode

    def add_executable(self, path: str, mode: int = 0o755) -> None:
        self.add_file(path, mode)

    def get_mode(self, path: str) -> int:
        path = self._abspath(path)
        if path in self.unreadable:
            raise PermissionError(13, 'Permission denied', path)
        if path in self.files:
            self.opened.append(path)
            return stat.S_IFREG | self.files[path]
        if path in self.directories:
            self.opened.append(path)
            return stat.S_IFDIR | 0o755
        raise FileNotFoundError(2, 'No such file or directory', path)

    def get_cwd(self) -> str:
        if self.cwd_lost:
            raise FileNotFoundError(2, 'No such file or directory')
        return self.cwd

    def change_directory(self, path: str) -> None:
        target = self._abspath(path)
        if target in self.unreadable:
            raise PermissionError(13, 'Permission denied', path)
        if target in self.files:
            raise NotADirectoryError(20, 'Not a directory', path)
        if target not in self.directories:
            raise FileNotFoundError(2, 'No such file or directory', path)
        self.cwd = target


class RecordingSpawner(Spawner):
    """
    Spawner that records calls instead of starting processes.

    Attributes:
        calls: (path, argv) for every spawn
        status: Exit status returned for every spawn
        error: Exception raised instead of returning, if set
    """

    def __init__(self, status: int = 0, error: Optional[Exception] = None):
        self.calls: List[Tuple[str, List[str]]] = []
        self.status = status
        self.error = error

    def spawn(self, path: str, argv: List[str]) -> int:
        self.calls.append((path, list(argv)))
        if self.error is not None:
            raise self.error
        return self.status


# ============================================================================
# Pytest Fixtures
# ============================================================================

DEFAULT_ENV = {
    'PATH': '/usr/local/bin:/usr/bin:/bin',
    'HOME': '/home/test',
    'USER': 'test',
}


@pytest.fixture
def mock_filesystem():
    """
    Provides a mock filesystem with a few programs on PATH.

    Layout:
        /bin/ls, /usr/bin/ls, /usr/bin/cat   executables
        /bin/notexec                         not executable
        /home/test/projects                  directory
        /tmp                                 directory
    """
    fs = MockFileSystem()
    fs.add_executable('/bin/ls')
    fs.add_executable('/usr/bin/ls')
    fs.add_executable('/usr/bin/cat')
    fs.add_file('/bin/notexec', 0o644)
    fs.add_directory('/usr/local/bin')
    fs.add_directory('/home/test/projects')
    fs.add_directory('/tmp')
    return fs


@pytest.fixture
def env():
    """Provides a copy of the default test environment variables."""
    return dict(DEFAULT_ENV)


@pytest.fixture
def spawner():
    """Provides a spawner that records calls and returns 0."""
    return RecordingSpawner()


@pytest.fixture
def context(env, mock_filesystem, spawner):
    """Provides a CommandContext over the mock filesystem and test env."""
    return CommandContext(
        env=Environment(env),
        filesystem=mock_filesystem,
        spawner=spawner,
    )


@pytest.fixture
def make_process(context):
    """
    Factory for Process instances with captured output.

    Example:
        def test_echo(make_process):
            process = make_process('echo', ['a'])
            cmd_echo(process)
            assert process.get_stdout() == 'a \\n'
    """
    def _make(command: str, args: Optional[List[str]] = None) -> Process:
        return Process(
            command=command,
            args=args or [],
            stdout=io.StringIO(),
            stderr=io.StringIO(),
            context=context,
        )
    return _make


@pytest.fixture
def make_shell(context):
    """
    Factory for Shell instances reading from a string.

    Example:
        def test_loop(make_shell):
            shell = make_shell('echo hi\\n')
            assert shell.run() == 0
            assert shell.stdout.getvalue() == '$ hi \\n$ '
    """
    def _make(input_text: str = '') -> Shell:
        return Shell(
            config=ShellConfig(),
            context=context,
            stdin=io.StringIO(input_text),
            stdout=io.StringIO(),
            stderr=io.StringIO(),
        )
    return _make


@pytest.fixture
def posix_bin(tmp_path):
    """
    Provides a real directory for PATH with a helper to add scripts.

    Returns:
        (directory, add_script) where add_script(name, body, mode) writes
        a /bin/sh script and returns its path.
    """
    if not os.path.exists('/bin/sh'):
        pytest.skip('requires /bin/sh')

    bin_dir = tmp_path / 'bin'
    bin_dir.mkdir()

    def add_script(name: str, body: str, mode: int = 0o755) -> str:
        script = bin_dir / name
        script.write_text('#!/bin/sh\n' + body)
        script.chmod(mode)
        return str(script)

    return bin_dir, add_script
