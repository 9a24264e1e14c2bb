"""
CommandContext - Encapsulates all context needed for command execution.

This module provides the CommandContext dataclass that decouples commands
from the Shell class, so builtins can be tested with a fake environment,
filesystem and spawner instead of real OS state.
"""

from dataclasses import dataclass, field
from typing import Optional, TYPE_CHECKING

from .filesystem_interface import FileSystemInterface, LocalFileSystem
from .path_manager import PathResolver
from .variable_manager import Environment

if TYPE_CHECKING:
    from .process import Spawner


@dataclass
class CommandContext:
    """
    Encapsulates all context needed for command execution.

    This provides commands with access to:
    - Environment variables (read-only)
    - File system operations and the working directory
    - PATH resolution
    - The process spawner

    Example:
        >>> from tinysh.context import CommandContext
        >>> from tinysh.variable_manager import Environment
        >>> ctx = CommandContext(env=Environment({'HOME': '/home/u'}))
        >>> ctx.get_variable('HOME')
        '/home/u'
    """

    env: Environment = field(default_factory=Environment)
    filesystem: FileSystemInterface = field(default_factory=LocalFileSystem)
    spawner: Optional['Spawner'] = None
    resolver: Optional[PathResolver] = None

    def __post_init__(self):
        if self.resolver is None:
            self.resolver = PathResolver(self.env, self.filesystem)
        if self.spawner is None:
            from .process import SubprocessSpawner
            self.spawner = SubprocessSpawner()

    def get_variable(self, name: str) -> Optional[str]:
        """
        Get an environment variable.

        Args:
            name: Variable name

        Returns:
            Variable value or None if unset
        """
        return self.env.get(name)

    def get_cwd(self) -> str:
        """Get the current working directory (raises OSError on failure)."""
        return self.filesystem.get_cwd()

    def change_directory(self, path: str) -> None:
        """Change the working directory (raises OSError on failure)."""
        self.filesystem.change_directory(path)

    def find_executable(self, name: str) -> Optional[str]:
        """Resolve a command name on PATH."""
        return self.resolver.find_executable(name)

    def is_builtin(self, name: str) -> bool:
        """Check if a name is a shell builtin."""
        from .builtins import is_builtin
        return is_builtin(name)
