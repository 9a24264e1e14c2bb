"""
Shell configuration.

Settings come from TINYSH_* environment variables and can be overridden
by command-line flags.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .exceptions import ConfigError
from .process import SPAWNERS

DEFAULT_PROMPT = '$ '
DEFAULT_SPAWNER = 'subprocess'
DEFAULT_LOG_LEVEL = 'WARNING'

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass
class ShellConfig:
    """
    Runtime settings for the shell.

    Attributes:
        prompt: Text written before each line is read
        spawner: How external commands are started ('subprocess' or 'fork')
        log_level: Logging threshold name
    """

    prompt: str = DEFAULT_PROMPT
    spawner: str = DEFAULT_SPAWNER
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self):
        self.validate()

    def validate(self):
        """Raise ConfigError on an unknown spawner or log level."""
        if self.spawner not in SPAWNERS:
            raise ConfigError('spawner', self.spawner)
        if self.spawner == 'fork' and not hasattr(os, 'fork'):
            raise ConfigError('spawner', self.spawner,
                              "fork spawner is not available on this platform")
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigError('log level', self.log_level)

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'ShellConfig':
        """
        Build a config from TINYSH_PROMPT, TINYSH_SPAWNER and TINYSH_LOG_LEVEL.

        Unset variables fall back to the defaults.
        """
        if environ is None:
            environ = os.environ
        return cls(
            prompt=environ.get('TINYSH_PROMPT', DEFAULT_PROMPT),
            spawner=environ.get('TINYSH_SPAWNER', DEFAULT_SPAWNER),
            log_level=environ.get('TINYSH_LOG_LEVEL', DEFAULT_LOG_LEVEL),
        )

    def override(self, prompt: Optional[str] = None, spawner: Optional[str] = None,
                 log_level: Optional[str] = None) -> 'ShellConfig':
        """Return a copy with the given (non-None) values replaced."""
        return ShellConfig(
            prompt=self.prompt if prompt is None else prompt,
            spawner=self.spawner if spawner is None else spawner,
            log_level=self.log_level if log_level is None else log_level,
        )
