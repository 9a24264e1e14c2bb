"""Unit tests for ShellConfig."""

import logging

import pytest

from tinysh.config import ShellConfig
from tinysh.exceptions import ConfigError


class TestShellConfig:
    """Tests for ShellConfig."""

    def test_defaults(self):
        config = ShellConfig()
        assert config.prompt == '$ '
        assert config.spawner == 'subprocess'
        assert config.log_level == 'WARNING'
        assert config.log_level_value == logging.WARNING

    def test_from_env(self):
        config = ShellConfig.from_env({
            'TINYSH_PROMPT': '> ',
            'TINYSH_SPAWNER': 'fork',
            'TINYSH_LOG_LEVEL': 'debug',
        })
        assert config.prompt == '> '
        assert config.spawner == 'fork'
        assert config.log_level == 'DEBUG'

    def test_from_env_defaults(self):
        assert ShellConfig.from_env({}) == ShellConfig()

    def test_invalid_spawner(self):
        with pytest.raises(ConfigError):
            ShellConfig(spawner='vfork')

    def test_invalid_log_level(self):
        with pytest.raises(ConfigError):
            ShellConfig.from_env({'TINYSH_LOG_LEVEL': 'loud'})

    def test_fork_unavailable(self, monkeypatch):
        """Test the fork spawner is rejected where os.fork is missing."""
        monkeypatch.delattr('os.fork', raising=False)
        with pytest.raises(ConfigError):
            ShellConfig(spawner='fork')

    def test_override(self):
        base = ShellConfig(prompt='> ')
        config = base.override(log_level='INFO')
        assert config.prompt == '> '
        assert config.log_level == 'INFO'
        assert base.log_level == 'WARNING'
