"""Unit tests for common/settings.py."""

import importlib
import os
import unittest

import common.settings


class TestSettings(unittest.TestCase):
    """Tests for shared application settings."""

    def _reload_with(self, name: str, value: str | None) -> None:
        """Reload settings with ``name`` set to ``value`` (or unset), then restore."""
        backup = os.environ.pop(name, None)
        if value is not None:
            os.environ[name] = value

        def restore() -> None:
            os.environ.pop(name, None)
            if backup is not None:
                os.environ[name] = backup
            importlib.reload(common.settings)

        self.addCleanup(restore)
        importlib.reload(common.settings)

    def test_max_attempts_default(self) -> None:
        """BOARD_MAX_ATTEMPTS defaults to 150000 when the env var is not set."""
        self._reload_with('BOARD_MAX_ATTEMPTS', None)
        self.assertEqual(common.settings.BOARD_MAX_ATTEMPTS, 150000)

    def test_max_attempts_reads_from_env(self) -> None:
        """BOARD_MAX_ATTEMPTS is read from the environment as an int."""
        self._reload_with('BOARD_MAX_ATTEMPTS', '2000')
        self.assertEqual(common.settings.BOARD_MAX_ATTEMPTS, 2000)

    def test_log_level_default(self) -> None:
        """LOG_LEVEL defaults to INFO."""
        self._reload_with('LOG_LEVEL', None)
        self.assertEqual(common.settings.LOG_LEVEL, 'INFO')

    def test_log_level_is_upper_cased(self) -> None:
        """LOG_LEVEL is normalised to upper case."""
        self._reload_with('LOG_LEVEL', 'debug')
        self.assertEqual(common.settings.LOG_LEVEL, 'DEBUG')


if __name__ == '__main__':
    unittest.main()
