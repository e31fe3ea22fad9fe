"""Tests for crosspath.config module - centralized runtime settings."""

from __future__ import annotations

import importlib
import logging
import os

import pytest


@pytest.fixture
def reload_config_after():
    """Restore config module to default state after test.

    This fixture reloads the config module after tests that modify env vars
    to ensure changes don't affect other tests.
    """
    yield
    for var in ["XP_STRICT", "XP_OS_PROFILE", "XP_LOG_LEVEL"]:
        os.environ.pop(var, None)

    from crosspath import config

    importlib.reload(config)


class TestSettings:
    """Test Settings dataclass and environment variable overrides."""

    def test_settings_is_frozen(self):
        """Test that Settings dataclass is frozen (immutable)."""
        from crosspath.config import settings

        with pytest.raises(Exception):  # FrozenInstanceError
            settings.strict = True  # type: ignore

    def test_default_values(self, monkeypatch, reload_config_after):  # noqa: ARG002
        """Test defaults when no XP_* variables are set."""
        for var in ["XP_STRICT", "XP_OS_PROFILE", "XP_LOG_LEVEL"]:
            monkeypatch.delenv(var, raising=False)
        from crosspath import config

        importlib.reload(config)

        assert config.settings.strict is False
        assert config.settings.os_profile == "auto"
        assert config.settings.log_level == "WARNING"

    def test_env_var_override(self, monkeypatch, reload_config_after):  # noqa: ARG002
        """Test that environment variables override defaults."""
        monkeypatch.setenv("XP_STRICT", "yes")
        monkeypatch.setenv("XP_OS_PROFILE", "Windows")
        monkeypatch.setenv("XP_LOG_LEVEL", "debug")

        from crosspath import config

        importlib.reload(config)

        assert config.settings.strict is True
        assert config.settings.os_profile == "windows"
        assert config.settings.log_level == "DEBUG"

    def test_invalid_profile_falls_back(self, monkeypatch, reload_config_after):  # noqa: ARG002
        """Test that an unknown profile name falls back to auto."""
        monkeypatch.setenv("XP_OS_PROFILE", "plan9")

        from crosspath import config

        importlib.reload(config)

        assert config.settings.os_profile == "auto"

    def test_reload_reaches_profile_selection(self, monkeypatch, reload_config_after):  # noqa: ARG002
        """OsProfile.host() reads the current settings, not an import-time copy."""
        monkeypatch.setenv("XP_OS_PROFILE", "windows")

        from crosspath import config
        from crosspath.model.os_profile import WINDOWS, OsProfile

        importlib.reload(config)

        assert OsProfile.host() is WINDOWS

    def test_env_prefix_validation(self):
        """Test that only XP_* env vars are allowed."""
        from crosspath.config import _env

        with pytest.raises(ValueError, match="Only XP_"):
            _env("HOME", "default")


class TestConfigureLogging:
    def test_attaches_one_handler(self):
        from crosspath.config import configure_logging

        logger = logging.getLogger("crosspath")
        before = list(logger.handlers)
        try:
            configure_logging("DEBUG")
            configure_logging("DEBUG")
            added = [h for h in logger.handlers if h not in before]
            assert len(added) == 1
            assert logger.level == logging.DEBUG
        finally:
            for h in logger.handlers[:]:
                if h not in before:
                    logger.removeHandler(h)
            logger.setLevel(logging.NOTSET)
