"""crosspath runtime settings.

Provides typed settings for path validation and platform selection.
All settings are backed by environment variables following the XP_* naming convention.

Example:
    >>> from crosspath.config import settings
    >>> settings.strict
    False
    >>> settings.os_profile
    'auto'

Environment Variables:
    XP_STRICT: Apply Windows-equivalent validation on every host (default: off)
    XP_OS_PROFILE: Rendering/validation profile, one of auto|unix|windows (default: auto)
    XP_LOG_LEVEL: Level for the ``crosspath`` logger when configured via ``configure_logging`` (default: WARNING)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

OS_PROFILE_CHOICES = ("auto", "unix", "windows")


def _env(name: str, default: str) -> str:
    """Get environment variable with XP_* prefix validation."""
    if not name.startswith("XP_"):
        raise ValueError(f"Only XP_* env vars are allowed, got: {name}")
    return os.getenv(name, default)


def _env_bool(name: str, default: bool) -> bool:
    raw = _env(name, str(default))
    return raw.lower() in {"1", "true", "yes", "on"}


def _env_choice(name: str, default: str, choices: tuple[str, ...]) -> str:
    """Get environment variable restricted to a fixed set of lower-case values."""
    raw = _env(name, default).strip().lower()
    return raw if raw in choices else default


@dataclass(frozen=True)
class Settings:
    """Centralized runtime settings for crosspath.

    All values can be overridden via environment variables.
    This dataclass is frozen to prevent accidental mutation at runtime.
    For testing, override environment variables and reload this module,
    or use monkeypatch to modify the module-level `settings` instance.
    """

    strict: bool = _env_bool("XP_STRICT", False)
    os_profile: str = _env_choice("XP_OS_PROFILE", "auto", OS_PROFILE_CHOICES)
    log_level: str = _env("XP_LOG_LEVEL", "WARNING").upper()


# Module-level instance for convenient access
settings = Settings()


def configure_logging(level: str | None = None) -> logging.Logger:
    """Attach a stream handler to the package logger.

    Library code never calls this; applications and debugging sessions do.
    """
    logger = logging.getLogger("crosspath")
    logger.setLevel(level or settings.log_level)
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s"))
        logger.addHandler(handler)
    return logger


__all__ = ["settings", "Settings", "configure_logging", "OS_PROFILE_CHOICES"]
