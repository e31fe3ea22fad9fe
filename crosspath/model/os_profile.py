"""Per-OS separator, drive and validation rules.

The set of profiles is closed: ``UnixProfile`` (Linux, macOS and other Unix-like
systems, optionally strict) and ``WindowsProfile`` (always strict).
"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Sequence

from crosspath import config
from crosspath.model.anchor import Anchor
from crosspath.model.validation import validate_segment


@dataclass(frozen=True)
class OsProfile(ABC):
    """Base class for the supported OS profiles. Do not subclass outside this module."""

    name = "abstract"
    separator = "/"
    keeps_drive = False

    @property
    @abstractmethod
    def is_strict(self) -> bool:
        ...

    def validate_segment(self, segment: str, path: str) -> str:
        return validate_segment(segment, path, strict=self.is_strict)

    def render(self, anchor: Anchor, segments: Sequence[str]) -> str:
        return anchor.render(segments, self.separator, self.keeps_drive)

    @staticmethod
    def host(strict: Optional[bool] = None) -> "OsProfile":
        """Profile for the running host, honouring ``XP_OS_PROFILE`` and ``XP_STRICT``."""
        name = config.settings.os_profile
        if name == "auto":
            name = "windows" if os.name == "nt" else "unix"
        return OsProfile.from_name(name, strict=strict)

    @staticmethod
    def from_name(name: str, strict: Optional[bool] = None) -> "OsProfile":
        if strict is None:
            strict = config.settings.strict
        if name == "windows":
            return WINDOWS
        if name == "unix":
            return UnixProfile(strict=strict)
        raise ValueError(f"unknown OS profile: {name}")


@dataclass(frozen=True)
class UnixProfile(OsProfile):
    strict: bool = False

    name = "unix"
    separator = "/"
    keeps_drive = False

    @property
    def is_strict(self) -> bool:
        return self.strict


@dataclass(frozen=True)
class WindowsProfile(OsProfile):
    name = "windows"
    separator = "\\"
    keeps_drive = True

    @property
    def is_strict(self) -> bool:
        return True


UNIX = UnixProfile()
UNIX_STRICT = UnixProfile(strict=True)
WINDOWS = WindowsProfile()


__all__ = ["OsProfile", "UnixProfile", "WindowsProfile", "UNIX", "UNIX_STRICT", "WINDOWS"]
