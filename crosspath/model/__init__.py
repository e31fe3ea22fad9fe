"""Canonical path value, OS profiles and validation."""

from .anchor import Anchor, AnchorKind
from .canonical import CanonicalPath
from .os_profile import UNIX, UNIX_STRICT, WINDOWS, OsProfile, UnixProfile, WindowsProfile

__all__ = [
    "Anchor",
    "AnchorKind",
    "CanonicalPath",
    "OsProfile",
    "UnixProfile",
    "WindowsProfile",
    "UNIX",
    "UNIX_STRICT",
    "WINDOWS",
]
