"""Leading marker of a canonical path."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence


class AnchorKind(Enum):
    NONE = "none"
    CURRENT_DIR = "current_dir"
    HOME_DIR = "home_dir"
    ROOT = "root"
    DRIVE = "drive"


@dataclass(frozen=True)
class Anchor:
    """What a canonical path starts with.

    ``drive`` is a lower-case letter and is set only for ``AnchorKind.DRIVE``.
    """

    kind: AnchorKind = AnchorKind.NONE
    drive: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.kind is AnchorKind.DRIVE) != (self.drive is not None):
            raise ValueError(f"drive letter must be set exactly for drive anchors: {self!r}")
        if self.drive is not None:
            object.__setattr__(self, "drive", self.drive.lower())

    @classmethod
    def for_drive(cls, letter: str) -> "Anchor":
        return cls(AnchorKind.DRIVE, letter)

    @property
    def is_absolute(self) -> bool:
        return self.kind in (AnchorKind.ROOT, AnchorKind.DRIVE)

    @property
    def is_shorthand(self) -> bool:
        return self.kind in (AnchorKind.HOME_DIR, AnchorKind.CURRENT_DIR)

    def render(self, segments: Sequence[str], separator: str, keep_drive: bool) -> str:
        """Join ``segments`` behind this anchor using ``separator``."""
        body = separator.join(segments)
        if self.kind is AnchorKind.NONE:
            return body
        if self.kind is AnchorKind.ROOT:
            return separator + body
        if self.kind is AnchorKind.DRIVE:
            head = f"{self.drive}:{separator}" if keep_drive else separator
            return head + body
        marker = "~" if self.kind is AnchorKind.HOME_DIR else "."
        return marker + separator + body if body else marker


NO_ANCHOR = Anchor()
ROOT = Anchor(AnchorKind.ROOT)
HOME_DIR = Anchor(AnchorKind.HOME_DIR)
CURRENT_DIR = Anchor(AnchorKind.CURRENT_DIR)


__all__ = ["AnchorKind", "Anchor", "NO_ANCHOR", "ROOT", "HOME_DIR", "CURRENT_DIR"]
