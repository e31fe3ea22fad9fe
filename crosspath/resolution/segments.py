"""Split expanded path text into normalized segments.

Both ``/`` and ``\\`` separate segments on every host. Empty pieces are
dropped; every other piece, ``.`` included, is an ordinary segment. A segment
other than ``..`` that is directly followed by ``..`` is dropped together with
it. Nothing else about ``..`` is interpreted, so an unmatched ``..`` (for
example the second of two in a row) is yielded as-is.
"""

from __future__ import annotations

import re
from typing import Iterator, List, NamedTuple

SEPARATORS = ("/", "\\")
CANONICAL_SEPARATOR = "/"
PARENT = ".."
CURRENT = "."

_SPLIT_RE = re.compile(r"[/\\]")


class Segment(NamedTuple):
    """One non-empty path component and whether more components follow it."""

    text: str
    has_more: bool


def is_separator(ch: str) -> bool:
    return ch in SEPARATORS


def _pieces(expanded: str) -> List[str]:
    return [piece for piece in _SPLIT_RE.split(expanded) if piece]


def iter_segments(expanded: str) -> Iterator[Segment]:
    """Yield the segments of ``expanded`` with adjacent ``x/..`` pairs cancelled."""
    pieces = _pieces(expanded)
    i = 0
    while i < len(pieces):
        piece = pieces[i]
        if piece != PARENT and i + 1 < len(pieces) and pieces[i + 1] == PARENT:
            i += 2
            continue
        i += 1
        yield Segment(piece, i < len(pieces))


def segments(expanded: str) -> List[str]:
    """Return the segment texts of ``expanded`` as a list."""
    return [seg.text for seg in iter_segments(expanded)]


__all__ = [
    "SEPARATORS",
    "CANONICAL_SEPARATOR",
    "PARENT",
    "CURRENT",
    "Segment",
    "is_separator",
    "iter_segments",
    "segments",
]
