"""Pure per-segment validation for canonical paths.

No filesystem I/O is performed by any function in this module.

Rules:
- Always: at most 255 characters; no NUL and no ``:``.
- Strict (and always on Windows): no C0 control characters or DEL, none of
  ``" * < > ? |`` and no ``\\``; no reserved device name (``CON``, ``PRN``,
  ``AUX``, ``NUL``, ``COM0``-``COM9``, ``LPT0``-``LPT9``), with or without an
  extension, in any casing.

``..`` passes validation: whether it escapes a boundary is the caller's call.
"""

from __future__ import annotations

import re

from crosspath.errors import PathValidationError

MAX_SEGMENT_LENGTH = 255

_ALWAYS_FORBIDDEN = ("\x00", ":")
_STRICT_FORBIDDEN_RE = re.compile(r'[\x00-\x1F\x7F"*<>?\\|]')

RESERVED_NAMES = frozenset(
    {
        "CON",
        "PRN",
        "AUX",
        "NUL",
        *(f"COM{i}" for i in range(10)),
        *(f"LPT{i}" for i in range(10)),
    }
)


def is_reserved_name(segment: str) -> bool:
    """Check if a segment is a reserved Windows device name."""
    return segment.split(".")[0].upper() in RESERVED_NAMES


def validate_segment(segment: str, path: str, *, strict: bool) -> str:
    """Validate one segment of ``path``.

    Args:
        segment: Segment text, already split on separators
        path: Full text being resolved, used for the error message
        strict: Apply the Windows rule set

    Returns:
        The segment unchanged

    Raises:
        PathValidationError: naming the first rule the segment breaks
    """
    if len(segment) > MAX_SEGMENT_LENGTH:
        raise PathValidationError(
            f"path component too long: {len(segment)} > {MAX_SEGMENT_LENGTH}", path
        )

    for ch in _ALWAYS_FORBIDDEN:
        if ch in segment:
            raise PathValidationError(f"forbidden character {ch!r} in path component", path)

    if strict:
        match = _STRICT_FORBIDDEN_RE.search(segment)
        if match:
            raise PathValidationError(
                f"forbidden character {match.group()!r} in path component", path
            )
        if is_reserved_name(segment):
            raise PathValidationError(f"reserved filename '{segment}'", path)

    return segment


__all__ = [
    "MAX_SEGMENT_LENGTH",
    "RESERVED_NAMES",
    "is_reserved_name",
    "validate_segment",
]
