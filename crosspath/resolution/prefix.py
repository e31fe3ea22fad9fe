"""Expand leading ``~``/``.`` shorthand and contract absolute paths back to it."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Tuple

from crosspath.errors import ContextLookupError
from crosspath.resolution.context import ResolutionContext
from crosspath.resolution.segments import CANONICAL_SEPARATOR, SEPARATORS, is_separator

logger = logging.getLogger(__name__)

HOME_MARKER = "~"
CURRENT_MARKER = "."


class Start(Enum):
    """How a raw path begins."""

    HOME = "home"
    CURRENT = "current"
    DRIVE_RELATIVE = "drive_relative"
    NONE = "none"


def _starts_with_marker(raw: str, marker: str) -> bool:
    return raw == marker or any(raw.startswith(marker + sep) for sep in SEPARATORS)


def split_drive(text: str) -> Tuple[Optional[str], str]:
    """Split a leading ``X:`` drive designator off ``text``.

    Returns the lower-cased drive letter (or None) and the rest of the text.
    """
    if len(text) >= 2 and text[1] == ":" and text[0].isascii() and text[0].isalpha():
        return text[0].lower(), text[2:]
    return None, text


def detect_start(raw: str) -> Start:
    if _starts_with_marker(raw, HOME_MARKER):
        return Start.HOME
    if _starts_with_marker(raw, CURRENT_MARKER):
        return Start.CURRENT
    drive, rest = split_drive(raw)
    if drive is not None and rest and not is_separator(rest[0]):
        return Start.DRIVE_RELATIVE
    return Start.NONE


def _prefix(base: str, remainder: str, separator: str) -> str:
    if base.endswith(SEPARATORS) or remainder.startswith(SEPARATORS):
        return base + remainder
    return base + separator + remainder


def _require(value: str, what: str, raw: str) -> str:
    if not value:
        raise ContextLookupError(f"could not resolve the {what}", raw)
    return value


def expand_prefix(
    raw: str, context: ResolutionContext, separator: str = CANONICAL_SEPARATOR
) -> str:
    """Replace a leading shorthand in ``raw`` with the matching context directory.

    ``~`` becomes the home directory and ``.`` the current working directory.
    A drive-relative ``c:dir`` is resolved like ``./dir``; the drive letter is
    kept only if the working directory has none of its own. Anything else is
    returned unchanged.
    """
    start = detect_start(raw)
    if start is Start.HOME:
        home = _require(context.home, "home directory", raw)
        expanded = _prefix(home, raw[1:], separator)
    elif start is Start.CURRENT:
        cwd = _require(context.cwd, "current working directory", raw)
        expanded = _prefix(cwd, raw[1:], separator)
    elif start is Start.DRIVE_RELATIVE:
        cwd = _require(context.cwd, "current working directory", raw)
        drive, rest = split_drive(raw)
        cwd_drive, _ = split_drive(cwd)
        base = cwd if cwd_drive is not None else f"{drive}:{cwd}"
        expanded = _prefix(base, rest, separator)
    else:
        return raw

    logger.debug("expanded %s prefix: %r -> %r", start.value, raw, expanded)
    return expanded


def _remove_start(path: str, start: str) -> Optional[str]:
    if not start or not path.startswith(start):
        return None
    rest = path[len(start):]
    if rest and is_separator(rest[0]):
        rest = rest[1:]
    return rest


def contract_prefix(absolute: str, context: ResolutionContext) -> Tuple[Optional[str], str]:
    """Pick the shortest ``~``/``.`` shorthand for ``absolute``.

    Both the home directory and the working directory are matched as exact
    textual prefixes. When both match, the shorter remainder wins and an equal
    remainder goes to ``.``. Returns ``(None, absolute)`` when neither matches.
    """
    home_rel = _remove_start(absolute, context.home)
    cwd_rel = _remove_start(absolute, context.cwd)

    if home_rel is not None and cwd_rel is not None:
        if len(home_rel) < len(cwd_rel):
            return HOME_MARKER, home_rel
        return CURRENT_MARKER, cwd_rel
    if home_rel is not None:
        return HOME_MARKER, home_rel
    if cwd_rel is not None:
        return CURRENT_MARKER, cwd_rel
    return None, absolute


__all__ = [
    "Start",
    "HOME_MARKER",
    "CURRENT_MARKER",
    "detect_start",
    "split_drive",
    "expand_prefix",
    "contract_prefix",
]
