"""Expand ``${NAME}`` and ``%NAME%`` references that span a whole segment.

A reference only counts when it opens at the start of the text or right after a
separator, and closes right before a separator or the end of the text. Anything
else is left as literal text, which keeps ordinary filenames containing ``$`` or
``%`` intact:

- expanded: ``${MYVAR}``, ``/dir/${MYVAR}/``, ``%MYVAR%/dir``
- literal: ``$MYVAR``, ``hi${MYVAR}``, ``${MYVAR}hi``, ``${MYVAR``, ``%MY-VAR%``
- errors: ``${}``, ``%%``, or a variable that is not defined
"""

from __future__ import annotations

import logging
from typing import List

from crosspath.errors import EnvironmentVariableError
from crosspath.resolution.context import ResolutionContext
from crosspath.resolution.segments import is_separator

logger = logging.getLogger(__name__)


def is_env_name_char(ch: str) -> bool:
    """Return True if ``ch`` may appear in an environment variable name."""
    return ch.isascii() and (ch.isalnum() or ch == "_")


def has_references(path: str) -> bool:
    return "$" in path or "%" in path


def expand_vars(path: str, context: ResolutionContext) -> str:
    """Substitute every accepted variable reference in ``path``.

    Raises:
        EnvironmentVariableError: for an empty key or an undefined variable.
    """
    if not has_references(path):
        return path

    out: List[str] = []
    n = len(path)
    i = 0
    # Position 0 behaves as if it followed a separator.
    prev_sep = True

    while i < n:
        ch = path[i]
        i += 1

        curly = ch == "$" and prev_sep and i < n and path[i] == "{"
        percent = ch == "%" and prev_sep
        if not (curly or percent):
            out.append(ch)
            prev_sep = is_separator(ch)
            continue

        if curly:
            i += 1
            span = ["${"]
            key_start, closing = 2, "}"
        else:
            span = ["%"]
            key_start, closing = 1, "%"

        while i < n:
            c = path[i]
            i += 1
            span.append(c)

            if c == closing:
                if i == n or is_separator(path[i]):
                    key = "".join(span)[key_start:-1]
                    if not key:
                        raise EnvironmentVariableError("empty environment variable in path", path)
                    value = context.lookup_env(key)
                    if value is None:
                        raise EnvironmentVariableError(
                            f"environment variable '{key}' is not defined", path
                        )
                    logger.debug("expanded environment variable %s in %r", key, path)
                    span = [value]
                break

            if is_separator(c) or not is_env_name_char(c):
                break

        out.extend(span)
        prev_sep = False

    return "".join(out)


__all__ = ["expand_vars", "has_references", "is_env_name_char"]
