"""Error family raised while resolving and validating paths.

Every error carries the offending text. Errors for relative paths also carry
the current working directory the path was resolved against.
"""

from __future__ import annotations

from typing import Optional


class InvalidPathError(ValueError):
    """Raised when a path cannot be resolved into a canonical path."""

    def __init__(self, reason: str, path: str, *, cwd: Optional[str] = None) -> None:
        self.reason = reason
        self.path = path
        self.cwd = cwd
        message = f"{reason}: {path}"
        if cwd is not None:
            message += f" (cwd: {cwd})"
        super().__init__(message)


class EnvironmentVariableError(InvalidPathError):
    """Raised for empty or undefined environment variable references."""


class ContextLookupError(InvalidPathError):
    """Raised when the home directory or working directory cannot be read."""


class PathValidationError(InvalidPathError):
    """Raised when a segment breaks a character, name or length rule."""


__all__ = [
    "InvalidPathError",
    "EnvironmentVariableError",
    "ContextLookupError",
    "PathValidationError",
]
