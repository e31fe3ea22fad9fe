"""crosspath: platform-independent canonical filesystem paths.

Paths are resolved from text without touching the filesystem: ``~`` and ``.``
shorthand, ``${VAR}``/``%VAR%`` references, mixed separators, redundant segments
and drive letters all end up in one comparable, serializable form.
"""

import logging

from .errors import (
    ContextLookupError,
    EnvironmentVariableError,
    InvalidPathError,
    PathValidationError,
)
from .model import (
    UNIX,
    UNIX_STRICT,
    WINDOWS,
    Anchor,
    AnchorKind,
    CanonicalPath,
    OsProfile,
    UnixProfile,
    WindowsProfile,
)
from .resolution import ResolutionContext, Segment, segments

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "CanonicalPath",
    "ResolutionContext",
    "Anchor",
    "AnchorKind",
    "OsProfile",
    "UnixProfile",
    "WindowsProfile",
    "UNIX",
    "UNIX_STRICT",
    "WINDOWS",
    "Segment",
    "segments",
    "InvalidPathError",
    "EnvironmentVariableError",
    "ContextLookupError",
    "PathValidationError",
]
