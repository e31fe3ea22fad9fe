"""Text-level path resolution: shorthand, environment variables and segments."""

from .context import ResolutionContext
from .envvars import expand_vars
from .prefix import Start, contract_prefix, detect_start, expand_prefix
from .segments import Segment, iter_segments, segments

__all__ = [
    "ResolutionContext",
    "Start",
    "detect_start",
    "expand_prefix",
    "contract_prefix",
    "expand_vars",
    "Segment",
    "iter_segments",
    "segments",
]
