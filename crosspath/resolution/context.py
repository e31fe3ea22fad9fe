"""Read-only source of home directory, working directory and environment values."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional

from crosspath.errors import ContextLookupError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolutionContext:
    """Already-resolved host values consumed by the resolution pipeline.

    Nothing here is cached or refreshed: a context is a snapshot. Build one with
    ``from_host()`` for the running process, or directly for tests and for
    resolving paths on behalf of another machine.
    """

    home: str
    cwd: str
    environ: Mapping[str, str] = field(default_factory=dict, repr=False, compare=False)

    def __post_init__(self) -> None:
        # Detach from the caller's mapping so later mutation cannot leak in.
        object.__setattr__(self, "environ", MappingProxyType(dict(self.environ)))

    def lookup_env(self, name: str) -> Optional[str]:
        """Return the value of ``name`` or None when it is not defined."""
        return self.environ.get(name)

    @classmethod
    def from_host(cls) -> "ResolutionContext":
        """Read home, cwd and the environment from the running process once each."""
        try:
            home = str(Path.home())
        except (RuntimeError, KeyError, OSError) as e:
            raise ContextLookupError("could not resolve the home directory", "~") from e
        try:
            cwd = os.getcwd()
        except OSError as e:
            raise ContextLookupError("could not resolve the current working directory", ".") from e

        logger.debug("resolved host context home=%s cwd=%s", home, cwd)
        return cls(home=home, cwd=cwd, environ=dict(os.environ))


__all__ = ["ResolutionContext"]
