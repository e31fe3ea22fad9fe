"""The canonical path value and the resolution pipeline that builds it.

Construction runs: prefix expansion -> environment variable expansion ->
segment normalization -> per-segment validation. The result keeps its segments
with their original casing, compares case-insensitively, and renders with the
separator of its OS profile.

    >>> from crosspath import CanonicalPath, ResolutionContext, UNIX, WINDOWS
    >>> ctx = ResolutionContext(home="/home/tom", cwd="/tmp", environ={"DATA": "/srv/data"})
    >>> str(CanonicalPath.resolve("~/config//app/../x", ctx, UNIX))
    '/home/tom/config/x'
    >>> str(CanonicalPath.resolve("${DATA}/in", ctx, WINDOWS))
    '\\\\srv\\\\data\\\\in'
"""

from __future__ import annotations

import logging
import os
from typing import Any, Iterator, Optional, Sequence, Tuple, Union

from crosspath.errors import InvalidPathError
from crosspath.model.anchor import (
    CURRENT_DIR,
    HOME_DIR,
    NO_ANCHOR,
    ROOT,
    Anchor,
    AnchorKind,
)
from crosspath.model.os_profile import OsProfile
from crosspath.model.serialization import path_core_schema, path_json_schema
from crosspath.resolution.context import ResolutionContext
from crosspath.resolution.envvars import expand_vars
from crosspath.resolution.prefix import (
    HOME_MARKER,
    Start,
    contract_prefix,
    detect_start,
    expand_prefix,
    split_drive,
)
from crosspath.resolution.segments import (
    CANONICAL_SEPARATOR,
    CURRENT,
    Segment,
    is_separator,
    iter_segments,
)

logger = logging.getLogger(__name__)

NativePath = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]


def _split_anchor(text: str) -> Tuple[Anchor, str]:
    """Read the root or drive designator off the front of expanded text."""
    drive, rest = split_drive(text)
    if drive is not None:
        return Anchor.for_drive(drive), rest
    if text and is_separator(text[0]):
        return ROOT, text
    return NO_ANCHOR, text


def _relative_to_cwd(raw: str, start: Start) -> bool:
    if start in (Start.CURRENT, Start.DRIVE_RELATIVE):
        return True
    if start is Start.HOME or not raw:
        return False
    drive, _ = split_drive(raw)
    return drive is None and raw[0] not in ("/", "\\", "$", "%")


class CanonicalPath:
    """Immutable, resolved path.

    Build instances with ``resolve``, ``from_native`` or ``parse``; the
    constructor expects already-split segments and only validates them.
    """

    __slots__ = ("_anchor", "_segments", "_profile", "_memory", "_native", "_key")

    def __init__(
        self,
        anchor: Anchor,
        segments: Sequence[str],
        profile: Optional[OsProfile] = None,
        *,
        source: Optional[str] = None,
    ) -> None:
        profile = profile or OsProfile.host()
        kept = tuple(s for s in segments if s and s != CURRENT)
        memory = anchor.render(kept, CANONICAL_SEPARATOR, True)
        for segment in kept:
            profile.validate_segment(segment, source if source is not None else memory)

        self._anchor = anchor
        self._segments = kept
        self._profile = profile
        self._memory = memory
        self._native = profile.render(anchor, kept)
        self._key = self._native.casefold()

    # -- construction -----------------------------------------------------

    @classmethod
    def resolve(
        cls,
        raw: str,
        context: Optional[ResolutionContext] = None,
        profile: Optional[OsProfile] = None,
    ) -> "CanonicalPath":
        """Run the full pipeline on ``raw``.

        ``context`` defaults to ``ResolutionContext.from_host()`` and ``profile``
        to ``OsProfile.host()``.

        Raises:
            InvalidPathError: for malformed or undefined variable references,
                unreadable home/cwd, or a segment that fails validation.
        """
        if not isinstance(raw, str):
            raise InvalidPathError("path must be a string", repr(raw))
        context = context or ResolutionContext.from_host()
        profile = profile or OsProfile.host()
        start = detect_start(raw)

        try:
            text = expand_prefix(raw, context)
            text = expand_vars(text, context)
            anchor, body = _split_anchor(text)
            if anchor.kind is AnchorKind.ROOT and profile.keeps_drive:
                cwd_drive, _ = split_drive(context.cwd)
                if cwd_drive is not None:
                    anchor = Anchor.for_drive(cwd_drive)
            path = cls(anchor, [seg.text for seg in iter_segments(body)], profile, source=raw)
        except InvalidPathError as e:
            logger.debug("rejected path %r: %s", raw, e.reason)
            if e.cwd is None and _relative_to_cwd(raw, start):
                raise type(e)(e.reason, e.path, cwd=context.cwd) from e
            raise

        logger.debug("resolved %r -> %r", raw, path._memory)
        return path

    @classmethod
    def from_native(
        cls,
        value: NativePath,
        context: Optional[ResolutionContext] = None,
        profile: Optional[OsProfile] = None,
    ) -> "CanonicalPath":
        """Resolve a ``str``, ``bytes`` or ``os.PathLike`` value.

        Bytes and surrogate-escaped text that are not valid UTF-8 are rejected.
        """
        if isinstance(value, CanonicalPath):
            value = value._memory
        try:
            native = os.fspath(value)
        except TypeError as e:
            raise InvalidPathError("path must be str, bytes or os.PathLike", repr(value)) from e

        if isinstance(native, bytes):
            try:
                text = native.decode("utf-8")
            except UnicodeDecodeError as e:
                raise InvalidPathError(
                    "path is not valid UTF-8", native.decode("utf-8", "replace")
                ) from e
        else:
            try:
                native.encode("utf-8")
            except UnicodeEncodeError as e:
                shown = native.encode("utf-8", "backslashreplace").decode("utf-8")
                raise InvalidPathError("path is not valid UTF-8", shown) from e
            text = native

        return cls.resolve(text, context, profile)

    @classmethod
    def parse(cls, raw: str, profile: Optional[OsProfile] = None) -> "CanonicalPath":
        """Normalize and validate ``raw`` without a resolution context.

        A leading ``~`` or ``.`` is kept as a shorthand anchor and variable
        references are left as literal text. ``expanded()`` finishes the job
        once a context is available.
        """
        start = detect_start(raw)
        if start is Start.HOME:
            anchor, body = HOME_DIR, raw[1:]
        elif start is Start.CURRENT:
            anchor, body = CURRENT_DIR, raw[1:]
        else:
            anchor, body = _split_anchor(raw)
        return cls(anchor, [seg.text for seg in iter_segments(body)], profile, source=raw)

    # -- accessors --------------------------------------------------------

    @property
    def anchor(self) -> Anchor:
        return self._anchor

    @property
    def drive(self) -> Optional[str]:
        return self._anchor.drive

    @property
    def profile(self) -> OsProfile:
        return self._profile

    @property
    def segments(self) -> Tuple[str, ...]:
        return self._segments

    def iter_segments(self) -> Iterator[Segment]:
        last = len(self._segments) - 1
        for idx, text in enumerate(self._segments):
            yield Segment(text, idx < last)

    @property
    def is_absolute(self) -> bool:
        return self._anchor.is_absolute

    @property
    def name(self) -> str:
        return self._segments[-1] if self._segments else ""

    @property
    def parent(self) -> "CanonicalPath":
        if not self._segments:
            return self
        return self._derive(self._anchor, self._segments[:-1])

    # -- transformations --------------------------------------------------

    def _derive(
        self, anchor: Anchor, segments: Sequence[str], profile: Optional[OsProfile] = None
    ) -> "CanonicalPath":
        return type(self)(anchor, segments, profile or self._profile)

    def with_profile(self, profile: OsProfile) -> "CanonicalPath":
        """Return the same path validated and rendered for ``profile``."""
        return self._derive(self._anchor, self._segments, profile)

    def join(self, *parts: str) -> "CanonicalPath":
        """Append ``parts`` below this path.

        Parts are always relative: leading separators are ignored, ``~``/``.``
        are not expanded and variable references stay literal. A ``..`` in a
        part cancels the directly preceding segment.
        """
        body = CANONICAL_SEPARATOR.join((*self._segments, *parts))
        return self._derive(self._anchor, [seg.text for seg in iter_segments(body)])

    def contracted(self, context: Optional[ResolutionContext] = None) -> "CanonicalPath":
        """Return the ``~``/``.`` shorthand form of this path, or the path itself.

        The home directory and working directory are compared in their
        canonical form, so separators and drive casing do not matter. The
        shorter remainder wins; an equal remainder favours the working
        directory.
        """
        if not self.is_absolute:
            return self
        context = context or ResolutionContext.from_host()

        def prefix_of(directory: str) -> str:
            # Directories that are empty or relative never match.
            if not directory:
                return ""
            try:
                resolved = type(self).resolve(directory, context, self._profile)
            except InvalidPathError:
                logger.debug("cannot contract %r against %r", self._memory, directory)
                return ""
            if not resolved.is_absolute:
                return ""
            memory = resolved._memory
            return memory if memory.endswith(CANONICAL_SEPARATOR) else memory + CANONICAL_SEPARATOR

        marker, remainder = contract_prefix(
            self._memory + CANONICAL_SEPARATOR,
            ResolutionContext(home=prefix_of(context.home), cwd=prefix_of(context.cwd)),
        )
        if marker is None:
            return self
        anchor = HOME_DIR if marker == HOME_MARKER else CURRENT_DIR
        return self._derive(anchor, remainder.split(CANONICAL_SEPARATOR))

    def expanded(self, context: Optional[ResolutionContext] = None) -> "CanonicalPath":
        """Resolve a shorthand anchor (and literal variable references) against ``context``."""
        return type(self).resolve(self._memory, context, self._profile)

    # -- rendering --------------------------------------------------------

    def native(self) -> str:
        """Render with the profile's separator; drive letters only on Windows."""
        return self._native

    def display(self, contract: bool = False, context: Optional[ResolutionContext] = None) -> str:
        if contract:
            return self.contracted(context).native()
        return self._native

    def __str__(self) -> str:
        return self._native

    def __fspath__(self) -> str:
        return self._native

    def __format__(self, spec: str) -> str:
        if spec == "~":
            return self.display(contract=True)
        return format(self._native, spec)

    def __repr__(self) -> str:
        return f'CanonicalPath("{self._memory}")'

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CanonicalPath):
            return NotImplemented
        return self._key == other._key

    def __hash__(self) -> int:
        return hash(self._key)

    def __setattr__(self, name: str, value: Any) -> None:
        if hasattr(self, "_key"):
            raise AttributeError(f"{type(self).__name__} is immutable")
        object.__setattr__(self, name, value)

    # -- pydantic ---------------------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> Any:
        return path_core_schema(cls)

    @classmethod
    def __get_pydantic_json_schema__(cls, schema: Any, handler: Any) -> Any:
        return path_json_schema()


__all__ = ["CanonicalPath", "NativePath"]
