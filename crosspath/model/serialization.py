"""pydantic integration for canonical paths.

A path field serializes to its native display string. Validation re-runs the
whole resolution pipeline, so a document read on another host is resolved
against that host. Pass ``context={"resolution_context": ctx}`` (and optionally
``"os_profile"``) to ``model_validate``/``model_validate_json`` to resolve
against something other than the running process.

Serialization takes the same context dict. With ``"contract": True`` paths are
written in their ``~``/``.`` shorthand form, contracted against
``"resolution_context"`` (or the running process when it is absent):

    >>> cfg.model_dump_json(context={"contract": True, "resolution_context": ctx})
    '{"data_dir":"~/data"}'
"""

from __future__ import annotations

import os
from typing import Any, Dict

from pydantic_core import core_schema

RESOLUTION_CONTEXT_KEY = "resolution_context"
OS_PROFILE_KEY = "os_profile"
CONTRACT_KEY = "contract"


def _options(context: Any) -> Dict[str, Any]:
    return context if isinstance(context, dict) else {}


def path_core_schema(cls: Any) -> core_schema.CoreSchema:
    """Build the pydantic-core schema for ``cls`` (a CanonicalPath type)."""

    def validate(value: Any, info: core_schema.ValidationInfo) -> Any:
        if isinstance(value, cls):
            return value
        if not isinstance(value, (str, bytes, os.PathLike)):
            raise ValueError(f"path must be a string, got {type(value).__name__}")
        options = _options(info.context)
        return cls.from_native(
            value,
            context=options.get(RESOLUTION_CONTEXT_KEY),
            profile=options.get(OS_PROFILE_KEY),
        )

    def serialize(path: Any, info: core_schema.SerializationInfo) -> str:
        options = _options(info.context)
        if options.get(CONTRACT_KEY):
            return path.display(contract=True, context=options.get(RESOLUTION_CONTEXT_KEY))
        return path.native()

    return core_schema.with_info_plain_validator_function(
        validate,
        serialization=core_schema.plain_serializer_function_ser_schema(
            serialize,
            info_arg=True,
            return_schema=core_schema.str_schema(),
        ),
    )


def path_json_schema() -> Dict[str, Any]:
    return {"type": "string", "format": "path"}


__all__ = [
    "path_core_schema",
    "path_json_schema",
    "RESOLUTION_CONTEXT_KEY",
    "OS_PROFILE_KEY",
    "CONTRACT_KEY",
]
