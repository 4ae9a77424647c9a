"""Encode operation parameters into request fields.

Every endpoint wrapper funnels its parameter object through
:func:`serialize_params`, so the same rules apply to query strings and
form bodies alike:

- ``None`` values are dropped, never sent as empty strings.
- Lists, tuples, dicts and nested models become compact JSON text.
- Booleans become ``"true"`` / ``"false"``.
- Everything else goes through ``str()``.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

ParamsInput = BaseModel | Mapping[str, Any]


def _to_plain(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", exclude_none=True, by_alias=True)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode_value(value: Any) -> str:
    """Encode one non-``None`` parameter value as request text."""
    if isinstance(value, BaseModel):
        value = _to_plain(value)
    # bool before the str() fallback: str(True) would give "True"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple, dict)):
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=_to_plain)
    return str(value)


def serialize_params(params: ParamsInput | None) -> dict[str, str]:
    """Return the encoded ``name -> text`` pairs for a parameter object.

    Args:
        params: A parameter model or a plain mapping. ``None`` yields no pairs.

    Returns:
        An insertion-ordered dict; each supplied, non-``None`` key appears once.
        A model yields its field-declaration order and a mapping its own
        iteration order. Endpoint wrappers validate mappings into models
        first, so their requests follow the model's field order regardless
        of how the caller ordered the keys.
    """
    if params is None:
        return {}

    if isinstance(params, BaseModel):
        items = params.model_dump(mode="json", exclude_none=True, by_alias=True).items()
    else:
        items = params.items()

    encoded: dict[str, str] = {}
    for key, value in items:
        if value is None:
            continue
        encoded[str(key)] = encode_value(value)
    return encoded
