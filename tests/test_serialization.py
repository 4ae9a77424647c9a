"""Tests for parameter encoding and parameter-model validation."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from zulip_rest.channel.common import PermissionGroup, UpdatePermissionSetting
from zulip_rest.params import ApiParams, coerce_params
from zulip_rest.serialization import encode_value, serialize_params


class _EditParams(ApiParams):
    exclusive_groups = (("content",), ("stream_id",))

    content: str | None = None
    stream_id: int | None = None
    topic: str | None = None


class _RenameParams(ApiParams):
    require_any_field = True

    name: str | None = None
    description: str | None = None


def test_serialize_params_drops_none_values() -> None:
    """Given a mapping with a `None` value, when `serialize_params()` runs,
    then only the supplied keys are encoded."""
    assert serialize_params({"topic": "x", "stream_id": None}) == {"topic": "x"}


def test_serialize_params_json_encodes_arrays() -> None:
    """Given a list value, when it is serialized, then compact JSON text is produced
    and parses back to the same list."""
    encoded = serialize_params({"subscribers": [1, 2, 3]})

    assert encoded == {"subscribers": "[1,2,3]"}
    assert json.loads(encoded["subscribers"]) == [1, 2, 3]


def test_serialize_params_lowercases_booleans() -> None:
    """Given boolean values, when serialized, then they become `true`/`false`."""
    encoded = serialize_params({"invite_only": True, "announce": False})

    assert encoded == {"invite_only": "true", "announce": "false"}


def test_serialize_params_stringifies_scalars() -> None:
    encoded = serialize_params({"to": 42, "anchor": "newest", "ratio": 1.5})

    assert encoded == {"to": "42", "anchor": "newest", "ratio": "1.5"}


def test_serialize_params_handles_none_and_empty_inputs() -> None:
    assert serialize_params(None) == {}
    assert serialize_params({}) == {}


def test_encode_value_keeps_non_ascii_text_in_json() -> None:
    """Given non-ASCII list items, when encoded, then they are not escaped."""
    assert encode_value(["日本語", "café"]) == '["日本語","café"]'


def test_encode_value_serializes_nested_models() -> None:
    """Given a permission setting with a nested group, when encoded, then the
    whole structure becomes JSON and unset fields are omitted."""
    setting = UpdatePermissionSetting(new=PermissionGroup(direct_members=[7], direct_subgroups=[]))

    encoded = encode_value(setting)

    assert json.loads(encoded) == {"new": {"direct_members": [7], "direct_subgroups": []}}


def test_serialize_params_from_model_omits_unset_fields() -> None:
    """Given a parameter model, when serialized, then unset optional fields are
    absent and declaration order is kept."""
    params = _EditParams(topic="moved", stream_id=9)

    assert list(serialize_params(params).items()) == [("stream_id", "9"), ("topic", "moved")]


def test_exclusive_groups_reject_mixed_fields() -> None:
    """Given fields from two exclusive groups, when the model validates,
    then a `ValidationError` names both groups."""
    with pytest.raises(ValidationError, match="content and stream_id cannot be supplied together"):
        _EditParams(content="new text", stream_id=3)


def test_require_any_field_rejects_empty_object() -> None:
    with pytest.raises(ValidationError, match="At least one of name, description is required"):
        _RenameParams()

    assert _RenameParams(description="").description == ""


def test_unknown_fields_are_rejected() -> None:
    with pytest.raises(ValidationError):
        _RenameParams.model_validate({"name": "x", "colour": "red"})


def test_coerce_params_passes_models_through() -> None:
    """Given a model instance, when `coerce_params()` runs, then the same object
    is returned; a mapping is validated into a new instance."""
    params = _RenameParams(name="general")

    assert coerce_params(_RenameParams, params) is params
    assert coerce_params(_RenameParams, {"name": "general"}) == params
