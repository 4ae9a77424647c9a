"""Base models for operation parameters.

Parameter models validate at construction time. Unknown keys are rejected,
and models that declare mutually exclusive field groups refuse objects that
mix fields from more than one group.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar, Self, TypeVar

from pydantic import BaseModel, ConfigDict, model_validator

ParamsT = TypeVar("ParamsT", bound="ApiParams")


class ApiModel(BaseModel):
    """Strict model for values nested inside parameter objects."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class ApiParams(ApiModel):
    """Parameter object for one remote operation.

    Subclasses may set:

    - ``exclusive_groups``: tuples of field names; fields from two different
      groups cannot both be supplied.
    - ``require_any_field``: at least one field must be supplied (edit-style
      operations where an empty request is meaningless).
    """

    exclusive_groups: ClassVar[tuple[tuple[str, ...], ...]] = ()
    require_any_field: ClassVar[bool] = False

    def _supplied(self, name: str) -> bool:
        return getattr(self, name) is not None

    @model_validator(mode="after")
    def _check_field_groups(self) -> Self:
        supplied_groups = [
            group
            for group in self.exclusive_groups
            if any(self._supplied(name) for name in group)
        ]
        if len(supplied_groups) > 1:
            joined = " and ".join("/".join(group) for group in supplied_groups)
            raise ValueError(f"Parameters {joined} cannot be supplied together")

        if self.require_any_field and not any(
            self._supplied(name) for name in type(self).model_fields
        ):
            fields = ", ".join(type(self).model_fields)
            raise ValueError(f"At least one of {fields} is required")
        return self


def coerce_params(model: type[ParamsT], params: ParamsT | Mapping[str, Any]) -> ParamsT:
    """Validate ``params`` into ``model``; model instances pass through unchanged."""
    if isinstance(params, model):
        return params
    return model.model_validate(params)
