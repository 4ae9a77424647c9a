"""Group-setting values shared by channel permission fields."""

from __future__ import annotations

from typing import TypedDict

from pydantic import Field

from ..params import ApiModel


class PermissionGroup(ApiModel):
    """Anonymous permission group: explicit users plus user groups."""

    direct_members: list[int] = Field(default_factory=list, description="User IDs")
    direct_subgroups: list[int] = Field(default_factory=list, description="User group IDs")


class PermissionGroupDict(TypedDict):
    direct_members: list[int]
    direct_subgroups: list[int]


# A named user group ID, or an anonymous group
GroupSettingValue = int | PermissionGroup
GroupSettingResponseValue = int | PermissionGroupDict


class UpdatePermissionSetting(ApiModel):
    """Change of one group-setting value.

    When ``old`` is given the server rejects the update unless the current
    value matches it.
    """

    new: GroupSettingValue
    old: GroupSettingValue | None = None
