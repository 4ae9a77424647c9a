"""User status endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypedDict

import httpx
from pydantic import Field

from ..api import ErrorResponse, GeneralSuccessResponse, call_api
from ..constants import EmojiTypes
from ..params import ApiParams, coerce_params


class UserStatus(TypedDict, total=False):
    """Only the fields that are set are returned."""

    away: bool
    status_text: str
    emoji_name: str
    emoji_code: str
    reaction_type: EmojiTypes


class GetUserStatusResponse(GeneralSuccessResponse):
    status: UserStatus


class UpdateStatusParams(ApiParams):
    """An empty ``status_text`` or ``emoji_name`` clears that part."""

    require_any_field = True

    status_text: str | None = Field(None, max_length=60)
    away: bool | None = None
    emoji_name: str | None = None
    emoji_code: str | None = None
    reaction_type: EmojiTypes | None = None


async def get_user_status(
    client: httpx.AsyncClient, user_id: int
) -> GetUserStatusResponse | ErrorResponse:
    return await call_api(client, "GET", f"users/{user_id}/status")


async def update_status(
    client: httpx.AsyncClient, params: UpdateStatusParams | Mapping[str, Any]
) -> GeneralSuccessResponse | ErrorResponse:
    """Set the user's status text, emoji or away flag."""
    return await call_api(
        client, "POST", "users/me/status", coerce_params(UpdateStatusParams, params)
    )
