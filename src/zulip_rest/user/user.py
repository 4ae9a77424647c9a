"""User lookup endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, NotRequired, TypedDict
from urllib.parse import quote

import httpx

from ..api import ErrorResponse, GeneralSuccessResponse, call_api
from ..constants import BotTypeValues, UserRoleValues
from ..params import ApiParams, coerce_params


class ProfileFieldValue(TypedDict):
    value: str
    rendered_value: NotRequired[str]


class User(TypedDict):
    """A user record.

    ``delivery_email`` is ``None`` when the requester may not see it.
    ``profile_data`` is only present with ``include_custom_profile_fields``.
    """

    user_id: int
    delivery_email: str | None
    email: str
    full_name: str
    date_joined: str
    is_active: bool
    is_owner: bool
    is_admin: bool
    is_guest: bool
    is_bot: bool
    bot_type: NotRequired[BotTypeValues | None]
    bot_owner_id: NotRequired[int | None]
    role: UserRoleValues
    timezone: str
    avatar_url: str | None
    avatar_version: int
    is_imported_stub: bool
    profile_data: NotRequired[dict[str, ProfileFieldValue]]


class GetUserParams(ApiParams):
    client_gravatar: bool | None = None
    include_custom_profile_fields: bool | None = None


class GetUsersParams(GetUserParams):
    user_ids: list[int] | None = None


class GetUsersResponse(GeneralSuccessResponse):
    members: list[User]


class GetUserResponse(GeneralSuccessResponse):
    user: User


class GetOwnUserResponse(GeneralSuccessResponse):
    """Flat user fields plus the caller's ``max_message_id``."""

    user_id: int
    email: str
    full_name: str
    is_admin: bool
    is_owner: bool
    is_guest: bool
    is_bot: bool
    role: UserRoleValues
    avatar_url: str | None
    max_message_id: int


def _query(model: type[ApiParams], params: Any) -> ApiParams | None:
    return coerce_params(model, params) if params is not None else None


async def get_users(
    client: httpx.AsyncClient,
    params: GetUsersParams | Mapping[str, Any] | None = None,
) -> GetUsersResponse | ErrorResponse:
    """Get all users in the organization, or those in ``user_ids``."""
    return await call_api(client, "GET", "users", _query(GetUsersParams, params))


async def get_own_user(client: httpx.AsyncClient) -> GetOwnUserResponse | ErrorResponse:
    return await call_api(client, "GET", "users/me")


async def get_user_by_id(
    client: httpx.AsyncClient,
    user_id: int,
    params: GetUserParams | Mapping[str, Any] | None = None,
) -> GetUserResponse | ErrorResponse:
    """Get a user by ID.

    Args:
        client: Client created by ``generate_call_api``
        user_id: Target user ID
        params: Optional ``client_gravatar`` / ``include_custom_profile_fields``

    Returns:
        The response of the GetUser API.
    """
    return await call_api(client, "GET", f"users/{user_id}", _query(GetUserParams, params))


async def get_user_by_email(
    client: httpx.AsyncClient,
    email: str,
    params: GetUserParams | Mapping[str, Any] | None = None,
) -> GetUserResponse | ErrorResponse:
    """Get a user by Zulip display email or delivery email."""
    return await call_api(
        client, "GET", f"users/{quote(email, safe='@')}", _query(GetUserParams, params)
    )
