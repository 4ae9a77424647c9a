"""Channel (stream) endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal, NotRequired, TypedDict

import httpx
from pydantic import Field

from ..api import ErrorResponse, GeneralSuccessResponse, call_api
from ..constants import StreamPostPolicyValues, TopicsPolicyValues
from ..params import ApiParams, coerce_params
from .common import GroupSettingResponseValue, GroupSettingValue, UpdatePermissionSetting

RetentionDays = int | Literal["realm_default", "unlimited"]


class GetChannelsParams(ApiParams):
    """Filters for GET /streams. Unset filters use the server defaults."""

    include_public: bool | None = None
    include_web_public: bool | None = None
    include_subscribed: bool | None = None
    exclude_archived: bool | None = None
    include_all: bool | None = None
    include_default: bool | None = None
    include_owner_subscribed: bool | None = None
    include_can_access_content: bool | None = None
    include_all_active: bool | None = None


class Channel(TypedDict):
    """A channel as returned by the channel listing and lookup endpoints.

    ``date_created`` is a UNIX timestamp. ``message_retention_days`` is
    ``None`` when the organization setting applies and ``-1`` for unlimited.
    """

    stream_id: int
    name: str
    is_archived: bool
    description: str
    date_created: int
    creator_id: int | None
    invite_only: bool
    rendered_description: str
    is_web_public: bool
    stream_post_policy: StreamPostPolicyValues
    message_retention_days: int | None
    history_public_to_subscribers: bool
    topics_policy: TopicsPolicyValues
    first_message_id: int | None
    folder_id: int | None
    is_recently_active: bool
    is_announcement_only: bool
    can_add_subscribers_group: GroupSettingResponseValue
    can_remove_subscribers_group: GroupSettingResponseValue
    can_administer_channel_group: GroupSettingResponseValue
    can_delete_any_message_group: GroupSettingResponseValue
    can_delete_own_message_group: GroupSettingResponseValue
    can_move_messages_out_of_channel_group: GroupSettingResponseValue
    can_move_messages_within_channel_group: GroupSettingResponseValue
    can_send_message_group: GroupSettingResponseValue
    can_subscribe_group: GroupSettingResponseValue
    can_resolve_topics_group: GroupSettingResponseValue
    can_create_topic_group: GroupSettingResponseValue
    subscriber_count: int
    stream_weekly_traffic: int | None
    is_default: NotRequired[bool]


class GetChannelsResponse(GeneralSuccessResponse):
    streams: list[Channel]


class GetChannelByIdResponse(GeneralSuccessResponse):
    stream: Channel


class GetChannelIdParams(ApiParams):
    stream: str = Field(..., description="Channel name")


class GetChannelIdResponse(GeneralSuccessResponse):
    stream_id: int


class CreateChannelParams(ApiParams):
    """Parameters for POST /channels/create."""

    name: str = Field(..., min_length=1)
    subscribers: list[int] = Field(..., description="User IDs to subscribe")
    description: str | None = None
    announce: bool | None = None
    invite_only: bool | None = None
    is_web_public: bool | None = None
    is_default_stream: bool | None = None
    folder_id: int | None = None
    topics_policy: TopicsPolicyValues | None = None
    history_public_to_subscribers: bool | None = None
    message_retention_days: RetentionDays | None = None
    can_add_subscribers_group: GroupSettingValue | None = None
    can_create_topic_group: GroupSettingValue | None = None
    can_delete_any_message_group: GroupSettingValue | None = None
    can_delete_own_message_group: GroupSettingValue | None = None
    can_remove_subscribers_group: GroupSettingValue | None = None
    can_administer_channel_group: GroupSettingValue | None = None
    can_move_messages_out_of_channel_group: GroupSettingValue | None = None
    can_move_messages_within_channel_group: GroupSettingValue | None = None
    can_send_message_group: GroupSettingValue | None = None
    can_subscribe_group: GroupSettingValue | None = None
    can_resolve_topics_group: GroupSettingValue | None = None


class CreateChannelResponse(GeneralSuccessResponse):
    id: int


class UpdateChannelParams(ApiParams):
    """Parameters for PATCH /streams/{stream_id}.

    Archiving goes through ``archive_channel``; ``is_archived`` here only
    accepts ``False`` (unarchive).
    """

    require_any_field = True

    description: str | None = None
    new_name: str | None = None
    is_private: bool | None = None
    is_web_public: bool | None = None
    history_public_to_subscribers: bool | None = None
    is_default_stream: bool | None = None
    message_retention_days: RetentionDays | None = None
    is_archived: Literal[False] | None = None
    folder_id: int | None = None
    topics_policy: TopicsPolicyValues | None = None
    can_add_subscribers_group: UpdatePermissionSetting | None = None
    can_remove_subscribers_group: UpdatePermissionSetting | None = None
    can_administer_channel_group: UpdatePermissionSetting | None = None
    can_delete_any_message_group: UpdatePermissionSetting | None = None
    can_delete_own_message_group: UpdatePermissionSetting | None = None
    can_move_messages_out_of_channel_group: UpdatePermissionSetting | None = None
    can_move_messages_within_channel_group: UpdatePermissionSetting | None = None
    can_send_message_group: UpdatePermissionSetting | None = None
    can_subscribe_group: UpdatePermissionSetting | None = None
    can_resolve_topics_group: UpdatePermissionSetting | None = None
    can_create_topic_group: UpdatePermissionSetting | None = None


async def get_channels(
    client: httpx.AsyncClient,
    params: GetChannelsParams | Mapping[str, Any] | None = None,
) -> GetChannelsResponse | ErrorResponse:
    """Get channels visible to the user.

    Args:
        client: Client created by ``generate_call_api``
        params: Listing filters

    Returns:
        The response of the GetChannels API.
    """
    query = coerce_params(GetChannelsParams, params) if params is not None else None
    return await call_api(client, "GET", "streams", query)


async def get_channel_by_id(
    client: httpx.AsyncClient, stream_id: int
) -> GetChannelByIdResponse | ErrorResponse:
    """Get a channel by ID."""
    return await call_api(client, "GET", f"streams/{stream_id}")


async def get_channel_id(
    client: httpx.AsyncClient, params: GetChannelIdParams | Mapping[str, Any]
) -> GetChannelIdResponse | ErrorResponse:
    """Look up the ID of a channel by name."""
    return await call_api(
        client, "GET", "get_stream_id", coerce_params(GetChannelIdParams, params)
    )


async def create_channel(
    client: httpx.AsyncClient, params: CreateChannelParams | Mapping[str, Any]
) -> CreateChannelResponse | ErrorResponse:
    """Create a channel and subscribe the given users to it."""
    return await call_api(
        client, "POST", "channels/create", coerce_params(CreateChannelParams, params)
    )


async def update_channel(
    client: httpx.AsyncClient,
    stream_id: int,
    params: UpdateChannelParams | Mapping[str, Any],
) -> GeneralSuccessResponse | ErrorResponse:
    """Update a channel's name, description, privacy or permission settings.

    Args:
        client: Client created by ``generate_call_api``
        stream_id: Channel ID
        params: Settings to change; at least one is required

    Returns:
        The response of the UpdateChannel API.
    """
    return await call_api(
        client, "PATCH", f"streams/{stream_id}", coerce_params(UpdateChannelParams, params)
    )


async def archive_channel(
    client: httpx.AsyncClient, stream_id: int
) -> GeneralSuccessResponse | ErrorResponse:
    """Archive a channel."""
    return await call_api(client, "DELETE", f"streams/{stream_id}")
