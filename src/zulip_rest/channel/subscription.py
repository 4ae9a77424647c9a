"""Channel subscription endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal, NotRequired, TypedDict

import httpx
from pydantic import Field

from ..api import ErrorResponse, GeneralSuccessResponse, call_api
from ..constants import StreamPostPolicyValues, TopicsPolicyValues
from ..params import ApiModel, ApiParams, coerce_params
from .common import GroupSettingResponseValue, GroupSettingValue

# A user is named by ID or by email
Principals = list[int] | list[str]


class GetSubscriptionsParams(ApiParams):
    """``partial`` returns a subset of subscribers in ``partial_subscribers``."""

    include_subscribers: Literal["true", "false", "partial"] | None = None


class Subscription(TypedDict):
    """A subscribed channel plus the user's per-channel settings.

    Notification fields are ``None`` when the user's global setting applies.
    """

    stream_id: int
    name: str
    description: str
    rendered_description: str
    date_created: int
    creator_id: int | None
    invite_only: bool
    subscribers: NotRequired[list[int]]
    partial_subscribers: NotRequired[list[int]]
    desktop_notifications: bool | None
    email_notifications: bool | None
    wildcard_mentions_notify: bool | None
    push_notifications: bool | None
    audible_notifications: bool | None
    pin_to_top: bool
    is_muted: bool
    in_home_view: bool
    is_announcement_only: bool
    is_web_public: bool
    color: str
    stream_post_policy: StreamPostPolicyValues
    message_retention_days: int | None
    history_public_to_subscribers: bool
    first_message_id: int | None
    folder_id: int | None
    topics_policy: TopicsPolicyValues
    is_recently_active: bool
    stream_weekly_traffic: int | None
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
    is_archived: bool
    subscriber_count: int


class GetSubscriptionsResponse(GeneralSuccessResponse):
    subscriptions: list[Subscription]


class SubscriptionRequest(ApiModel):
    """A channel to subscribe to; created if it does not exist."""

    name: str = Field(..., min_length=1)
    description: str | None = None


class SubscribeParams(ApiParams):
    subscriptions: list[SubscriptionRequest] = Field(..., min_length=1)
    principals: Principals | None = None
    authorization_errors_fatal: bool | None = None
    announce: bool | None = None
    invite_only: bool | None = None
    is_web_public: bool | None = None
    is_default_stream: bool | None = None
    history_public_to_subscribers: bool | None = None
    message_retention_days: int | Literal["realm_default", "unlimited"] | None = None
    folder_id: int | None = None
    topics_policy: TopicsPolicyValues | None = None
    can_add_subscribers_group: GroupSettingValue | None = None
    can_remove_subscribers_group: GroupSettingValue | None = None
    can_administer_channel_group: GroupSettingValue | None = None
    can_send_message_group: GroupSettingValue | None = None
    can_subscribe_group: GroupSettingValue | None = None


class SubscribeResponse(GeneralSuccessResponse):
    """Maps user ID (or email) to channel names."""

    subscribed: dict[str, list[str]]
    already_subscribed: dict[str, list[str]]
    unauthorized: NotRequired[list[str]]
    new_subscription_messages_sent: NotRequired[bool]


class UnsubscribeParams(ApiParams):
    subscriptions: list[str] = Field(..., min_length=1, description="Channel names")
    principals: Principals | None = None


class UnsubscribeResponse(GeneralSuccessResponse):
    removed: list[str]
    not_removed: list[str]


class GetSubscribersResponse(GeneralSuccessResponse):
    subscribers: list[int]


class GetSubscriptionStatusResponse(GeneralSuccessResponse):
    is_subscribed: bool


SubscriptionProperty = Literal[
    "color",
    "is_muted",
    "pin_to_top",
    "desktop_notifications",
    "audible_notifications",
    "push_notifications",
    "email_notifications",
    "wildcard_mentions_notify",
    "in_home_view",
]


class SubscriptionPropertyChange(ApiModel):
    stream_id: int
    property: SubscriptionProperty
    value: bool | str


class UpdateSubscriptionSettingsParams(ApiParams):
    subscription_data: list[SubscriptionPropertyChange] = Field(..., min_length=1)


class UpdateSubscriptionSettingsResponse(GeneralSuccessResponse):
    subscription_data: list[dict[str, Any]]


async def get_subscriptions(
    client: httpx.AsyncClient,
    params: GetSubscriptionsParams | Mapping[str, Any] | None = None,
) -> GetSubscriptionsResponse | ErrorResponse:
    """Get the channels the user is subscribed to."""
    query = coerce_params(GetSubscriptionsParams, params) if params is not None else None
    return await call_api(client, "GET", "users/me/subscriptions", query)


async def subscribe(
    client: httpx.AsyncClient, params: SubscribeParams | Mapping[str, Any]
) -> SubscribeResponse | ErrorResponse:
    """Subscribe the user (or ``principals``) to channels, creating missing ones."""
    return await call_api(
        client, "POST", "users/me/subscriptions", coerce_params(SubscribeParams, params)
    )


async def unsubscribe(
    client: httpx.AsyncClient, params: UnsubscribeParams | Mapping[str, Any]
) -> UnsubscribeResponse | ErrorResponse:
    """Unsubscribe the user (or ``principals``) from channels.

    The parameters travel in the DELETE request body.
    """
    return await call_api(
        client,
        "DELETE",
        "users/me/subscriptions",
        coerce_params(UnsubscribeParams, params),
        location="body",
    )


async def get_subscribers(
    client: httpx.AsyncClient, stream_id: int
) -> GetSubscribersResponse | ErrorResponse:
    """Get the user IDs subscribed to a channel."""
    return await call_api(client, "GET", f"streams/{stream_id}/members")


async def get_subscription_status(
    client: httpx.AsyncClient, user_id: int, stream_id: int
) -> GetSubscriptionStatusResponse | ErrorResponse:
    """Check whether a user is subscribed to a channel."""
    return await call_api(client, "GET", f"users/{user_id}/subscriptions/{stream_id}")


async def update_subscription_settings(
    client: httpx.AsyncClient, params: UpdateSubscriptionSettingsParams | Mapping[str, Any]
) -> UpdateSubscriptionSettingsResponse | ErrorResponse:
    """Change per-channel settings such as color, mute and notifications."""
    return await call_api(
        client,
        "POST",
        "users/me/subscriptions/properties",
        coerce_params(UpdateSubscriptionSettingsParams, params),
    )
