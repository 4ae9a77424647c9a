"""Real-time event queue endpoints.

``get_events`` long-polls: the server holds the request open for up to about
90 seconds when no events are pending, so the client's read timeout must be
longer than that, e.g. ``generate_call_api(..., timeout=httpx.Timeout(10, read=120))``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, NotRequired, TypedDict

import httpx
from pydantic import Field

from .api import ErrorResponse, GeneralSuccessResponse, call_api
from .message import NarrowItem
from .params import ApiModel, ApiParams, coerce_params


class ClientCapabilities(ApiModel):
    notification_settings_null: bool | None = None
    bulk_message_deletion: bool | None = None
    user_avatar_url_field_optional: bool | None = None
    stream_typing_notifications: bool | None = None
    user_settings_object: bool | None = None
    linkifier_url_template: bool | None = None
    user_list_incomplete: bool | None = None
    include_deactivated_groups: bool | None = None
    archived_channels: bool | None = None
    empty_topic_name: bool | None = None


class RegisterQueueParams(ApiParams):
    apply_markdown: bool | None = None
    client_gravatar: bool | None = None
    include_subscribers: bool | None = None
    slim_presence: bool | None = None
    event_types: list[str] | None = None
    all_public_streams: bool | None = None
    client_capabilities: ClientCapabilities | None = None
    fetch_event_types: list[str] | None = None
    narrow: list[NarrowItem] | None = None


class RegisterQueueResponse(GeneralSuccessResponse, total=False):
    """Queue identity plus the initial state for ``fetch_event_types``.

    Only the always-present keys are listed; state keys vary with the
    requested event types.
    """

    queue_id: str | None
    last_event_id: int
    zulip_feature_level: int
    zulip_version: str
    zulip_merge_base: str


class Event(TypedDict):
    id: int
    type: str
    op: NotRequired[str]


class GetEventsParams(ApiParams):
    queue_id: str = Field(..., min_length=1)
    last_event_id: int | None = None
    dont_block: bool | None = None


class GetEventsResponse(GeneralSuccessResponse):
    """Event objects carry type-specific keys beyond ``id``/``type``."""

    events: list[Event]
    queue_id: str


async def register_queue(
    client: httpx.AsyncClient,
    params: RegisterQueueParams | Mapping[str, Any] | None = None,
) -> RegisterQueueResponse | ErrorResponse:
    """Register an event queue and fetch the initial state.

    Args:
        client: Client created by ``generate_call_api``
        params: Event types, narrow and capability flags

    Returns:
        The response of the RegisterQueue API.
    """
    body = coerce_params(RegisterQueueParams, params) if params is not None else None
    return await call_api(client, "POST", "register", body)


async def get_events(
    client: httpx.AsyncClient, params: GetEventsParams | Mapping[str, Any]
) -> GetEventsResponse | ErrorResponse:
    """Fetch events newer than ``last_event_id`` from a registered queue."""
    return await call_api(client, "GET", "events", coerce_params(GetEventsParams, params))


async def delete_queue(
    client: httpx.AsyncClient, queue_id: str
) -> GeneralSuccessResponse | ErrorResponse:
    return await call_api(client, "DELETE", "events", {"queue_id": queue_id})
