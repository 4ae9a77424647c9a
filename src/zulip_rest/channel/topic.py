"""Channel topic endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypedDict

import httpx
from pydantic import Field

from ..api import ErrorResponse, GeneralSuccessResponse, call_api
from ..constants import TopicVisibilityValues
from ..params import ApiParams, coerce_params


class GetChannelTopicsParams(ApiParams):
    allow_empty_topic_name: bool | None = None


class Topic(TypedDict):
    max_id: int
    name: str


class GetChannelTopicsResponse(GeneralSuccessResponse):
    topics: list[Topic]


class DeleteTopicParams(ApiParams):
    topic_name: str


class DeleteTopicResponse(GeneralSuccessResponse):
    """``complete`` is false when the server stopped early; repeat the call."""

    complete: bool


class UpdateUserTopicParams(ApiParams):
    stream_id: int
    topic: str
    visibility_policy: TopicVisibilityValues = Field(
        ..., description="One of the VISIBILITY_* constants"
    )


async def get_channel_topics(
    client: httpx.AsyncClient,
    stream_id: int,
    params: GetChannelTopicsParams | Mapping[str, Any] | None = None,
) -> GetChannelTopicsResponse | ErrorResponse:
    """Get the topics in a channel, most recent first."""
    query = coerce_params(GetChannelTopicsParams, params) if params is not None else None
    return await call_api(client, "GET", f"users/me/{stream_id}/topics", query)


async def delete_topic(
    client: httpx.AsyncClient,
    stream_id: int,
    params: DeleteTopicParams | Mapping[str, Any],
) -> DeleteTopicResponse | ErrorResponse:
    """Delete a topic and all its messages."""
    return await call_api(
        client,
        "POST",
        f"streams/{stream_id}/delete_topic",
        coerce_params(DeleteTopicParams, params),
    )


async def update_user_topic(
    client: httpx.AsyncClient, params: UpdateUserTopicParams | Mapping[str, Any]
) -> GeneralSuccessResponse | ErrorResponse:
    """Mute, unmute, follow or reset a topic for the user."""
    return await call_api(
        client, "POST", "user_topics", coerce_params(UpdateUserTopicParams, params)
    )
