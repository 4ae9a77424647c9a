"""Scheduled message endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal, NotRequired, Self, TypedDict

import httpx
from pydantic import model_validator

from .api import ErrorResponse, GeneralSuccessResponse, call_api
from .message import Destination, MessageType, check_destination
from .params import ApiParams, coerce_params


class ScheduledMessage(TypedDict):
    """``to`` is a channel ID for channel messages, user IDs for direct ones."""

    scheduled_message_id: int
    type: Literal["stream", "private"]
    to: int | list[int]
    topic: NotRequired[str]
    content: str
    rendered_content: str
    scheduled_delivery_timestamp: int
    failed: bool


class GetScheduledMessagesResponse(GeneralSuccessResponse):
    scheduled_messages: list[ScheduledMessage]


class CreateScheduledMessageParams(ApiParams):
    type: MessageType
    to: Destination
    content: str
    topic: str | None = None
    scheduled_delivery_timestamp: int
    read_by_sender: bool | None = None

    @model_validator(mode="after")
    def _check_destination(self) -> Self:
        check_destination(self.type, self.to, self.topic)
        return self


class CreateScheduledMessageResponse(GeneralSuccessResponse):
    scheduled_message_id: int


class EditScheduledMessageParams(ApiParams):
    """Changing ``type`` also requires the matching ``to``."""

    require_any_field = True

    type: MessageType | None = None
    to: Destination | None = None
    content: str | None = None
    topic: str | None = None
    scheduled_delivery_timestamp: int | None = None

    @model_validator(mode="after")
    def _check_destination(self) -> Self:
        if self.type is not None:
            if self.to is None:
                raise ValueError("`to` is required when changing the message type")
            check_destination(self.type, self.to, self.topic)
        return self


async def get_scheduled_messages(
    client: httpx.AsyncClient,
) -> GetScheduledMessagesResponse | ErrorResponse:
    """Get the user's undelivered scheduled messages."""
    return await call_api(client, "GET", "scheduled_messages")


async def create_scheduled_message(
    client: httpx.AsyncClient, params: CreateScheduledMessageParams | Mapping[str, Any]
) -> CreateScheduledMessageResponse | ErrorResponse:
    """Schedule a channel or direct message for later delivery.

    Args:
        client: Client created by ``generate_call_api``
        params: Destination, content and UNIX delivery timestamp

    Returns:
        The response of the CreateScheduledMessage API.
    """
    return await call_api(
        client,
        "POST",
        "scheduled_messages",
        coerce_params(CreateScheduledMessageParams, params),
    )


async def edit_scheduled_message(
    client: httpx.AsyncClient,
    scheduled_message_id: int,
    params: EditScheduledMessageParams | Mapping[str, Any],
) -> GeneralSuccessResponse | ErrorResponse:
    return await call_api(
        client,
        "PATCH",
        f"scheduled_messages/{scheduled_message_id}",
        coerce_params(EditScheduledMessageParams, params),
    )


async def delete_scheduled_message(
    client: httpx.AsyncClient, scheduled_message_id: int
) -> GeneralSuccessResponse | ErrorResponse:
    return await call_api(client, "DELETE", f"scheduled_messages/{scheduled_message_id}")
