"""Message reminder endpoints (Zulip 11.0, feature level 381)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypedDict

import httpx

from .api import ErrorResponse, GeneralSuccessResponse, call_api
from .params import ApiParams, coerce_params


class CreateReminderParams(ApiParams):
    """``note`` requires feature level 415."""

    message_id: int
    scheduled_delivery_timestamp: int
    note: str | None = None


class CreateReminderResponse(GeneralSuccessResponse):
    reminder_id: int


class Reminder(TypedDict):
    reminder_id: int
    type: str
    to: list[int]
    content: str
    rendered_content: str
    scheduled_delivery_timestamp: int
    failed: bool
    reminder_target_message_id: int


class GetRemindersResponse(GeneralSuccessResponse):
    reminders: list[Reminder]


async def create_reminder(
    client: httpx.AsyncClient, params: CreateReminderParams | Mapping[str, Any]
) -> CreateReminderResponse | ErrorResponse:
    """Schedule a Notification Bot reminder about a message."""
    return await call_api(
        client, "POST", "reminders", coerce_params(CreateReminderParams, params)
    )


async def get_reminders(client: httpx.AsyncClient) -> GetRemindersResponse | ErrorResponse:
    return await call_api(client, "GET", "reminders")


async def delete_reminder(
    client: httpx.AsyncClient, reminder_id: int
) -> GeneralSuccessResponse | ErrorResponse:
    return await call_api(client, "DELETE", f"reminders/{reminder_id}")
