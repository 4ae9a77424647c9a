"""Uploaded file (attachment) endpoints."""

from __future__ import annotations

from typing import TypedDict

import httpx

from ..api import ErrorResponse, GeneralSuccessResponse, call_api


class AttachedMessage(TypedDict):
    date_sent: int
    id: int


class Attachment(TypedDict):
    id: int
    name: str
    path_id: str
    size: int
    create_time: int
    messages: list[AttachedMessage]


class GetAttachmentsResponse(GeneralSuccessResponse):
    attachments: list[Attachment]
    upload_space_used: int


async def get_attachments(client: httpx.AsyncClient) -> GetAttachmentsResponse | ErrorResponse:
    """List the user's uploaded files and the messages referencing them."""
    return await call_api(client, "GET", "attachments")


async def remove_attachment(
    client: httpx.AsyncClient, attachment_id: int
) -> GeneralSuccessResponse | ErrorResponse:
    return await call_api(client, "DELETE", f"attachments/{attachment_id}")
