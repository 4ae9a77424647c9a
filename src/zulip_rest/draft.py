"""Draft endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal, TypedDict

import httpx
from pydantic import Field

from .api import ErrorResponse, GeneralSuccessResponse, call_api
from .params import ApiModel, ApiParams, coerce_params

# Empty string marks a draft with no recipient yet
DraftType = Literal["", "stream", "private"]


class DraftItem(ApiModel):
    """A draft body.

    ``to`` holds one channel ID for channel drafts and user IDs for direct
    ones; ``topic`` is empty for direct drafts.
    """

    type: DraftType
    to: list[int]
    topic: str
    content: str
    timestamp: float | None = None


class Draft(TypedDict):
    id: int
    type: DraftType
    to: list[int]
    topic: str
    content: str
    timestamp: int


class GetDraftsResponse(GeneralSuccessResponse):
    count: int
    drafts: list[Draft]


class CreateDraftsParams(ApiParams):
    drafts: list[DraftItem] = Field(..., min_length=1)


class CreateDraftsResponse(GeneralSuccessResponse):
    """``ids`` are in request order."""

    ids: list[int]


class EditDraftParams(ApiParams):
    draft: DraftItem


async def get_drafts(client: httpx.AsyncClient) -> GetDraftsResponse | ErrorResponse:
    """Get the user's drafts."""
    return await call_api(client, "GET", "drafts")


async def create_drafts(
    client: httpx.AsyncClient, params: CreateDraftsParams | Mapping[str, Any]
) -> CreateDraftsResponse | ErrorResponse:
    """Create one or more drafts."""
    return await call_api(client, "POST", "drafts", coerce_params(CreateDraftsParams, params))


async def edit_draft(
    client: httpx.AsyncClient,
    draft_id: int,
    params: EditDraftParams | Mapping[str, Any],
) -> GeneralSuccessResponse | ErrorResponse:
    """Replace the contents of a draft."""
    return await call_api(
        client, "PATCH", f"drafts/{draft_id}", coerce_params(EditDraftParams, params)
    )


async def delete_draft(
    client: httpx.AsyncClient, draft_id: int
) -> GeneralSuccessResponse | ErrorResponse:
    return await call_api(client, "DELETE", f"drafts/{draft_id}")
