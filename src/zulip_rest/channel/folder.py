"""Channel folder endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypedDict

import httpx
from pydantic import Field

from ..api import ErrorResponse, GeneralSuccessResponse, call_api
from ..params import ApiParams, coerce_params


class CreateChannelFolderParams(ApiParams):
    name: str = Field(..., min_length=1)
    description: str | None = None


class CreateChannelFolderResponse(GeneralSuccessResponse):
    channel_folder_id: int


class GetChannelFoldersParams(ApiParams):
    include_archived: bool | None = None


class ChannelFolder(TypedDict):
    id: int
    name: str
    description: str
    rendered_description: str
    order: int
    creator_id: int | None
    date_created: int
    is_archived: bool


class GetChannelFoldersResponse(GeneralSuccessResponse):
    channel_folders: list[ChannelFolder]


class UpdateChannelFolderParams(ApiParams):
    require_any_field = True

    name: str | None = None
    description: str | None = None
    is_archived: bool | None = None


async def create_channel_folder(
    client: httpx.AsyncClient, params: CreateChannelFolderParams | Mapping[str, Any]
) -> CreateChannelFolderResponse | ErrorResponse:
    """Create a channel folder."""
    return await call_api(
        client,
        "POST",
        "channel_folders/create",
        coerce_params(CreateChannelFolderParams, params),
    )


async def get_channel_folders(
    client: httpx.AsyncClient,
    params: GetChannelFoldersParams | Mapping[str, Any] | None = None,
) -> GetChannelFoldersResponse | ErrorResponse:
    """List the organization's channel folders."""
    query = coerce_params(GetChannelFoldersParams, params) if params is not None else None
    return await call_api(client, "GET", "channel_folders", query)


async def update_channel_folder(
    client: httpx.AsyncClient,
    folder_id: int,
    params: UpdateChannelFolderParams | Mapping[str, Any],
) -> GeneralSuccessResponse | ErrorResponse:
    """Rename, describe, archive or unarchive a channel folder."""
    return await call_api(
        client,
        "PATCH",
        f"channel_folders/{folder_id}",
        coerce_params(UpdateChannelFolderParams, params),
    )
