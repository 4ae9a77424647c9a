"""Saved snippet endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypedDict

import httpx
from pydantic import Field

from .api import ErrorResponse, GeneralSuccessResponse, call_api
from .params import ApiParams, coerce_params


class Snippet(TypedDict):
    id: int
    title: str
    content: str
    date_created: int


class GetSnippetsResponse(GeneralSuccessResponse):
    saved_snippets: list[Snippet]


class CreateSnippetParams(ApiParams):
    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)


class CreateSnippetResponse(GeneralSuccessResponse):
    saved_snippet_id: int


class EditSnippetParams(ApiParams):
    require_any_field = True

    title: str | None = None
    content: str | None = None


async def get_snippets(client: httpx.AsyncClient) -> GetSnippetsResponse | ErrorResponse:
    return await call_api(client, "GET", "saved_snippets")


async def create_snippet(
    client: httpx.AsyncClient, params: CreateSnippetParams | Mapping[str, Any]
) -> CreateSnippetResponse | ErrorResponse:
    return await call_api(
        client, "POST", "saved_snippets", coerce_params(CreateSnippetParams, params)
    )


async def edit_snippet(
    client: httpx.AsyncClient,
    snippet_id: int,
    params: EditSnippetParams | Mapping[str, Any],
) -> GeneralSuccessResponse | ErrorResponse:
    """Change a snippet's title, content or both."""
    return await call_api(
        client, "PATCH", f"saved_snippets/{snippet_id}", coerce_params(EditSnippetParams, params)
    )


async def delete_snippet(
    client: httpx.AsyncClient, snippet_id: int
) -> GeneralSuccessResponse | ErrorResponse:
    return await call_api(client, "DELETE", f"saved_snippets/{snippet_id}")
