"""Navigation view endpoints (Zulip 11.0, feature level 390)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, NotRequired, TypedDict
from urllib.parse import quote

import httpx
from pydantic import Field

from .api import ErrorResponse, GeneralSuccessResponse, call_api
from .params import ApiParams, coerce_params


def _view_path(fragment: str) -> str:
    # Fragments such as "narrow/is/starred" must stay one path segment
    return f"navigation_views/{quote(fragment, safe='')}"


class NavigationView(TypedDict):
    """``name`` is absent for built-in views."""

    fragment: str
    is_pinned: bool
    name: NotRequired[str | None]


class GetNavigationViewsResponse(GeneralSuccessResponse):
    navigation_views: list[NavigationView]


class AddNavigationViewParams(ApiParams):
    fragment: str = Field(..., min_length=1)
    is_pinned: bool
    name: str | None = None


class EditNavigationViewParams(ApiParams):
    require_any_field = True

    is_pinned: bool | None = None
    name: str | None = None


async def get_navigation_views(
    client: httpx.AsyncClient,
) -> GetNavigationViewsResponse | ErrorResponse:
    """Get the user's built-in and custom navigation views."""
    return await call_api(client, "GET", "navigation_views")


async def add_navigation_view(
    client: httpx.AsyncClient, params: AddNavigationViewParams | Mapping[str, Any]
) -> GeneralSuccessResponse | ErrorResponse:
    return await call_api(
        client, "POST", "navigation_views", coerce_params(AddNavigationViewParams, params)
    )


async def edit_navigation_view(
    client: httpx.AsyncClient,
    fragment: str,
    params: EditNavigationViewParams | Mapping[str, Any],
) -> GeneralSuccessResponse | ErrorResponse:
    """Pin, unpin or rename the view identified by ``fragment``."""
    return await call_api(
        client, "PATCH", _view_path(fragment), coerce_params(EditNavigationViewParams, params)
    )


async def remove_navigation_view(
    client: httpx.AsyncClient, fragment: str
) -> GeneralSuccessResponse | ErrorResponse:
    return await call_api(client, "DELETE", _view_path(fragment))
