"""Exchange user credentials for an API key.

Each flow performs exactly one POST and returns the API key. Unlike the
endpoint wrappers, these functions raise ``AuthenticationError`` when the
server does not report success, since a missing key is otherwise easy to
mistake for a present one.
"""

from __future__ import annotations

from typing import Any, NotRequired, cast

import httpx
from loguru import logger

from .api import GeneralSuccessResponse, api_base_url
from .exceptions import AuthenticationError


class FetchApiKeyResponse(GeneralSuccessResponse):
    """Body returned by the API key endpoints."""

    api_key: str
    email: NotRequired[str]
    user_id: NotRequired[int]


async def _post_form(
    http_client: httpx.AsyncClient | None, url: str, form: dict[str, str]
) -> httpx.Response:
    if http_client is not None:
        return await http_client.post(url, data=form)
    async with httpx.AsyncClient() as owned_client:
        return await owned_client.post(url, data=form)


async def _fetch_api_key(
    server_url: str,
    endpoint: str,
    form: dict[str, str],
    http_client: httpx.AsyncClient | None,
) -> str:
    url = f"{api_base_url(server_url)}{endpoint}"
    logger.debug(f"Requesting API key via {endpoint}")

    response = await _post_form(http_client, url, form)

    try:
        decoded: Any = response.json()
    except ValueError as exc:
        raise AuthenticationError(
            f"Zulip {endpoint} failed ({response.status_code}): non-JSON response",
            status_code=response.status_code,
        ) from exc
    if not isinstance(decoded, dict):
        raise AuthenticationError(
            f"Zulip {endpoint} failed ({response.status_code}): non-object response",
            status_code=response.status_code,
        )

    body = cast(dict[str, Any], decoded)
    if body.get("result") != "success":
        message = body.get("msg") or "unknown error"
        logger.warning(f"Zulip {endpoint} rejected credentials: {message}")
        raise AuthenticationError(
            f"Zulip {endpoint} failed: {message}",
            code=body.get("code"),
            status_code=response.status_code,
            details=body,
        )

    success = cast(FetchApiKeyResponse, body)
    if api_key := success.get("api_key"):
        logger.debug(f"Obtained API key via {endpoint}")
        return str(api_key)
    raise AuthenticationError(
        f"Zulip {endpoint} failed: missing api_key", status_code=response.status_code
    )


async def auth_by_password(
    server_url: str,
    email: str,
    password: str,
    *,
    http_client: httpx.AsyncClient | None = None,
) -> str:
    """Authenticate with email and password.

    Args:
        server_url: Server URL
        email: User email
        password: User password
        http_client: Optional client to send the request with; left open afterwards

    Returns:
        The API key of the authenticated user.

    Raises:
        AuthenticationError: The server did not return an API key.
    """
    return await _fetch_api_key(
        server_url, "login", {"username": email, "password": password}, http_client
    )


async def auth_dev(
    server_url: str,
    email: str,
    *,
    http_client: httpx.AsyncClient | None = None,
) -> str:
    """Fetch the API key for ``email`` from a development server (no password check)."""
    return await _fetch_api_key(server_url, "dev_fetch_api_key", {"username": email}, http_client)


async def auth_by_jwt(
    server_url: str,
    jwt: str,
    *,
    http_client: httpx.AsyncClient | None = None,
) -> str:
    """Exchange a JSON Web Token carrying the user's email for an API key."""
    return await _fetch_api_key(server_url, "fetch_api_key", {"token": jwt}, http_client)
