"""HTTP transport for the Zulip REST API.

``generate_call_api`` builds the client handle every endpoint wrapper takes;
``call_api`` performs the single request a wrapper makes.
"""

from __future__ import annotations

from typing import Any, Literal, NotRequired, TypedDict

import httpx
from loguru import logger

from .serialization import ParamsInput, serialize_params

API_PREFIX = "/api/v1/"

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

ParamsLocation = Literal["query", "body"]


class GeneralSuccessResponse(TypedDict):
    """Envelope shared by every successful response."""

    result: Literal["success"]
    msg: str
    ignored_parameters_unsupported: NotRequired[list[str]]


class ErrorResponse(TypedDict):
    """Envelope of a failed response."""

    result: Literal["error"]
    msg: str
    code: str


def api_base_url(server_url: str) -> str:
    """Return ``<server_url>/api/v1/`` with trailing slashes on ``server_url`` removed."""
    return f"{server_url.rstrip('/')}{API_PREFIX}"


def generate_call_api(
    server_url: str, email: str, api_key: str, **client_kwargs: Any
) -> httpx.AsyncClient:
    """Create an HTTP client authenticated against a Zulip server.

    Args:
        server_url: Server URL, e.g. ``https://chat.example.com``
        email: Account email, sent as the Basic auth username
        api_key: API key, sent as the Basic auth password
        **client_kwargs: Passed to ``httpx.AsyncClient`` (transport, timeout, headers)

    Returns:
        A client whose requests resolve relative paths under ``/api/v1/``.
        The caller owns it and should close it (``async with`` or ``aclose()``).
    """
    return httpx.AsyncClient(
        base_url=api_base_url(server_url),
        auth=httpx.BasicAuth(email, api_key),
        **client_kwargs,
    )


async def call_api(
    client: httpx.AsyncClient,
    method: str,
    path: str,
    params: ParamsInput | None = None,
    *,
    location: ParamsLocation | None = None,
    files: dict[str, Any] | None = None,
) -> Any:
    """Issue one request and return the decoded JSON body unchanged.

    Args:
        client: Client created by ``generate_call_api``
        method: HTTP method
        path: Path relative to ``/api/v1/``
        params: Parameter object; ``None`` sends no parameters at all
        location: ``"query"`` or ``"body"``; defaults to query for GET/DELETE
        files: Multipart file fields; forces a multipart body

    Returns:
        The parsed response body, including error envelopes.

    Raises:
        httpx.HTTPStatusError: The response is not JSON and has an error status.
        ValueError: The response is not JSON but has a success status.
        httpx.TransportError: Connection-level failures, unchanged.
    """
    method = method.upper()
    if location is None:
        location = "query" if method in ("GET", "DELETE") else "body"

    request_kwargs: dict[str, Any] = {}
    if files is not None:
        request_kwargs["files"] = files
        if params is not None:
            request_kwargs["data"] = serialize_params(params)
    elif params is not None:
        encoded = serialize_params(params)
        if location == "query":
            if encoded:
                request_kwargs["params"] = encoded
        elif encoded:
            request_kwargs["data"] = encoded
        else:
            # present but empty: still send a (blank) form body
            request_kwargs["content"] = b""
            request_kwargs["headers"] = {"Content-Type": FORM_CONTENT_TYPE}

    logger.debug(f"{method} {path}")
    response = await client.request(method, path, **request_kwargs)
    logger.debug(f"{method} {path} -> {response.status_code}")

    try:
        return response.json()
    except ValueError:
        response.raise_for_status()
        raise
