"""Tests for the HTTP transport shared by every endpoint wrapper."""

from __future__ import annotations

import asyncio
import base64
import json

import httpx
import pytest
from conftest import API_KEY, EMAIL, RecordingTransport

from zulip_rest.api import api_base_url, call_api, generate_call_api
from zulip_rest.server import get_server_settings


@pytest.mark.parametrize(
    "server_url",
    ["https://example.com", "https://example.com/", "https://example.com///"],
)
def test_base_url_normalization(transport: RecordingTransport, server_url: str) -> None:
    """Given a server URL with any number of trailing slashes, when a request is
    made, then it targets `/api/v1/<path>` exactly once."""

    async def scenario() -> None:
        async with transport.client(server_url) as client:
            await call_api(client, "GET", "messages")

    asyncio.run(scenario())

    assert api_base_url(server_url) == "https://example.com/api/v1/"
    assert str(transport.last.url) == "https://example.com/api/v1/messages"


def test_basic_auth_header_carries_email_and_key(transport: RecordingTransport) -> None:
    """Given a client from `generate_call_api()`, when it sends a request, then the
    Basic auth header decodes to exactly the email and API key."""

    async def scenario() -> None:
        async with transport.client() as client:
            await call_api(client, "GET", "users/me")

    asyncio.run(scenario())

    scheme, _, token = transport.last.headers["Authorization"].partition(" ")
    assert scheme == "Basic"
    assert base64.b64decode(token).decode() == f"{EMAIL}:{API_KEY}"


def test_generate_call_api_forwards_client_options() -> None:
    async def scenario() -> None:
        client = generate_call_api("https://chat.example.com", EMAIL, API_KEY, timeout=3.0)
        async with client:
            assert client.timeout.read == 3.0
            assert str(client.base_url) == "https://chat.example.com/api/v1/"

    asyncio.run(scenario())


def test_identical_requests_are_not_deduplicated(transport: RecordingTransport) -> None:
    """Given two identical GET calls, when both are awaited, then two requests go
    out and both return the same body."""
    payload = {
        "result": "success",
        "msg": "",
        "zulip_version": "11.0",
        "zulip_feature_level": 400,
    }
    transport.reply_json(payload)
    transport.reply_json(payload)

    async def scenario() -> tuple[object, object]:
        async with transport.client() as client:
            first = await get_server_settings(client)
            second = await get_server_settings(client)
            return first, second

    first, second = asyncio.run(scenario())

    assert len(transport.requests) == 2
    assert first == second == payload


def test_error_envelope_is_returned_verbatim(transport: RecordingTransport) -> None:
    """Given a 401 JSON error body, when a wrapper is awaited, then the body is
    returned unchanged instead of raising."""
    error = {"result": "error", "msg": "Invalid API key", "code": "UNAUTHORIZED"}
    transport.reply_json(error, status_code=401)

    async def scenario() -> object:
        async with transport.client() as client:
            return await call_api(client, "GET", "users/me")

    assert asyncio.run(scenario()) == error


def test_non_json_error_raises_http_status_error(transport: RecordingTransport) -> None:
    """Given a 502 HTML page, when a wrapper is awaited, then `HTTPStatusError`
    is raised."""
    transport.responses.append(httpx.Response(502, text="<html>Bad gateway</html>"))

    async def scenario() -> None:
        async with transport.client() as client:
            await call_api(client, "GET", "users/me")

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(scenario())


def test_undecodable_error_page_raises_http_status_error(transport: RecordingTransport) -> None:
    """Given a 502 page that is not valid UTF-8, when a wrapper is awaited, then
    `HTTPStatusError` is raised rather than a decoding error."""
    transport.responses.append(httpx.Response(502, content=b"<html>Bad gateway \xe9</html>"))

    async def scenario() -> None:
        async with transport.client() as client:
            await call_api(client, "GET", "users/me")

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(scenario())


def test_non_json_success_raises_decode_error(transport: RecordingTransport) -> None:
    transport.responses.append(httpx.Response(200, text="not json"))

    async def scenario() -> None:
        async with transport.client() as client:
            await call_api(client, "GET", "users/me")

    with pytest.raises(json.JSONDecodeError):
        asyncio.run(scenario())


def test_transport_errors_propagate(transport: RecordingTransport) -> None:
    """Given a connection failure, when a wrapper is awaited, then the httpx
    error surfaces unchanged."""

    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    transport.responses.append(refuse)

    async def scenario() -> None:
        async with transport.client() as client:
            await call_api(client, "GET", "users/me")

    with pytest.raises(httpx.ConnectError):
        asyncio.run(scenario())


def test_get_parameters_travel_in_query_string(transport: RecordingTransport) -> None:
    async def scenario() -> None:
        async with transport.client() as client:
            await call_api(client, "GET", "streams", {"include_public": False, "skip": None})

    asyncio.run(scenario())

    request = transport.last
    assert request.url.params["include_public"] == "false"
    assert "skip" not in request.url.params
    assert request.content == b""


def test_post_parameters_travel_in_form_body(transport: RecordingTransport) -> None:
    async def scenario() -> None:
        async with transport.client() as client:
            await call_api(client, "POST", "messages", {"content": "a&b=c"})

    asyncio.run(scenario())

    request = transport.last
    assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"
    assert request.content == b"content=a%26b%3Dc"
    assert not request.url.query


def test_absent_and_empty_body_parameters_differ(transport: RecordingTransport) -> None:
    """Given a body-located DELETE, when params are absent, then no body is sent;
    when params are an empty object, then an empty form body is sent."""

    async def scenario() -> None:
        async with transport.client() as client:
            await call_api(client, "DELETE", "messages/1/reactions", None, location="body")
            await call_api(client, "DELETE", "messages/1/reactions", {}, location="body")

    asyncio.run(scenario())

    bodyless, empty = transport.requests
    assert bodyless.content == b""
    assert "Content-Type" not in bodyless.headers
    assert empty.content == b""
    assert empty.headers["Content-Type"] == "application/x-www-form-urlencoded"
