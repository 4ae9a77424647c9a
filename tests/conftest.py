"""Pytest configuration for test discovery and fixtures.

This file ensures that:
- `src/` is importable
- No test reaches the network: HTTP goes through a recording `httpx.MockTransport`
- Ambient `ZULIP_*` variables cannot leak into credential-loading tests
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any
from urllib.parse import parse_qsl

import httpx
import pytest

# Ensure src directory is in path for imports
repo_root = Path(__file__).parent.parent
src_path = repo_root / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from zulip_rest.api import generate_call_api  # noqa: E402

SERVER_URL = "https://chat.example.com"
EMAIL = "bot@example.com"
API_KEY = "abcdefghijklmnopqrstuvwxyz012345"

SUCCESS: dict[str, Any] = {"result": "success", "msg": ""}


class RecordingTransport:
    """Request handler for `httpx.MockTransport` that records every request.

    Responses are replayed from `responses` in order; once exhausted, each
    request gets a plain success envelope.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.responses: list[httpx.Response | Callable[[httpx.Request], httpx.Response]] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.responses:
            return httpx.Response(200, json=SUCCESS)
        response = self.responses.pop(0)
        if callable(response):
            return response(request)
        return response

    def reply_json(self, payload: Any, status_code: int = 200) -> None:
        self.responses.append(httpx.Response(status_code, json=payload))

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    def client(self, server_url: str = SERVER_URL) -> httpx.AsyncClient:
        """API client (Basic auth, `/api/v1/` base) backed by this transport."""
        return generate_call_api(server_url, EMAIL, API_KEY, transport=httpx.MockTransport(self))

    def http_client(self) -> httpx.AsyncClient:
        """Unauthenticated client for the credential exchange flows."""
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


def form_fields(request: httpx.Request) -> dict[str, str]:
    """Decode a form-encoded request body."""
    return dict(parse_qsl(request.content.decode(), keep_blank_values=True))


def query_fields(request: httpx.Request) -> dict[str, str]:
    return dict(request.url.params)


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture(autouse=True)
def _isolate_zulip_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("ZULIP_CONFIG_PATH", "ZULIP_SITE", "ZULIP_EMAIL", "ZULIP_API_KEY"):
        monkeypatch.delenv(key, raising=False)
