"""Exceptions raised by the Zulip REST client."""

from __future__ import annotations

from typing import Any


class ZulipError(Exception):
    """Base error for failures the library raises itself."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for structured reporting."""
        result: dict[str, Any] = {"error": self.message}
        if self.code:
            result["code"] = self.code
        if self.status_code:
            result["status"] = self.status_code
        if self.details:
            result["details"] = self.details
        return result


class AuthenticationError(ZulipError):
    """A credential exchange did not yield an API key."""
