"""Typed async client for the Zulip REST API."""

from .api import ErrorResponse, GeneralSuccessResponse, call_api, generate_call_api
from .auth import auth_by_jwt, auth_by_password, auth_dev
from .config import Credentials
from .exceptions import AuthenticationError, ZulipError
from .version import __version__

__all__ = [
    "AuthenticationError",
    "Credentials",
    "ErrorResponse",
    "GeneralSuccessResponse",
    "ZulipError",
    "__version__",
    "auth_by_jwt",
    "auth_by_password",
    "auth_dev",
    "call_api",
    "generate_call_api",
]
