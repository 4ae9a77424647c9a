"""User, status and attachment endpoints."""

from .attachment import get_attachments, remove_attachment
from .status import get_user_status, update_status
from .user import get_own_user, get_user_by_email, get_user_by_id, get_users

__all__ = [
    "get_attachments",
    "get_own_user",
    "get_user_by_email",
    "get_user_by_id",
    "get_user_status",
    "get_users",
    "remove_attachment",
    "update_status",
]
