"""Server and organization settings."""

from __future__ import annotations

from typing import Any, NotRequired, TypedDict

import httpx

from .api import ErrorResponse, GeneralSuccessResponse, call_api


class AuthenticationMethods(TypedDict, total=False):
    password: bool
    dev: bool
    email: bool
    ldap: bool
    remoteuser: bool
    github: bool
    azuread: bool
    gitlab: bool
    google: bool
    apple: bool
    saml: bool
    openid_connect: bool


class GetServerSettingsResponse(GeneralSuccessResponse):
    authentication_methods: AuthenticationMethods
    external_authentication_methods: list[dict[str, Any]]
    zulip_feature_level: int
    zulip_version: str
    zulip_merge_base: NotRequired[str]
    push_notifications_enabled: bool
    is_incompatible: bool
    email_auth_enabled: bool
    require_email_format_usernames: bool
    realm_url: NotRequired[str]
    realm_name: NotRequired[str]
    realm_icon: NotRequired[str]
    realm_description: NotRequired[str]
    realm_web_public_access_enabled: NotRequired[bool]


async def get_server_settings(
    client: httpx.AsyncClient,
) -> GetServerSettingsResponse | ErrorResponse:
    """Fetch the server version, feature level and enabled login methods.

    The endpoint needs no authentication; any client works.
    """
    return await call_api(client, "GET", "server_settings")
