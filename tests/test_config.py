"""Tests for loading Zulip credentials from YAML files and the environment."""

from __future__ import annotations

import asyncio
from pathlib import Path

import httpx
import pytest
from conftest import RecordingTransport

from zulip_rest.config import Credentials


def _write_config(path: Path, body: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(body.strip() + "\n")
    return path


def test_credentials_from_file_missing_file(tmp_path: Path) -> None:
    """Given no config file, when `Credentials.from_file()` runs,
    then a `FileNotFoundError` is raised."""
    missing_path = tmp_path / "conf" / "zuliprc.yml"
    with pytest.raises(FileNotFoundError, match="Zulip config not found"):
        Credentials.from_file(missing_path)


def test_credentials_from_file_missing_values(tmp_path: Path) -> None:
    """Given a config file missing required keys, when `Credentials.from_file()`
    executes, then the missing keys are named."""
    config = _write_config(
        tmp_path / "conf" / "zuliprc.yml", "ZULIP_SITE: https://chat.example.com"
    )

    with pytest.raises(ValueError, match="ZULIP_EMAIL, ZULIP_API_KEY"):
        Credentials.from_file(config)


def test_credentials_from_file_rejects_non_mapping(tmp_path: Path) -> None:
    config = _write_config(tmp_path / "zuliprc.yml", "- just\n- a list")

    with pytest.raises(ValueError, match="must contain a mapping"):
        Credentials.from_file(config)


def test_credentials_from_file_success(tmp_path: Path) -> None:
    """Given a fully populated config with lower-case keys, when
    `Credentials.from_file()` runs, then it returns a validated instance."""
    config = _write_config(
        tmp_path / "conf" / "zuliprc.yml",
        """
zulip_site: https://chat.example.com
zulip_email: bot@example.com
zulip_api_key: secret-key
""",
    )

    creds = Credentials.from_file(config)

    assert str(creds.site) == "https://chat.example.com/"
    assert creds.email == "bot@example.com"
    assert creds.api_key == "secret-key"


def test_credentials_env_path_takes_precedence(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Given `ZULIP_CONFIG_PATH` and an explicit path, when `from_file()` runs,
    then the environment variable wins."""
    from_env = _write_config(
        tmp_path / "env.yml",
        """
ZULIP_SITE: https://env.example.com
ZULIP_EMAIL: env@example.com
ZULIP_API_KEY: env-key
""",
    )
    explicit = tmp_path / "missing.yml"
    monkeypatch.setenv("ZULIP_CONFIG_PATH", str(from_env))

    creds = Credentials.from_file(explicit)

    assert creds.email == "env@example.com"


def test_credentials_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ZULIP_SITE", "https://chat.example.com")
    monkeypatch.setenv("ZULIP_EMAIL", "bot@example.com")
    monkeypatch.setenv("ZULIP_API_KEY", "secret-key")

    creds = Credentials.from_env()

    assert creds.api_key == "secret-key"


def test_credentials_from_env_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ZULIP_SITE", "https://chat.example.com")

    with pytest.raises(ValueError, match="Missing Zulip credentials in environment"):
        Credentials.from_env()


def test_create_client_targets_api_root(transport: RecordingTransport) -> None:
    """Given loaded credentials, when `create_client()` builds a client, then
    requests go to `<site>/api/v1/` with the stored credentials."""
    creds = Credentials.model_validate(
        {"site": "https://chat.example.com", "email": "bot@example.com", "api_key": "k"}
    )

    async def scenario() -> None:
        async with creds.create_client(transport=httpx.MockTransport(transport)) as client:
            await client.get("users/me")

    asyncio.run(scenario())

    assert str(transport.last.url) == "https://chat.example.com/api/v1/users/me"
    assert transport.last.headers["Authorization"].startswith("Basic ")


def test_credentials_relative_path_resolves_against_working_directory(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Given a relative path and no `ZULIP_CONFIG_PATH`, when `from_file()` runs
    from the directory holding the file, then that file is loaded."""
    _write_config(
        tmp_path / "settings" / "relative-zuliprc.yml",
        """
ZULIP_SITE: https://cwd.example.com
ZULIP_EMAIL: cwd@example.com
ZULIP_API_KEY: cwd-key
""",
    )
    monkeypatch.chdir(tmp_path)

    creds = Credentials.from_file("settings/relative-zuliprc.yml")

    assert creds.email == "cwd@example.com"

    with pytest.raises(FileNotFoundError, match="Checked:"):
        Credentials.from_file("settings/absent.yml")
