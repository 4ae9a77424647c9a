"""Credential loading for applications built on the client."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, cast

import httpx
from omegaconf import OmegaConf
from pydantic import BaseModel, Field, HttpUrl

from .api import generate_call_api

CONFIG_PATH_ENV = "ZULIP_CONFIG_PATH"
DEFAULT_CONFIG_PATH = "conf/zuliprc.yml"
REQUIRED_KEYS = ("ZULIP_SITE", "ZULIP_EMAIL", "ZULIP_API_KEY")


def _locate_config(location: Path | str, *, source: str) -> Path:
    """Resolve ``location`` to exactly one existing file.

    Relative locations are tried against the working directory and the
    project checkout (two levels above this package).
    """
    raw = Path(location).expanduser()
    if raw.is_absolute():
        bases: tuple[Path, ...] = (raw,)
    else:
        project_dir = Path(__file__).resolve().parents[2]
        bases = (Path.cwd() / raw, project_dir / raw)

    # dict keeps first-seen order while collapsing aliases of the same file
    matches = list(dict.fromkeys(base.resolve() for base in bases if base.is_file()))
    if not matches:
        tried = "\n".join(str(base) for base in bases)
        raise FileNotFoundError(f"Zulip config not found for {source}: {raw}\nChecked:\n{tried}")
    if len(matches) > 1:
        found = ", ".join(str(match) for match in matches)
        raise RuntimeError(f"Multiple Zulip configs found for {source}: {raw}. Candidates: {found}")
    return matches[0]


def _load_normalized(location: Path) -> dict[str, Any]:
    raw_config = OmegaConf.load(location)
    config = OmegaConf.to_container(raw_config, resolve=True)
    if not isinstance(config, dict):
        raise ValueError("Zulip config file must contain a mapping of credential keys.")
    return {str(key).upper(): value for key, value in config.items()}


def _require_keys(normalized: dict[str, Any], *, source: str) -> None:
    missing = [key for key in REQUIRED_KEYS if not normalized.get(key)]
    if missing:
        joined = ", ".join(missing)
        raise ValueError(f"Missing Zulip credentials in {source}: {joined}")


class Credentials(BaseModel):
    """Server URL and account credential for one Zulip user."""

    site: HttpUrl = Field(
        description="Zulip server URL",
        examples=["https://chat.example.com"],
    )
    email: str = Field(description="Account email (Basic auth username)", min_length=1)
    api_key: str = Field(description="Account API key (Basic auth password)", min_length=1)

    @classmethod
    def _from_normalized(cls, normalized: dict[str, Any]) -> Credentials:
        return cls(
            site=cast(HttpUrl, str(normalized["ZULIP_SITE"])),
            email=str(normalized["ZULIP_EMAIL"]),
            api_key=str(normalized["ZULIP_API_KEY"]),
        )

    @classmethod
    def from_file(cls, path: Path | str | None = None) -> Credentials:
        """Load credentials from a YAML file, ``conf/zuliprc.yml`` by default.

        ``ZULIP_CONFIG_PATH`` in the environment takes precedence over ``path``.
        """
        env_path = os.environ.get(CONFIG_PATH_ENV)
        if env_path:
            location = _locate_config(env_path, source=CONFIG_PATH_ENV)
        elif path is not None:
            location = _locate_config(path, source="path")
        else:
            location = _locate_config(DEFAULT_CONFIG_PATH, source="default")

        normalized = _load_normalized(location)
        _require_keys(normalized, source=str(location))
        return cls._from_normalized(normalized)

    @classmethod
    def from_env(cls) -> Credentials:
        """Load credentials from ``ZULIP_SITE``, ``ZULIP_EMAIL`` and ``ZULIP_API_KEY``."""
        normalized = {key: os.environ.get(key) for key in REQUIRED_KEYS}
        _require_keys(normalized, source="environment")
        return cls._from_normalized(normalized)

    def create_client(self, **client_kwargs: Any) -> httpx.AsyncClient:
        """Build a client handle bound to these credentials."""
        return generate_call_api(str(self.site), self.email, self.api_key, **client_kwargs)
