"""Expose the package version."""

from __future__ import annotations

from importlib import metadata


def _resolve_version() -> str:
    """Return the installed distribution version or fall back to the project default."""

    try:
        return metadata.version("zulip-rest")
    except metadata.PackageNotFoundError:
        # Source checkout without an installed distribution
        return "0.1.0"


__version__ = _resolve_version()
