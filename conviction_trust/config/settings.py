"""
Application settings.

Responsibilities:
- Collect configuration from config.env into one typed object.
- Used by the CLI, the API server, and the default Conviction Source.
"""

from __future__ import annotations

from dataclasses import dataclass

from conviction_trust.config.env import (
    get_api_host,
    get_api_port,
    get_cortex_api_url,
    get_timeout_sec,
)


@dataclass(frozen=True)
class Settings:
    """Resolved settings for one process."""

    cortex_api_url: str
    timeout_sec: float
    api_host: str
    api_port: int


def get_settings() -> Settings:
    """
    Return the current application settings.

    Read fresh from the environment on every call so tests can monkeypatch env.
    """
    return Settings(
        cortex_api_url=get_cortex_api_url(),
        timeout_sec=get_timeout_sec(),
        api_host=get_api_host(),
        api_port=get_api_port(),
    )
