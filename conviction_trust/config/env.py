"""
Environment variable loading for Conviction Trust.

- CORTEX_API_URL: Conviction Source base address (default: public Cortex API)
- CORTEX_TIMEOUT_SEC: request timeout at the Conviction Source boundary
- API_HOST / API_PORT: bind address for the HTTP API
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root: config is conviction_trust/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_PACKAGE_DIR = _CONFIG_DIR.parent
_ROOT = _PACKAGE_DIR.parent
_ENV_PATH = _ROOT / ".env"

DEFAULT_CORTEX_API_URL = "http://76.13.193.103/api"
DEFAULT_TIMEOUT_SEC = 30.0
DEFAULT_API_HOST = "0.0.0.0"
DEFAULT_API_PORT = 8000


def load_conviction_env() -> None:
    """Load .env from project root. Safe to call multiple times; missing file is fine."""
    load_dotenv(_ENV_PATH)


def get_cortex_api_url() -> str:
    """
    Return CORTEX_API_URL from env without trailing slash.
    Default: the public Cortex API.
    """
    load_conviction_env()
    url = (os.getenv("CORTEX_API_URL") or "").strip()
    return (url or DEFAULT_CORTEX_API_URL).rstrip("/")


def get_timeout_sec() -> float:
    """Return CORTEX_TIMEOUT_SEC as a positive float; invalid values use the default."""
    load_conviction_env()
    raw = (os.getenv("CORTEX_TIMEOUT_SEC") or "").strip()
    try:
        value = float(raw)
    except ValueError:
        return DEFAULT_TIMEOUT_SEC
    return value if value > 0 else DEFAULT_TIMEOUT_SEC


def get_api_host() -> str:
    load_conviction_env()
    return (os.getenv("API_HOST") or "").strip() or DEFAULT_API_HOST


def get_api_port() -> int:
    """Return API_PORT as int; invalid values use the default."""
    load_conviction_env()
    raw = (os.getenv("API_PORT") or "").strip()
    try:
        return int(raw)
    except ValueError:
        return DEFAULT_API_PORT
