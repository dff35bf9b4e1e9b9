"""
Configuration management for Conviction Trust.

Loads settings from environment variables and an optional .env file.
Exposes a single source of truth for the Cortex endpoint and API binding.
"""

from conviction_trust.config.settings import Settings, get_settings  # noqa: F401

__all__ = ["Settings", "get_settings"]
