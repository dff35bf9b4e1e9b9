"""
Structured logging for assessments.

Every assessment logs one event (trust_assessed or conviction_fetch_failed)
through a logger bound to the wallet being assessed, so each line carries
wallet_id, event_type, level and timestamp. TrustLevel and FailureKind values
may be passed as-is; they are rendered by their string value.

LOG_LEVEL picks the minimum level (unknown names mean INFO); LOG_FORMAT=json
renders one JSON object per line, anything else the structlog console format.
Logs go to stderr: `conviction-trust assess` owns stdout.
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime, timezone
from enum import Enum
from typing import Any

import structlog


def resolve_level(raw: str | None) -> int:
    """Map a level name such as "warning" to its logging constant; INFO when unknown."""
    value = getattr(logging, (raw or "INFO").strip().upper(), None)
    return value if isinstance(value, int) else logging.INFO


def _add_timestamp(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    event_dict.setdefault("timestamp", datetime.now(timezone.utc).isoformat())
    return event_dict


def _event_type(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """structlog's 'event' key is our event_type (trust_assessed, trust_requested, ...)."""
    if "event" in event_dict and "event_type" not in event_dict:
        event_dict["event_type"] = event_dict.pop("event")
    return event_dict


def _enum_values(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Render enum members (trust_level=TrustLevel.HIGH) as their value ("High")."""
    for key, value in event_dict.items():
        if isinstance(value, Enum):
            event_dict[key] = value.value
    return event_dict


def configure_structlog() -> None:
    """Apply LOG_LEVEL / LOG_FORMAT from the environment."""
    if os.getenv("LOG_FORMAT", "json").strip().lower() == "json":
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.format_exc_info,
            _add_timestamp,
            _event_type,
            _enum_values,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(resolve_level(os.getenv("LOG_LEVEL"))),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


if not structlog.is_configured():
    configure_structlog()


def get_logger(name: str) -> structlog.BoundLogger:
    """Module logger: get_logger(__name__).info("trust_requested", wallet_id=wallet)."""
    return structlog.get_logger(name).bind(logger=name)


def bind_wallet(wallet_id: str, name: str = "conviction_trust") -> structlog.BoundLogger:
    """Logger for one assessment: wallet_id is attached to every line it writes."""
    return get_logger(name).bind(wallet_id=wallet_id)
