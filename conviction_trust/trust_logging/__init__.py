"""
Structured logging for Conviction Trust.

One structlog event per assessment, bound to the wallet being assessed.
"""

from conviction_trust.trust_logging.logger import bind_wallet, get_logger, resolve_level

__all__ = ["bind_wallet", "get_logger", "resolve_level"]
