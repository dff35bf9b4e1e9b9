"""
Application-level exceptions.

Conviction Source failures come in three kinds: transport (could not reach
the source), status (reached, non-success response) and decode (body did not
match the ConvictionScore shape). Each carries its FailureKind and a
description that starts with a kind-specific prefix.
"""

from __future__ import annotations

from enum import Enum


class FailureKind(str, Enum):
    """Why a conviction lookup failed."""

    TRANSPORT = "transport"
    STATUS = "status"
    DECODE = "decode"


class ConvictionTrustError(Exception):
    """Base class for all Conviction Trust errors."""


class ConvictionSourceError(ConvictionTrustError):
    """Raised by a Conviction Source when a score cannot be produced."""

    kind: FailureKind = FailureKind.TRANSPORT
    prefix = "Request failed"

    def __init__(self, detail: str, wallet: str | None = None):
        self.detail = detail
        self.wallet = wallet
        super().__init__(self.description)

    @property
    def description(self) -> str:
        return f"{self.prefix}: {self.detail}"


class ConvictionTransportError(ConvictionSourceError):
    """The Conviction Source could not be reached (connection error, timeout)."""

    kind = FailureKind.TRANSPORT
    prefix = "Request failed"


class ConvictionStatusError(ConvictionSourceError):
    """The Conviction Source answered with a non-success status."""

    kind = FailureKind.STATUS
    prefix = "API error"

    def __init__(self, status_code: int, reason_phrase: str = "", wallet: str | None = None):
        self.status_code = status_code
        detail = f"{status_code} {reason_phrase}".strip()
        super().__init__(detail, wallet=wallet)


class ConvictionDecodeError(ConvictionSourceError):
    """The response body was not JSON or did not match the ConvictionScore shape."""

    kind = FailureKind.DECODE
    prefix = "Parse error"
