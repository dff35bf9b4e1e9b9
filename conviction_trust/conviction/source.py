"""
Conviction Source — fetch a wallet's conviction score from the Cortex API.

Responsibilities:
- Issue GET {base_url}/conviction/{wallet} with httpx.
- Convert transport errors, non-success statuses and malformed bodies into
  ConvictionTransportError / ConvictionStatusError / ConvictionDecodeError.
- Nothing else: no retries, no caching.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import httpx
from pydantic import ValidationError

from conviction_trust.config.env import DEFAULT_CORTEX_API_URL, DEFAULT_TIMEOUT_SEC
from conviction_trust.conviction.models import ConvictionScore
from conviction_trust.core.exceptions import (
    ConvictionDecodeError,
    ConvictionStatusError,
    ConvictionTransportError,
)
from conviction_trust.trust_logging import get_logger

logger = get_logger(__name__)


@runtime_checkable
class ConvictionSource(Protocol):
    """Anything that can produce a ConvictionScore for a wallet or raise ConvictionSourceError."""

    async def get_wallet_conviction(self, wallet: str) -> ConvictionScore: ...


class CortexConvictionSource:
    """
    HTTP Conviction Source backed by the Cortex API.

    Opens a fresh httpx.AsyncClient per call unless one is supplied; a supplied
    client is never closed here (the caller owns it).
    """

    def __init__(
        self,
        base_url: str = DEFAULT_CORTEX_API_URL,
        *,
        timeout_sec: float | None = DEFAULT_TIMEOUT_SEC,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Args:
            base_url: Cortex API base address, e.g. http://76.13.193.103/api.
            timeout_sec: HTTP timeout per request; None disables it.
            client: Optional shared AsyncClient (tests pass one with MockTransport).
        """
        if not base_url.strip():
            raise ValueError("base_url must be non-empty")
        if timeout_sec is not None and timeout_sec <= 0:
            raise ValueError("timeout_sec must be positive")

        self._base_url = base_url.strip().rstrip("/")
        self._timeout = timeout_sec
        self._client = client

    @property
    def base_url(self) -> str:
        return self._base_url

    def conviction_url(self, wallet: str) -> str:
        return f"{self._base_url}/conviction/{wallet}"

    async def get_wallet_conviction(self, wallet: str) -> ConvictionScore:
        """Fetch and decode the conviction score for one wallet."""
        url = self.conviction_url(wallet)
        if self._client is not None:
            resp = await self._get(self._client, url, wallet)
        else:
            async with httpx.AsyncClient(timeout=httpx.Timeout(self._timeout)) as client:
                resp = await self._get(client, url, wallet)

        if not resp.is_success:
            logger.debug(
                "conviction_status_error",
                wallet_id=wallet,
                status_code=resp.status_code,
            )
            raise ConvictionStatusError(resp.status_code, resp.reason_phrase, wallet=wallet)

        try:
            conviction = ConvictionScore.model_validate_json(resp.content)
        except ValidationError as e:
            raise ConvictionDecodeError(_summarize_validation_error(e), wallet=wallet) from e

        logger.debug("conviction_fetched", wallet_id=wallet, score=conviction.score)
        return conviction

    async def _get(self, client: httpx.AsyncClient, url: str, wallet: str) -> httpx.Response:
        try:
            return await client.get(url)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            # InvalidURL: the wallet id cannot be encoded into a request URL
            raise ConvictionTransportError(str(e) or type(e).__name__, wallet=wallet) from e


def _summarize_validation_error(err: ValidationError) -> str:
    """One-line summary of the first few pydantic errors: 'field: msg; field: msg'."""
    parts: list[str] = []
    for item in err.errors()[:3]:
        loc = ".".join(str(p) for p in item.get("loc", ())) or "body"
        parts.append(f"{loc}: {item.get('msg', 'invalid')}")
    return "; ".join(parts) or str(err)
