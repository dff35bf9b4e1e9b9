"""
Pytest fixtures for Conviction Trust tests.

HTTP is served by httpx.MockTransport so no test touches the real Cortex API.
"""

from __future__ import annotations

import asyncio
from typing import Any, Callable

import httpx
import pytest

# Imported at collection so structlog binds pytest's session stream, not a per-test capsys one
from conviction_trust.conviction import CortexConvictionSource

BASE_URL = "http://cortex.test/api"
VALID_WALLET = "9QCfNuQuxct1Xk9ytFYgxc5fThmTzL4pHQnSjjrVUrka"


def conviction_body(
    wallet: str = VALID_WALLET,
    score: float = 0.95,
    defi_activity: float = 0.7,
    prediction_market_activity: float = 0.6,
    cross_domain_correlation: float = 0.5,
) -> dict[str, Any]:
    return {
        "wallet": wallet,
        "score": score,
        "defi_activity": defi_activity,
        "prediction_market_activity": prediction_market_activity,
        "cross_domain_correlation": cross_domain_correlation,
    }


class StaticSource:
    """Conviction Source that returns a fixed score or raises a fixed error."""

    def __init__(self, result: Any = None, error: BaseException | None = None):
        self.result = result
        self.error = error
        self.calls: list[str] = []

    async def get_wallet_conviction(self, wallet: str):
        self.calls.append(wallet)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture(autouse=True)
def cortex_env(monkeypatch):
    """Pin Cortex config so tests never depend on the developer's .env."""
    monkeypatch.setenv("CORTEX_API_URL", BASE_URL)
    monkeypatch.setenv("CORTEX_TIMEOUT_SEC", "5")


@pytest.fixture
def with_mock_cortex() -> Callable[..., Any]:
    """
    Return run(handler, fn): open an AsyncClient on MockTransport(handler), build a
    CortexConvictionSource on it, and run the coroutine fn(source) to completion.
    """
    def run(handler: Callable[[httpx.Request], httpx.Response], fn):
        async def _go():
            async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
                source = CortexConvictionSource(BASE_URL, client=client)
                return await fn(source)

        return asyncio.run(_go())

    return run
