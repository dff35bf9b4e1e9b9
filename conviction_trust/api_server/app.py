"""
FastAPI application — reasoning-trust assessments over HTTP.

Routes:
  GET /api/trust/{wallet}  TrustAssessment JSON
  GET /health              liveness probe

Run: uvicorn conviction_trust.api_server.app:app --host 0.0.0.0 --port 8000
"""

from __future__ import annotations

from fastapi import FastAPI

from conviction_trust import __version__
from conviction_trust.api_server.trust_routes import router as trust_router
from conviction_trust.trust_logging import get_logger

logger = get_logger(__name__)

app = FastAPI(
    title="Conviction Trust API",
    description="Reasoning-trust assessments derived from wallet conviction scores.",
    version=__version__,
)

app.include_router(trust_router, prefix="/api", tags=["Trust"])


@app.get("/health")
def health() -> dict[str, str]:
    """Liveness probe: API is up."""
    return {"status": "ok"}
