"""
FastAPI router: GET /trust/{wallet}.

Performs one live conviction lookup per request and returns the
TrustAssessment. Always 200: failed lookups come back as Medium with a reason.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from conviction_trust.assessment import TrustAssessment, TrustAssessor, default_assessor
from conviction_trust.trust_logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/trust", tags=["trust"])


def get_assessor() -> TrustAssessor:
    """Dependency: assessor over the configured Cortex API (CORTEX_API_URL env)."""
    return default_assessor()


@router.get("/{wallet}", response_model=TrustAssessment)
async def get_trust(wallet: str, assessor: TrustAssessor = Depends(get_assessor)) -> TrustAssessment:
    """Assess reasoning trust for one wallet identifier."""
    if not wallet.strip():
        raise HTTPException(status_code=400, detail="wallet must be non-empty")
    logger.info("trust_requested", wallet_id=wallet)
    return await assessor.assess_reasoning_trust(wallet)
