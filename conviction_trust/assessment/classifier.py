"""
Score classification: conviction score -> TrustLevel, plus reason text.

Bands are closed on the lower bound: 0.8 is High, 0.4 is Medium.
"""

from __future__ import annotations

from conviction_trust.assessment.models import TrustLevel
from conviction_trust.conviction.models import ConvictionScore

HIGH_TRUST_THRESHOLD = 0.8
MEDIUM_TRUST_THRESHOLD = 0.4

# Level assigned when no conviction could be fetched
FAILED_LOOKUP_LEVEL = TrustLevel.MEDIUM

FAILED_LOOKUP_REASON_PREFIX = "Could not fetch conviction"


def classify_score(score: float) -> TrustLevel:
    """Map a conviction score to a trust level (High >= 0.8 > Medium >= 0.4 > Low)."""
    if score >= HIGH_TRUST_THRESHOLD:
        return TrustLevel.HIGH
    if score >= MEDIUM_TRUST_THRESHOLD:
        return TrustLevel.MEDIUM
    return TrustLevel.LOW


def conviction_reason(conviction: ConvictionScore) -> str:
    return (
        f"Conviction score: {conviction.score:.2f} "
        f"(DeFi: {conviction.defi_activity:.2f}, "
        f"Prediction: {conviction.prediction_market_activity:.2f})"
    )


def failure_reason(description: str) -> str:
    return f"{FAILED_LOOKUP_REASON_PREFIX}: {description}"
