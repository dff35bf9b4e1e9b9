"""
Tests for score classification: band boundaries and reason text.
"""

from __future__ import annotations

import pytest


def test_thresholds_are_named_constants():
    from conviction_trust.assessment import HIGH_TRUST_THRESHOLD, MEDIUM_TRUST_THRESHOLD

    assert HIGH_TRUST_THRESHOLD == 0.8
    assert MEDIUM_TRUST_THRESHOLD == 0.4


def test_boundaries_belong_to_higher_band():
    """0.8 -> High, 0.4 -> Medium, just below 0.4 -> Low."""
    from conviction_trust.assessment import TrustLevel, classify_score

    assert classify_score(0.8) is TrustLevel.HIGH
    assert classify_score(0.4) is TrustLevel.MEDIUM
    assert classify_score(0.39999) is TrustLevel.LOW
    assert classify_score(0.79999) is TrustLevel.MEDIUM


@pytest.mark.parametrize(
    "score,expected",
    [
        (1.0, "High"),
        (0.95, "High"),
        (0.5, "Medium"),
        (0.1, "Low"),
        (0.0, "Low"),
        # Out-of-range scores are not rejected; they still fall into a band
        (1.7, "High"),
        (-0.2, "Low"),
    ],
)
def test_classify_bands(score, expected):
    from conviction_trust.assessment import classify_score

    assert classify_score(score).value == expected


def test_conviction_reason_two_decimals():
    from conviction_trust.assessment.classifier import conviction_reason
    from conviction_trust.conviction import ConvictionScore

    conviction = ConvictionScore(
        wallet="w",
        score=0.95,
        defi_activity=0.7,
        prediction_market_activity=0.6,
        cross_domain_correlation=0.1,
    )
    assert conviction_reason(conviction) == "Conviction score: 0.95 (DeFi: 0.70, Prediction: 0.60)"


def test_failure_reason_prefix():
    from conviction_trust.assessment.classifier import failure_reason

    assert failure_reason("API error: 503 Service Unavailable") == (
        "Could not fetch conviction: API error: 503 Service Unavailable"
    )
