"""
Trust assessor: conviction lookup -> TrustAssessment.

Before trusting an agent's reasoning proof, check that its wallet has
cross-domain conviction. The assessor never raises to its caller: every
Conviction Source failure becomes a Medium assessment whose reason carries
the failure description, so an unverifiable agent is neither fully trusted
nor fully distrusted.
"""

from __future__ import annotations

from typing import Any

from conviction_trust.assessment.classifier import (
    FAILED_LOOKUP_LEVEL,
    classify_score,
    conviction_reason,
    failure_reason,
)
from conviction_trust.assessment.models import TrustAssessment
from conviction_trust.config import get_settings
from conviction_trust.conviction.models import ConvictionScore
from conviction_trust.conviction.source import ConvictionSource, CortexConvictionSource
from conviction_trust.core.exceptions import (
    ConvictionDecodeError,
    ConvictionSourceError,
    ConvictionTransportError,
    FailureKind,
)
from conviction_trust.trust_logging import bind_wallet


def assessment_from_conviction(conviction: ConvictionScore) -> TrustAssessment:
    """Pure part of the assessment: classify a fetched score and build the reason."""
    return TrustAssessment(
        trust_level=classify_score(conviction.score),
        conviction=conviction,
        reason=conviction_reason(conviction),
    )


def assessment_from_failure(kind: FailureKind, description: str) -> TrustAssessment:
    """Degraded assessment for a failed lookup: Medium, no conviction."""
    return TrustAssessment(
        trust_level=FAILED_LOOKUP_LEVEL,
        conviction=None,
        reason=failure_reason(description),
        failure=kind,
    )


class TrustAssessor:
    """Assess reasoning trust for wallets using one Conviction Source."""

    def __init__(self, source: ConvictionSource) -> None:
        self._source = source

    @property
    def source(self) -> ConvictionSource:
        return self._source

    async def assess_reasoning_trust(self, wallet: str) -> TrustAssessment:
        """Fetch conviction for wallet once and classify it; never raises."""
        log = bind_wallet(wallet, __name__)
        try:
            conviction = await self._source.get_wallet_conviction(wallet)
        except ConvictionSourceError as e:
            return self._degraded(log, e)
        except Exception as e:
            # Custom sources outside the error taxonomy count as unreachable
            log.exception("conviction_source_unexpected_error", error=str(e))
            return self._degraded(log, ConvictionTransportError(str(e) or type(e).__name__, wallet=wallet))

        if not isinstance(conviction, ConvictionScore):
            err = ConvictionDecodeError(
                f"source returned {type(conviction).__name__}, not ConvictionScore", wallet=wallet
            )
            return self._degraded(log, err)

        assessment = assessment_from_conviction(conviction)
        log.info("trust_assessed", trust_level=assessment.trust_level, score=conviction.score)
        return assessment

    def _degraded(self, log: Any, err: ConvictionSourceError) -> TrustAssessment:
        log.warning(
            "conviction_fetch_failed",
            failure=err.kind,
            error=err.description,
            trust_level=FAILED_LOOKUP_LEVEL,
        )
        return assessment_from_failure(err.kind, err.description)


def default_assessor() -> TrustAssessor:
    """TrustAssessor over the Cortex API configured from env (CORTEX_API_URL, CORTEX_TIMEOUT_SEC)."""
    settings = get_settings()
    source = CortexConvictionSource(settings.cortex_api_url, timeout_sec=settings.timeout_sec)
    return TrustAssessor(source)


async def assess_reasoning_trust(
    wallet: str,
    source: ConvictionSource | None = None,
) -> TrustAssessment:
    """
    Assess trust in an agent's reasoning proof using conviction data.

    Args:
        wallet: Opaque wallet identifier; not validated.
        source: Conviction Source to query; defaults to the configured Cortex API.

    Returns:
        TrustAssessment. High / Medium / Low by score on success, Medium on any failure.
    """
    assessor = TrustAssessor(source) if source is not None else default_assessor()
    return await assessor.assess_reasoning_trust(wallet)
