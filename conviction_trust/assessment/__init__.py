"""
Trust assessment package.

Classifies a wallet's conviction score into High / Medium / Low trust and
degrades failed lookups to Medium with a descriptive reason.
"""

from conviction_trust.assessment.assessor import (
    TrustAssessor,
    assess_reasoning_trust,
    default_assessor,
)
from conviction_trust.assessment.classifier import (
    HIGH_TRUST_THRESHOLD,
    MEDIUM_TRUST_THRESHOLD,
    classify_score,
)
from conviction_trust.assessment.models import TrustAssessment, TrustLevel

__all__ = [
    "HIGH_TRUST_THRESHOLD",
    "MEDIUM_TRUST_THRESHOLD",
    "TrustAssessment",
    "TrustAssessor",
    "TrustLevel",
    "assess_reasoning_trust",
    "classify_score",
    "default_assessor",
]
