"""
Trust assessment output models.

TrustAssessment is what callers receive and what the API serializes:
trust_level, conviction (object or null), reason, failure (kind or null).
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from conviction_trust.conviction.models import ConvictionScore
from conviction_trust.core.exceptions import FailureKind


class TrustLevel(str, Enum):
    """Coarse three-band trust in an agent's reasoning."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class TrustAssessment(BaseModel):
    """
    Result of one assessment.

    conviction is present iff the lookup succeeded; failure is present iff it
    did not, and a failed lookup is always Medium.
    """

    model_config = ConfigDict(frozen=True)

    trust_level: TrustLevel
    conviction: ConvictionScore | None = None
    reason: str
    failure: FailureKind | None = Field(None, description="Why the lookup failed; null on success")

    @model_validator(mode="after")
    def _check_outcome(self) -> "TrustAssessment":
        if (self.conviction is None) == (self.failure is None):
            raise ValueError("exactly one of conviction or failure must be set")
        if self.failure is not None and self.trust_level is not TrustLevel.MEDIUM:
            raise ValueError("failed lookups must assess as Medium")
        return self

    @property
    def succeeded(self) -> bool:
        return self.conviction is not None
