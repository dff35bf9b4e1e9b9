"""
Data models for Conviction Source output.

ConvictionScore mirrors the Cortex API /conviction/{wallet} response body.
Scores are conceptually in [0, 1] but the API does not guarantee it, so no
range validation is applied. Numbers must be real JSON numbers: quoted
numbers, NaN and Infinity are decode failures.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

# JSON ints are still accepted for float fields in strict mode
Activity = Annotated[float, Field(strict=True, allow_inf_nan=False)]


class ConvictionScore(BaseModel):
    """Cross-domain conviction for one wallet (DeFi + prediction markets)."""

    model_config = ConfigDict(frozen=True)

    wallet: str = Field(..., strict=True, description="Wallet identifier the score belongs to")
    score: Activity = Field(..., description="Combined conviction score")
    defi_activity: Activity = Field(..., description="DeFi activity sub-score")
    prediction_market_activity: Activity = Field(..., description="Prediction market activity sub-score")
    cross_domain_correlation: Activity = Field(..., description="Correlation between the two domains")
