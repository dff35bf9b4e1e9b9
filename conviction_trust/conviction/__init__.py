"""
Conviction Source package.

Fetches cross-domain conviction scores (DeFi + prediction markets) for a
wallet from the Cortex API and decodes them into ConvictionScore.
"""

from conviction_trust.conviction.models import ConvictionScore
from conviction_trust.conviction.source import ConvictionSource, CortexConvictionSource

__all__ = [
    "ConvictionScore",
    "ConvictionSource",
    "CortexConvictionSource",
]
