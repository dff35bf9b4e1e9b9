"""
Conviction Trust — trust assessment for agent reasoning proofs.

Fetches a wallet's cross-domain conviction score from the Cortex API and
maps it to a High / Medium / Low trust level. Agents with high conviction
have demonstrated skin in the game; lookups that fail degrade to Medium.
"""

__version__ = "0.1.0"
