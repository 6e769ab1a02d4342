"""Potential Tier Enum

Buckets of raw potential multiplier (target market cap / market cap)
"""

from enum import Enum


class PotentialTier(Enum):
    """Potential tier"""

    LOW = "Low (< 5x)"
    MEDIUM = "Medium (5x - 20x)"
    HIGH = "High (>= 20x)"
