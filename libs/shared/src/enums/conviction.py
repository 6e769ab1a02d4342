"""Conviction Enum"""

from enum import Enum


class Conviction(Enum):
    """Holder's confidence in a position"""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
