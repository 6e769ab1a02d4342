"""Portfolio Health DTO"""

from typing import TypedDict


class PortfolioHealthDTO(TypedDict):
    """Portfolio Health Check Result"""

    score: int
    issues: list[str]
    suggestions: list[str]
