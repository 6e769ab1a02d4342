"""Portfolio Totals DTO"""

from typing import TypedDict

from libs.shared.src.dtos.token.token_snapshot_dto import TokenSnapshotDTO


class PortfolioTotalsDTO(TypedDict):
    """Portfolio totals under each token's selected exit strategy"""

    total: float
    target: float
    growth_multiplier: float
    growth_percentage: float
    highest_potential_token: TokenSnapshotDTO | None
