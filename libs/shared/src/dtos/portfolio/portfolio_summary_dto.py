"""Portfolio Summary DTO"""

from typing import TypedDict

from libs.shared.src.dtos.portfolio.portfolio_health_dto import PortfolioHealthDTO
from libs.shared.src.dtos.portfolio.portfolio_totals_dto import PortfolioTotalsDTO
from libs.shared.src.dtos.portfolio.top_opportunity_dto import TopOpportunityDTO


class PortfolioSummaryDTO(TypedDict):
    """Portfolio summary"""

    token_count: int
    totals: PortfolioTotalsDTO
    top_opportunities: list[TopOpportunityDTO]
    health: PortfolioHealthDTO
