"""Get Portfolio Summary Query

Implements GetPortfolioSummaryPort Driving Port
"""

import logging

from injector import inject

from libs.portfolio.src.domain.services.opportunity_ranker import rank_opportunities
from libs.portfolio.src.domain.services.portfolio_aggregator import (
    aggregate_portfolio,
)
from libs.portfolio.src.domain.services.portfolio_health_checker import (
    check_portfolio_health,
)
from libs.portfolio.src.ports.get_portfolio_summary_port import (
    GetPortfolioSummaryPort,
)
from libs.shared.src.dtos.portfolio.portfolio_summary_dto import PortfolioSummaryDTO
from libs.shared.src.dtos.token.token_snapshot_dto import TokenSnapshotDTO


class GetPortfolioSummaryQuery(GetPortfolioSummaryPort):
    """Portfolio totals, top opportunities and health"""

    @inject
    def __init__(self) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)

    def execute(self, tokens: list[TokenSnapshotDTO]) -> PortfolioSummaryDTO:
        totals = aggregate_portfolio(tokens)
        health = check_portfolio_health(tokens)

        self._logger.info(
            f"Portfolio of {len(tokens)} tokens: "
            f"${totals['total']:,.2f} → ${totals['target']:,.2f}, "
            f"health {health['score']}"
        )

        return {
            "token_count": len(tokens),
            "totals": totals,
            "top_opportunities": rank_opportunities(tokens),
            "health": health,
        }
