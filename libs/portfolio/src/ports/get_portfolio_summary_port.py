"""Get Portfolio Summary Driving Port"""

from typing import Protocol

from libs.shared.src.dtos.portfolio.portfolio_summary_dto import PortfolioSummaryDTO
from libs.shared.src.dtos.token.token_snapshot_dto import TokenSnapshotDTO


class GetPortfolioSummaryPort(Protocol):
    """Get portfolio summary

    CLI Entry: exit-planner summary
    """

    def execute(self, tokens: list[TokenSnapshotDTO]) -> PortfolioSummaryDTO:
        """
        Summarize the portfolio

        Returns:
            PortfolioSummaryDTO: Totals, top opportunities and health
        """
        ...
