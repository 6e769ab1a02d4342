"""Get Cash-Flow Projection Driving Port"""

from typing import Protocol

from libs.shared.src.dtos.portfolio.projected_exit_dto import CashFlowProjectionDTO
from libs.shared.src.dtos.token.token_snapshot_dto import TokenSnapshotDTO


class GetCashFlowProjectionPort(Protocol):
    """Get cash-flow projection

    CLI Entry: exit-planner projection
    """

    def execute(self, tokens: list[TokenSnapshotDTO]) -> CashFlowProjectionDTO:
        """
        Project exit cash flows

        Returns:
            CashFlowProjectionDTO: Projected exits and their buckets
        """
        ...
