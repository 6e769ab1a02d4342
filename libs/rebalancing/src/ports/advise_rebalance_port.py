"""Advise Rebalance Driving Port"""

from typing import Protocol

from libs.shared.src.dtos.rebalancing.rebalance_advice_dto import RebalanceAdviceDTO
from libs.shared.src.dtos.token.token_snapshot_dto import TokenSnapshotDTO


class AdviseRebalancePort(Protocol):
    """Heuristic rebalance advice

    CLI Entry: exit-planner rebalance
    """

    def execute(self, tokens: list[TokenSnapshotDTO]) -> RebalanceAdviceDTO:
        """
        Advise a rebalance

        Returns:
            RebalanceAdviceDTO: Candidates and the smart rotation proposal
        """
        ...
