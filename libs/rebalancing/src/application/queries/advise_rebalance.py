"""Advise Rebalance Query

Implements AdviseRebalancePort Driving Port
"""

import logging

from injector import inject

from libs.rebalancing.src.domain.services.rebalance_advisor import advise_rebalance
from libs.rebalancing.src.domain.services.smart_rotation import rebalance_portfolio
from libs.rebalancing.src.ports.advise_rebalance_port import AdviseRebalancePort
from libs.shared.src.dtos.rebalancing.rebalance_advice_dto import RebalanceAdviceDTO
from libs.shared.src.dtos.token.token_snapshot_dto import TokenSnapshotDTO


class AdviseRebalanceQuery(AdviseRebalancePort):
    """Rebalance candidates plus a smart rotation proposal"""

    @inject
    def __init__(self) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)

    def execute(self, tokens: list[TokenSnapshotDTO]) -> RebalanceAdviceDTO:
        candidates = advise_rebalance(tokens)
        rotation = rebalance_portfolio(tokens)

        sell_count = (
            len(candidates["profit_candidates"])
            + len(candidates["risk_candidates"])
            + len(candidates["underperform_candidates"])
        )
        self._logger.info(
            f"{sell_count} sell candidates, rotation: {rotation['summary']}"
        )

        return {"candidates": candidates, "rotation": rotation}
