"""Rebalance Candidate DTO"""

from typing import TypedDict

from libs.shared.src.dtos.token.token_snapshot_dto import TokenSnapshotDTO
from libs.shared.src.enums.conviction import Conviction


class RebalanceCandidateDTO(TypedDict):
    """Token statistics used to rank rebalance candidates"""

    token: TokenSnapshotDTO
    symbol: str
    value: float
    portfolio_weight: float
    progress: float
    pnl_ratio: float
    potential_multiplier: float
    conviction: Conviction
    score: float


class RebalanceCandidatesDTO(TypedDict):
    """Sell buckets (a token appears in at most one) and a buy candidate"""

    profit_candidates: list[RebalanceCandidateDTO]
    risk_candidates: list[RebalanceCandidateDTO]
    underperform_candidates: list[RebalanceCandidateDTO]
    buy_candidate: RebalanceCandidateDTO | None
