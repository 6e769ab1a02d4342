"""Rebalance Advice DTO"""

from typing import TypedDict

from libs.shared.src.dtos.rebalancing.rebalance_candidate_dto import (
    RebalanceCandidatesDTO,
)
from libs.shared.src.dtos.rebalancing.rotation_result_dto import RotationResultDTO


class RebalanceAdviceDTO(TypedDict):
    """Heuristic candidates plus the smart rotation proposal"""

    candidates: RebalanceCandidatesDTO
    rotation: RotationResultDTO
