"""Smart Rotation DTO"""

from typing import TypedDict

from libs.shared.src.enums.rebalance_action_type import RebalanceActionType


class RotationActionDTO(TypedDict):
    """One leg of a rotation, amount in USD"""

    token: str
    symbol: str
    action: RebalanceActionType
    amount: float
    reason: str


class RotationResultDTO(TypedDict):
    """Smart rotation result"""

    strategy: str
    actions: list[RotationActionDTO]
    total_value: float
    is_balanced: bool
    summary: str
