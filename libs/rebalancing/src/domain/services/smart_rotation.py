"""Smart Rotation

Rotate from the worst underperformer into the highest potential token.
Without loss or potential data, fall back to trimming the most
overweight position into the most underweight one.
"""

from libs.shared.src.constants.rebalance_thresholds import (
    EQUAL_WEIGHT_OVERWEIGHT_FACTOR,
    EQUAL_WEIGHT_SELL_FRACTION,
    EQUAL_WEIGHT_UNDERWEIGHT_FACTOR,
    MIN_TOKENS_FOR_REBALANCE,
    ROTATION_LOSS_THRESHOLD_PCT,
    ROTATION_POTENTIAL_THRESHOLD,
    ROTATION_SELL_FRACTION,
)
from libs.shared.src.domain.services.token_metrics import (
    portfolio_value,
    potential_multiplier,
    token_value,
)
from libs.shared.src.dtos.rebalancing.rotation_result_dto import (
    RotationActionDTO,
    RotationResultDTO,
)
from libs.shared.src.dtos.token.token_snapshot_dto import TokenSnapshotDTO
from libs.shared.src.enums.rebalance_action_type import RebalanceActionType

SMART_ROTATION = "smart_rotation"


def rebalance_portfolio(
    tokens: list[TokenSnapshotDTO], strategy: str = SMART_ROTATION
) -> RotationResultDTO:
    """
    Propose a sell/buy rotation

    Args:
        tokens: Token snapshots
        strategy: Strategy label echoed in degenerate results

    Returns:
        RotationResultDTO: Paired SELL/BUY actions in USD; balanced when empty
    """
    if len(tokens) < MIN_TOKENS_FOR_REBALANCE:
        return _unchanged(strategy, 0.0, "Need at least 2 tokens to rebalance")

    total_value = portfolio_value(tokens)
    if total_value <= 0:
        return _unchanged(strategy, 0.0, "Portfolio has no value")

    underperformers = [
        t for t in tokens if loss_percentage(t) >= ROTATION_LOSS_THRESHOLD_PCT
    ]
    high_potential = [
        t for t in tokens if potential_multiplier(t) >= ROTATION_POTENTIAL_THRESHOLD
    ]

    actions: list[RotationActionDTO] = []
    if underperformers and high_potential:
        worst = max(underperformers, key=loss_percentage)
        best = max(high_potential, key=potential_multiplier)
        amount = token_value(worst) * ROTATION_SELL_FRACTION
        actions = [
            _action(
                worst,
                RebalanceActionType.SELL,
                amount,
                f"Rotate from underperformer (down {loss_percentage(worst):.1f}%)",
            ),
            _action(
                best,
                RebalanceActionType.BUY,
                amount,
                f"Rotate to high potential "
                f"({potential_multiplier(best):.1f}x potential)",
            ),
        ]
    elif not underperformers and not high_potential:
        actions = _equal_weight_actions(tokens, total_value)

    return {
        "strategy": SMART_ROTATION,
        "actions": actions,
        "total_value": total_value,
        "is_balanced": not actions,
        "summary": _summary(actions),
    }


def loss_percentage(token: TokenSnapshotDTO) -> float:
    """Percent below entry price, 0 without price data"""
    entry_price = token.get("entry_price") or 0
    price = token.get("price") or 0
    if entry_price <= 0 or price <= 0:
        return 0.0
    return (entry_price - price) / entry_price * 100


def _equal_weight_actions(
    tokens: list[TokenSnapshotDTO], total_value: float
) -> list[RotationActionDTO]:
    target_weight = 100 / len(tokens)

    def weight(token: TokenSnapshotDTO) -> float:
        return token_value(token) / total_value * 100

    overweight = [
        t for t in tokens if weight(t) > target_weight * EQUAL_WEIGHT_OVERWEIGHT_FACTOR
    ]
    underweight = [
        t for t in tokens if weight(t) < target_weight * EQUAL_WEIGHT_UNDERWEIGHT_FACTOR
    ]
    if not overweight or not underweight:
        return []

    largest = max(overweight, key=token_value)
    smallest = min(underweight, key=token_value)
    amount = token_value(largest) * EQUAL_WEIGHT_SELL_FRACTION
    return [
        _action(
            largest,
            RebalanceActionType.SELL,
            amount,
            "Rebalance from over-weighted position",
        ),
        _action(
            smallest,
            RebalanceActionType.BUY,
            amount,
            "Rebalance to under-weighted position",
        ),
    ]


def _action(
    token: TokenSnapshotDTO,
    action: RebalanceActionType,
    amount: float,
    reason: str,
) -> RotationActionDTO:
    return {
        "token": token.get("name") or "Unknown",
        "symbol": token.get("symbol") or "UNK",
        "action": action,
        "amount": amount,
        "reason": reason,
    }


def _summary(actions: list[RotationActionDTO]) -> str:
    if not actions:
        return "Portfolio is balanced - no actions needed"
    buys = sum(1 for a in actions if a["action"] == RebalanceActionType.BUY)
    sells = sum(1 for a in actions if a["action"] == RebalanceActionType.SELL)
    return f"{buys} buys, {sells} sells recommended"


def _unchanged(strategy: str, total_value: float, summary: str) -> RotationResultDTO:
    return {
        "strategy": strategy,
        "actions": [],
        "total_value": total_value,
        "is_balanced": True,
        "summary": summary,
    }
