"""Exit Stage Generator

Produces {percentage, multiplier} exit stages for a token under a strategy.
Multipliers are relative to entry price. An empty list means
"sell 100% at target".
"""

import logging
from typing import assert_never

from libs.planning.src.domain.services.stage_plan_validator import validate_stage_plan
from libs.shared.src.constants.strategy_thresholds import (
    CONSERVATIVE_STAGES,
    DYNAMIC_CONSERVATIVE_STAGES,
    DYNAMIC_LADDER_STAGES,
    DYNAMIC_MOON_OR_BUST_STAGES,
    KELLY_FRACTION_MAX,
    KELLY_FRACTION_MIN,
    KELLY_HIGH_POTENTIAL_SCALE,
    KELLY_LOW_POTENTIAL_SCALE,
    KELLY_STAGES,
    KELLY_WIN_PROBABILITY_MAX,
    KELLY_WIN_PROBABILITY_MIN,
    LADDER_STAGES,
    MOON_OR_BUST_STAGES,
    POTENTIAL_TIER_LOW_MAX,
    POTENTIAL_TIER_MEDIUM_MAX,
    PROGRESSIVE_STAGES,
)
from libs.shared.src.dtos.token.exit_stage_dto import ExitStageDTO
from libs.shared.src.dtos.token.token_snapshot_dto import TokenSnapshotDTO
from libs.shared.src.enums.exit_strategy_kind import ExitStrategyKind
from libs.shared.src.enums.potential_tier import PotentialTier
from libs.shared.src.errors.invalid_stage_plan_error import InvalidStagePlanError

logger = logging.getLogger(__name__)

_FIXED_TABLES = {
    ExitStrategyKind.LADDER: LADDER_STAGES,
    ExitStrategyKind.CONSERVATIVE: CONSERVATIVE_STAGES,
    ExitStrategyKind.MOON_OR_BUST: MOON_OR_BUST_STAGES,
}

_DYNAMIC_TABLES = {
    ExitStrategyKind.LADDER: DYNAMIC_LADDER_STAGES,
    ExitStrategyKind.CONSERVATIVE: DYNAMIC_CONSERVATIVE_STAGES,
    ExitStrategyKind.MOON_OR_BUST: DYNAMIC_MOON_OR_BUST_STAGES,
}


def generate_stages(
    token: TokenSnapshotDTO,
    strategy: ExitStrategyKind | str,
    dynamic: bool = True,
) -> list[ExitStageDTO]:
    """
    Generate exit stages for a token

    Args:
        token: Token snapshot
        strategy: Strategy kind (or its string value)
        dynamic: Scale ladder/conservative/moon stages to the token's potential;
            False uses the fixed tables

    Returns:
        list[ExitStageDTO]: Ordered stages, empty for "sell all at target"
    """
    if isinstance(strategy, str):
        try:
            strategy = ExitStrategyKind(strategy)
        except ValueError:
            logger.warning(
                f"Unknown exit strategy {strategy!r}, selling all at target"
            )
            return []

    match strategy:
        case ExitStrategyKind.TARGET_ONLY:
            return []
        case (
            ExitStrategyKind.LADDER
            | ExitStrategyKind.CONSERVATIVE
            | ExitStrategyKind.MOON_OR_BUST
        ):
            if dynamic:
                return dynamic_stages(token, strategy)
            return fixed_stages(strategy)
        case ExitStrategyKind.PROGRESSIVE:
            return progressive_stages(token)
        case ExitStrategyKind.KELLY:
            return kelly_stages(token)
        case ExitStrategyKind.AI_CUSTOM | ExitStrategyKind.USER_CUSTOM:
            return custom_stages(token)
        case _:
            assert_never(strategy)


def fixed_stages(strategy: ExitStrategyKind) -> list[ExitStageDTO]:
    """Constant stage table, independent of the token"""
    table = _FIXED_TABLES.get(strategy, ())
    return [{"percentage": pct, "multiplier": mult} for pct, mult in table]


def classify_potential(potential: float) -> PotentialTier:
    """
    Classify raw potential multiplier into a tier

    Args:
        potential: target market cap / market cap

    Returns:
        PotentialTier: LOW (< 5x), MEDIUM (5x - 20x), HIGH (>= 20x)
    """
    if potential < POTENTIAL_TIER_LOW_MAX:
        return PotentialTier.LOW
    if potential < POTENTIAL_TIER_MEDIUM_MAX:
        return PotentialTier.MEDIUM
    return PotentialTier.HIGH


def _multipliers(token: TokenSnapshotDTO) -> tuple[float, float] | None:
    """(potential multiplier, current multiplier) or None if data is missing"""
    market_cap = token.get("market_cap") or 0
    target_market_cap = token.get("target_market_cap") or 0
    entry_price = token.get("entry_price") or 0
    price = token.get("price") or 0

    if market_cap <= 0 or target_market_cap <= 0 or entry_price <= 0 or price <= 0:
        return None

    return target_market_cap / market_cap, price / entry_price


def dynamic_stages(
    token: TokenSnapshotDTO, strategy: ExitStrategyKind
) -> list[ExitStageDTO]:
    """
    Potential-scaled ladder/conservative/moon stages

    Low-potential tokens are harvested earlier and more completely;
    high-potential tokens ride longer with smaller, later sells.
    Each multiplier is min(current × factor, potential × cap).
    """
    multipliers = _multipliers(token)
    if multipliers is None or strategy not in _DYNAMIC_TABLES:
        return []

    potential, current = multipliers
    tier = classify_potential(potential)
    table = _DYNAMIC_TABLES[strategy][tier.name]

    return [
        {
            "percentage": pct,
            "multiplier": min(current * factor, potential * cap),
        }
        for pct, factor, cap in table
    ]


def progressive_stages(token: TokenSnapshotDTO) -> list[ExitStageDTO]:
    """
    Progressive realization

    Sell at 50/75/90/100% of the way to the target market cap.
    Requires price, entry price, market cap > 0 and target > market cap.
    """
    price = token.get("price") or 0
    entry_price = token.get("entry_price") or 0
    market_cap = token.get("market_cap") or 0
    target_market_cap = token.get("target_market_cap") or 0

    if price <= 0 or entry_price <= 0 or market_cap <= 0:
        return []
    if target_market_cap <= market_cap:
        return []

    stages: list[ExitStageDTO] = []
    for sell_pct, progress in PROGRESSIVE_STAGES:
        price_at_progress = price * (target_market_cap * progress) / market_cap
        stages.append(
            {"percentage": sell_pct, "multiplier": price_at_progress / entry_price}
        )
    return stages


def kelly_fraction(potential: float) -> float:
    """
    Kelly position fraction

    f = (b·p - q) / b, b = potential multiplier,
    p = win probability, shrinking as potential grows

    Args:
        potential: Potential multiplier (> 0)

    Returns:
        float: Fraction clamped to [0.1, 0.5]
    """
    b = potential
    p = min(
        KELLY_WIN_PROBABILITY_MAX,
        max(KELLY_WIN_PROBABILITY_MIN, 1 - potential / 100),
    )
    q = 1 - p

    kelly = (b * p - q) / b
    return max(KELLY_FRACTION_MIN, min(KELLY_FRACTION_MAX, kelly))


def kelly_stages(token: TokenSnapshotDTO) -> list[ExitStageDTO]:
    """
    Kelly criterion exit

    Scaled down for low potential, up for high potential,
    then split across 1-3 stages
    """
    multipliers = _multipliers(token)
    if multipliers is None:
        return []

    potential, current = multipliers
    tier = classify_potential(potential)
    fraction = kelly_fraction(potential)

    if tier == PotentialTier.LOW:
        adjusted = fraction * KELLY_LOW_POTENTIAL_SCALE
        percentages = [adjusted, 1 - adjusted]
    elif tier == PotentialTier.MEDIUM:
        percentages = [fraction, fraction, 1 - 2 * fraction]
    else:
        adjusted = min(fraction * KELLY_HIGH_POTENTIAL_SCALE, KELLY_FRACTION_MAX)
        percentages = [adjusted, adjusted, 1 - 2 * adjusted]

    stages: list[ExitStageDTO] = []
    for share, (factor, cap) in zip(percentages, KELLY_STAGES[tier.name]):
        # 1 - 2f collapses to zero at the upper clamp
        if share <= 0:
            continue
        stages.append(
            {
                "percentage": share * 100,
                "multiplier": min(current * factor, potential * cap),
            }
        )
    return stages


def custom_stages(token: TokenSnapshotDTO) -> list[ExitStageDTO]:
    """
    Caller-supplied stages, validated copies

    A malformed list is logged and treated as "sell all at target".
    """
    stages = token.get("custom_exit_stages") or []
    try:
        return validate_stage_plan(stages, require_full_allocation=False)
    except InvalidStagePlanError as e:
        logger.warning(
            f"Ignoring custom stages of {token.get('symbol')}: {e.message}"
        )
        return []
