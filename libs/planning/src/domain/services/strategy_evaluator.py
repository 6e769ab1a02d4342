"""Exit Strategy Evaluator

Computes the realized value of selling a position in stages.

totalExitValue = Σ amount × pct_i × min(entry × mult_i, target_price)
               + remaining × target_price
"""

from libs.shared.src.constants.strategy_thresholds import AMOUNT_EPSILON
from libs.shared.src.dtos.strategy.strategy_result_dto import (
    StageResultDTO,
    StrategyResultDTO,
)
from libs.shared.src.dtos.token.exit_stage_dto import ExitStageDTO
from libs.shared.src.dtos.token.token_snapshot_dto import TokenSnapshotDTO


def evaluate_strategy(
    token: TokenSnapshotDTO | None,
    stages: list[ExitStageDTO] | None = None,
) -> StrategyResultDTO:
    """
    Evaluate an exit strategy for one token

    Without stages the whole position is sold at the target price.
    Stage prices above the target price are capped at it and the
    reported multiplier is rewritten to target_price / entry_price.
    Whatever the stages leave unsold (remaining_amount) is sold at the
    target price and folded into total_exit_value (not reported as a stage).

    Args:
        token: Token snapshot
        stages: Exit stages, in execution order

    Returns:
        StrategyResultDTO: Exit values; degraded (value = current value,
            growth multiplier 1) when market cap, target or entry price is missing
    """
    token = token or {}
    amount = token.get("amount") or 0
    price = token.get("price") or 0
    entry_price = token.get("entry_price") or 0
    market_cap = token.get("market_cap") or 0
    target_market_cap = token.get("target_market_cap") or 0

    current_value = amount * price
    initial_investment = amount * entry_price

    if market_cap <= 0 or target_market_cap <= 0 or entry_price <= 0:
        return _result(
            current_value=current_value,
            target_price=price,
            growth_multiplier=1,
            total_exit_value=current_value,
            initial_investment=initial_investment,
            remaining_amount=amount,
        )

    growth_multiplier = target_market_cap / market_cap
    target_price = price * growth_multiplier

    if not stages:
        return _result(
            current_value=current_value,
            target_price=target_price,
            growth_multiplier=growth_multiplier,
            total_exit_value=amount * target_price,
            initial_investment=initial_investment,
            remaining_amount=amount,
        )

    total_exit_value = 0.0
    remaining_amount = amount
    profit_stages: list[StageResultDTO] = []

    for stage in stages:
        multiplier = stage["multiplier"]
        stage_price = entry_price * multiplier
        if stage_price > target_price:
            stage_price = target_price
            multiplier = target_price / entry_price

        amount_to_sell = amount * (stage["percentage"] / 100)
        # Never sell more than is left
        if remaining_amount - amount_to_sell < -AMOUNT_EPSILON:
            continue

        remaining_amount -= amount_to_sell
        value = amount_to_sell * stage_price
        total_exit_value += value

        profit_stages.append(
            {
                "percentage": stage["percentage"],
                "multiplier": multiplier,
                "amount": amount_to_sell,
                "price": stage_price,
                "value": value,
            }
        )

    if remaining_amount > AMOUNT_EPSILON:
        total_exit_value += remaining_amount * target_price

    result = _result(
        current_value=current_value,
        target_price=target_price,
        growth_multiplier=growth_multiplier,
        total_exit_value=total_exit_value,
        initial_investment=initial_investment,
        remaining_amount=remaining_amount,
    )
    result["profit_stages"] = profit_stages
    return result


def _result(
    current_value: float,
    target_price: float,
    growth_multiplier: float,
    total_exit_value: float,
    initial_investment: float,
    remaining_amount: float,
) -> StrategyResultDTO:
    profit = total_exit_value - initial_investment
    profit_percentage = (
        profit / initial_investment * 100 if initial_investment > 0 else 0.0
    )
    return {
        "current_value": current_value,
        "target_price": target_price,
        "growth_multiplier": growth_multiplier,
        "total_exit_value": total_exit_value,
        "profit": profit,
        "profit_percentage": profit_percentage,
        "remaining_amount": remaining_amount,
    }


def empty_result() -> StrategyResultDTO:
    """All-zero result for a missing token"""
    return {
        "current_value": 0.0,
        "target_price": 0.0,
        "growth_multiplier": 0.0,
        "total_exit_value": 0.0,
        "profit": 0.0,
        "profit_percentage": 0.0,
        "remaining_amount": 0.0,
    }
