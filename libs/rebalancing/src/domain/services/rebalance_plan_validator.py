"""Rebalance Plan Validator

Checks AI-authored sell/buy plans against the portfolio they target
"""

import math
from typing import Any

from libs.shared.src.constants.rebalance_thresholds import MAX_CANDIDATES_PER_BUCKET
from libs.shared.src.dtos.rebalancing.ai_rebalance_plan_dto import (
    AiRebalancePlanDTO,
    PlannedBuyDTO,
    PlannedSellDTO,
)
from libs.shared.src.dtos.token.token_snapshot_dto import TokenSnapshotDTO
from libs.shared.src.errors.invalid_rebalance_plan_error import (
    InvalidRebalancePlanError,
)


def validate_rebalance_plan(
    raw_plan: Any, tokens: list[TokenSnapshotDTO]
) -> AiRebalancePlanDTO:
    """
    Validate and normalize a rebalance plan

    Args:
        raw_plan: Plan as returned by the collaborator
        tokens: Portfolio the plan was authored for

    Returns:
        AiRebalancePlanDTO: Plan with float percentages

    Raises:
        InvalidRebalancePlanError: Missing sells or rationale, more than three
            sells, unknown or repeated symbols, or percentages outside (0, 100]
    """
    if not isinstance(raw_plan, dict):
        raise InvalidRebalancePlanError("plan is not an object")

    raw_sells = raw_plan.get("sells")
    if not isinstance(raw_sells, list):
        raise InvalidRebalancePlanError("'sells' must be a list")
    if len(raw_sells) > MAX_CANDIDATES_PER_BUCKET:
        raise InvalidRebalancePlanError(
            f"{len(raw_sells)} sells, at most {MAX_CANDIDATES_PER_BUCKET} allowed"
        )

    rationale = raw_plan.get("rationale")
    if not isinstance(rationale, str) or not rationale.strip():
        raise InvalidRebalancePlanError("'rationale' is missing")

    symbols = {t.get("symbol") for t in tokens if t.get("symbol")}
    sells = [_sell(raw, index, symbols) for index, raw in enumerate(raw_sells)]

    sold = [s["symbol"] for s in sells]
    if len(set(sold)) != len(sold):
        raise InvalidRebalancePlanError("a token is sold more than once")

    buy = _buy(raw_plan.get("buy"), symbols)
    if buy is not None and buy["symbol"] in sold:
        raise InvalidRebalancePlanError(f"{buy['symbol']} is both sold and bought")

    return {"sells": sells, "buy": buy, "rationale": rationale.strip()}


def _sell(raw: Any, index: int, symbols: set[str]) -> PlannedSellDTO:
    if not isinstance(raw, dict):
        raise InvalidRebalancePlanError(f"sell {index} is not an object")

    symbol = raw.get("symbol")
    if symbol not in symbols:
        raise InvalidRebalancePlanError(f"sell {index} symbol {symbol!r} not held")

    percentage = raw.get("percentage")
    if isinstance(percentage, bool) or not isinstance(percentage, (int, float)):
        raise InvalidRebalancePlanError(f"sell {index} percentage is not numeric")
    if not math.isfinite(percentage) or percentage <= 0 or percentage > 100:
        raise InvalidRebalancePlanError(
            f"sell {index} percentage {percentage} is outside (0, 100]"
        )

    sell: PlannedSellDTO = {"symbol": symbol, "percentage": float(percentage)}
    if isinstance(raw.get("rationale"), str):
        sell["rationale"] = raw["rationale"]
    return sell


def _buy(raw: Any, symbols: set[str]) -> PlannedBuyDTO | None:
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise InvalidRebalancePlanError("'buy' is not an object")
    # An empty buy object means "hold the proceeds"
    if not raw.get("symbol"):
        return None
    if raw["symbol"] not in symbols:
        raise InvalidRebalancePlanError(f"buy symbol {raw['symbol']!r} not held")

    buy: PlannedBuyDTO = {"symbol": raw["symbol"]}
    if isinstance(raw.get("rationale"), str):
        buy["rationale"] = raw["rationale"]
    return buy
