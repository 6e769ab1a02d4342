"""Cash-Flow Projection Engine

When does each exit stage pay out, in terms of total portfolio value?

projected_total(exit_price) = portfolio_total - token_value + amount × exit_price

Every other token's price is held constant, so projections isolate one
token's move at a time.
"""

import math

from libs.planning.src.domain.services.strategy_comparator import selected_strategy
from libs.shared.src.constants.projection_buckets import (
    PROJECTION_BUCKET_SIZE_MAX,
    PROJECTION_BUCKET_SIZES,
    PROJECTION_DEFAULT_TOTAL,
    PROJECTION_FULL_EXIT_PCT,
)
from libs.shared.src.domain.services.token_metrics import portfolio_value
from libs.shared.src.dtos.portfolio.projected_exit_dto import (
    ProjectedExitDTO,
    ProjectionBucketDTO,
)
from libs.shared.src.dtos.token.token_snapshot_dto import TokenSnapshotDTO

_COMPACT_SUFFIXES = ((1e12, "T"), (1e9, "B"), (1e6, "M"), (1e3, "K"))


def project_cash_flow(tokens: list[TokenSnapshotDTO]) -> list[ProjectedExitDTO]:
    """
    Projected exit events for every token

    Args:
        tokens: Token snapshots (may be empty)

    Returns:
        list[ProjectedExitDTO]: Events sorted ascending by projected portfolio value
    """
    portfolio_total = portfolio_value(tokens)
    exits: list[ProjectedExitDTO] = []

    for token in tokens:
        price = token.get("price") or 0
        amount = token.get("amount") or 0
        if price <= 0 or amount <= 0:
            continue

        strategy = selected_strategy(token)
        target_price = strategy["target_price"]

        stages = strategy.get("profit_stages") or []
        if stages:
            sold_pct = 0.0
            for stage in stages:
                if stage["price"] > price:
                    exits.append(
                        _projected_exit(
                            token, portfolio_total, stage["price"], stage["percentage"]
                        )
                    )
                    sold_pct += stage["percentage"]

            if sold_pct < PROJECTION_FULL_EXIT_PCT and target_price > price:
                if target_price > stages[-1]["price"]:
                    exits.append(
                        _projected_exit(
                            token, portfolio_total, target_price, 100 - sold_pct
                        )
                    )
        elif target_price > price:
            exits.append(_projected_exit(token, portfolio_total, target_price, 100))

    exits.sort(key=lambda e: e["projected_portfolio_value"])
    return exits


def get_bucket_size(portfolio_total: float) -> float:
    """Histogram bucket width, scaled to portfolio size"""
    total = portfolio_total or PROJECTION_DEFAULT_TOTAL
    for upper_bound, size in PROJECTION_BUCKET_SIZES:
        if total < upper_bound:
            return size
    return PROJECTION_BUCKET_SIZE_MAX


def bucket_projected_exits(
    exits: list[ProjectedExitDTO], portfolio_total: float
) -> list[ProjectionBucketDTO]:
    """
    Group projected exits into adaptive-width portfolio value buckets

    Args:
        exits: Projected exit events
        portfolio_total: Current portfolio value (selects the bucket width)

    Returns:
        list[ProjectionBucketDTO]: Buckets ascending by floor, contributors
            descending by cash out
    """
    bucket_size = get_bucket_size(portfolio_total)
    buckets: dict[float, ProjectionBucketDTO] = {}

    for exit_ in exits:
        floor = math.floor(exit_["projected_portfolio_value"] / bucket_size) * bucket_size
        bucket = buckets.get(floor)
        if bucket is None:
            bucket = {
                "portfolio_value": floor,
                "label": f"~{format_compact_currency(floor)}",
                "total_cash_out": 0.0,
                "tokens": [],
            }
            buckets[floor] = bucket

        bucket["total_cash_out"] += exit_["cash_out_value"]
        bucket["tokens"].append(
            {
                "symbol": exit_["token_symbol"],
                "value": exit_["cash_out_value"],
                "image_url": exit_["token_image_url"],
            }
        )

    for bucket in buckets.values():
        bucket["tokens"].sort(key=lambda t: t["value"], reverse=True)

    return sorted(buckets.values(), key=lambda b: b["portfolio_value"])


def format_compact_currency(value: float) -> str:
    """$12.50K style label"""
    sign = "-" if value < 0 else ""
    magnitude = abs(value)
    for threshold, suffix in _COMPACT_SUFFIXES:
        if magnitude >= threshold:
            return f"{sign}${magnitude / threshold:.2f}{suffix}"
    return f"{sign}${magnitude:.2f}"


def _projected_exit(
    token: TokenSnapshotDTO,
    portfolio_total: float,
    exit_price: float,
    share_pct: float,
) -> ProjectedExitDTO:
    amount = token.get("amount") or 0
    token_current_value = amount * (token.get("price") or 0)
    return {
        "projected_portfolio_value": portfolio_total
        - token_current_value
        + amount * exit_price,
        "cash_out_value": amount * share_pct / 100 * exit_price,
        "token_symbol": token.get("symbol", ""),
        "token_image_url": token.get("image_url"),
    }
