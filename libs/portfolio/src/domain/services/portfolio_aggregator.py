"""Portfolio Aggregator

Portfolio totals under each token's selected exit strategy
"""

from libs.planning.src.domain.services.strategy_comparator import compare_strategies
from libs.shared.src.domain.services.token_metrics import (
    portfolio_value,
    potential_multiplier,
)
from libs.shared.src.dtos.portfolio.portfolio_totals_dto import PortfolioTotalsDTO
from libs.shared.src.dtos.token.token_snapshot_dto import TokenSnapshotDTO


def aggregate_portfolio(tokens: list[TokenSnapshotDTO]) -> PortfolioTotalsDTO:
    """
    Aggregate current and target portfolio value

    target sums each token's selected-strategy exit value, not the naive
    market cap ratio. highest_potential_token is tracked independently
    of strategy choice.

    Args:
        tokens: Token snapshots (may be empty)

    Returns:
        PortfolioTotalsDTO: total, target, growth and the highest potential token
    """
    total = portfolio_value(tokens)
    target = 0.0
    highest_potential_token: TokenSnapshotDTO | None = None
    highest_potential = 0.0

    for token in tokens:
        target += compare_strategies(token)["selected"]["total_exit_value"]

        potential = potential_multiplier(token)
        if potential > highest_potential:
            highest_potential = potential
            highest_potential_token = token

    growth_multiplier = target / total if total > 0 else 0.0
    growth_percentage = (growth_multiplier - 1) * 100 if total > 0 else 0.0

    return {
        "total": total,
        "target": target,
        "growth_multiplier": growth_multiplier,
        "growth_percentage": growth_percentage,
        "highest_potential_token": highest_potential_token,
    }
