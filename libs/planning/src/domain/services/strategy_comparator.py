"""Strategy Comparator

Selected exit strategy vs. the "sell 100% at target" benchmark
"""

from libs.planning.src.domain.services.stage_generator import generate_stages
from libs.planning.src.domain.services.strategy_evaluator import (
    empty_result,
    evaluate_strategy,
)
from libs.shared.src.dtos.strategy.strategy_comparison_dto import (
    StrategyComparisonDTO,
)
from libs.shared.src.dtos.strategy.strategy_result_dto import StrategyResultDTO
from libs.shared.src.dtos.token.token_snapshot_dto import TokenSnapshotDTO
from libs.shared.src.enums.exit_strategy_kind import ExitStrategyKind
from libs.shared.src.enums.strategy_winner import StrategyWinner


def compare_strategies(
    token: TokenSnapshotDTO | None, dynamic: bool = True
) -> StrategyComparisonDTO:
    """
    Compare the token's selected strategy against selling all at target

    Ties favour the selected strategy. A missing token yields an
    all-zero comparison won by ALL_AT_ONCE.

    Args:
        token: Token snapshot
        dynamic: Use potential-scaled stage tables

    Returns:
        StrategyComparisonDTO: selected, benchmark, winner and their difference
    """
    if not token:
        return {
            "selected": empty_result(),
            "benchmark": empty_result(),
            "winner": StrategyWinner.ALL_AT_ONCE,
            "difference": 0.0,
            "difference_percentage": 0.0,
        }

    selected = selected_strategy(token, dynamic=dynamic)
    benchmark = evaluate_strategy(token)

    if selected["total_exit_value"] >= benchmark["total_exit_value"]:
        winner = StrategyWinner.SELECTED
    else:
        winner = StrategyWinner.ALL_AT_ONCE

    difference = abs(selected["total_exit_value"] - benchmark["total_exit_value"])
    difference_percentage = (
        difference / benchmark["total_exit_value"] * 100
        if benchmark["total_exit_value"] > 0
        else 0.0
    )

    return {
        "selected": selected,
        "benchmark": benchmark,
        "winner": winner,
        "difference": difference,
        "difference_percentage": difference_percentage,
    }


def selected_strategy(
    token: TokenSnapshotDTO, dynamic: bool = True
) -> StrategyResultDTO:
    """Evaluate the token under its own exit strategy"""
    strategy = token.get("exit_strategy") or ExitStrategyKind.TARGET_ONLY
    stages = generate_stages(token, strategy, dynamic=dynamic)
    return evaluate_strategy(token, stages)
