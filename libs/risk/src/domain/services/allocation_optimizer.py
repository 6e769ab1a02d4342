"""Allocation Optimizer

What-if allocation heuristics and the trades that reach them.
Target weights are heuristics, not a fitted mean-variance solution;
confidence and improvement figures are illustrative point estimates.
"""

import logging
from typing import assert_never

import numpy as np

from libs.risk.src.domain.services.risk_metrics_calculator import (
    compute_risk_metrics,
    current_weights,
    token_risk,
    volatility,
)
from libs.shared.src.constants.risk_settings import (
    ACTION_IMPACT_FACTOR,
    BASELINE_IMPROVEMENT,
    FOCUSED_IMPROVEMENT,
    MOMENTUM_CONFIDENCE_MAX,
    MOMENTUM_CONFIDENCE_MIN,
    PLAN_CONFIDENCE,
    REBALANCE_DIFF_THRESHOLD_PCT,
    TARGET_SHARPE_UPLIFT,
    TARGET_VOLATILITY_FACTOR,
    VOLATILITY_LOW_MAX,
    VOLATILITY_MEDIUM_MAX,
)
from libs.shared.src.domain.services.token_metrics import (
    portfolio_value,
    token_return,
)
from libs.shared.src.dtos.risk.optimization_plan_dto import (
    ExpectedImprovementDTO,
    MarketConditionsDTO,
    OptimizationPlanDTO,
    OptimizationRecommendationsDTO,
    RebalanceActionsDTO,
    TargetWeights,
    WeightActionDTO,
)
from libs.shared.src.dtos.risk.risk_metrics_dto import RiskMetricsDTO
from libs.shared.src.dtos.risk.risk_settings_dto import RiskSettingsDTO
from libs.shared.src.dtos.token.token_snapshot_dto import TokenSnapshotDTO
from libs.shared.src.enums.optimization_goal import OptimizationGoal
from libs.shared.src.enums.rebalance_action_type import RebalanceActionType
from libs.shared.src.errors.empty_portfolio_error import EmptyPortfolioError

logger = logging.getLogger(__name__)


def _symbol(token: TokenSnapshotDTO) -> str:
    return token.get("symbol") or ""


def _symbols(tokens: list[TokenSnapshotDTO]) -> list[str]:
    """Distinct symbols in portfolio order"""
    return list(dict.fromkeys(_symbol(t) for t in tokens))


def equal_weights(tokens: list[TokenSnapshotDTO]) -> TargetWeights:
    """Equal weight per symbol; repeated symbols are one position"""
    symbols = _symbols(tokens)
    if len(symbols) == 0:
        return {}
    share = 100 / len(symbols)
    return {symbol: share for symbol in symbols}


def proportional_weights(
    tokens: list[TokenSnapshotDTO], scores: list[float]
) -> TargetWeights:
    """
    Weights proportional to the positive part of each score

    Falls back to equal weight when no score is positive.

    Args:
        tokens: Token snapshots
        scores: One score per token

    Returns:
        TargetWeights: symbol -> weight in percent
    """
    positive = [max(0.0, s) for s in scores]
    total = sum(positive)
    if total <= 0:
        logger.debug("No positive scores, using equal weights")
        return equal_weights(tokens)

    weights: TargetWeights = {}
    for token, score in zip(tokens, positive):
        symbol = _symbol(token)
        weights[symbol] = weights.get(symbol, 0.0) + score / total * 100
    return weights


def momentum_scores(tokens: list[TokenSnapshotDTO]) -> list[float]:
    """24h price change as a fraction"""
    return [(t.get("percent_change_24h") or 0) / 100 for t in tokens]


def target_weights(
    tokens: list[TokenSnapshotDTO], goal: OptimizationGoal
) -> TargetWeights:
    """
    Target allocation for a goal

    - MINIMIZE_RISK, RISK_PARITY: equal weight
    - MAXIMIZE_SHARPE: ∝ return / token risk
    - MAXIMIZE_RETURN: ∝ return
    - MOMENTUM: ∝ 24h change
    """
    match goal:
        case OptimizationGoal.MINIMIZE_RISK | OptimizationGoal.RISK_PARITY:
            return equal_weights(tokens)
        case OptimizationGoal.MAXIMIZE_SHARPE:
            scores = [
                token_return(t) / (token_risk(t) or 0.1) for t in tokens
            ]
            return proportional_weights(tokens, scores)
        case OptimizationGoal.MAXIMIZE_RETURN:
            return proportional_weights(tokens, [token_return(t) for t in tokens])
        case OptimizationGoal.MOMENTUM:
            return proportional_weights(tokens, momentum_scores(tokens))
        case _:
            assert_never(goal)


def generate_rebalance_actions(
    tokens: list[TokenSnapshotDTO], weights: TargetWeights
) -> RebalanceActionsDTO:
    """
    Trades closing the gap between current and target weights

    A gap wider than the threshold (percentage points) on the downside
    becomes a SELL, on the upside a BUY. Both carry the gap in percentage
    points and in token units at the current price. Tokens sharing a
    symbol are one position and get at most one action.

    Args:
        tokens: Token snapshots
        weights: symbol -> target weight in percent

    Returns:
        RebalanceActionsDTO: Sells and buys
    """
    current = current_weights(tokens)
    total = portfolio_value(tokens)
    sells: list[WeightActionDTO] = []
    buys: list[WeightActionDTO] = []

    prices: dict[str, float] = {}
    for token in tokens:
        price = token.get("price") or 0
        if price > 0:
            prices.setdefault(_symbol(token), price)

    for symbol in _symbols(tokens):
        current_weight = current.get(symbol, 0.0)
        target_weight = weights.get(symbol, 0.0)
        difference = target_weight - current_weight
        if abs(difference) <= REBALANCE_DIFF_THRESHOLD_PCT:
            continue

        price = prices.get(symbol, 0.0)
        gap = abs(difference)
        is_sell = difference < 0
        action: WeightActionDTO = {
            "symbol": symbol,
            "action": RebalanceActionType.SELL if is_sell else RebalanceActionType.BUY,
            "current_weight": current_weight,
            "target_weight": target_weight,
            "percentage": gap,
            "amount": gap / 100 * total / price if price > 0 else 0.0,
            "reason": (
                f"{'Reduce' if is_sell else 'Increase'} allocation from "
                f"{current_weight:.1f}% to {target_weight:.1f}%"
            ),
            "impact": gap * ACTION_IMPACT_FACTOR,
        }
        (sells if is_sell else buys).append(action)

    return {"sells": sells, "buys": buys}


def project_target_metrics(current: RiskMetricsDTO) -> RiskMetricsDTO:
    """Current metrics with a uniform Sharpe uplift and volatility cut"""
    return {
        **current,
        "sharpe_ratio": current["sharpe_ratio"] * TARGET_SHARPE_UPLIFT,
        "volatility": current["volatility"] * TARGET_VOLATILITY_FACTOR,
    }


def expected_improvement(goal: OptimizationGoal) -> ExpectedImprovementDTO:
    focus = {
        OptimizationGoal.MAXIMIZE_RETURN: "return_increase",
        OptimizationGoal.MINIMIZE_RISK: "risk_reduction",
        OptimizationGoal.MAXIMIZE_SHARPE: "sharpe_improvement",
    }.get(goal)
    return {
        key: FOCUSED_IMPROVEMENT[key] if key == focus else BASELINE_IMPROVEMENT[key]
        for key in BASELINE_IMPROVEMENT
    }


def market_conditions(vol: float) -> MarketConditionsDTO:
    """Volatility band; trend and sentiment have no snapshot signal"""
    if vol < VOLATILITY_LOW_MAX:
        band = "low"
    elif vol < VOLATILITY_MEDIUM_MAX:
        band = "medium"
    else:
        band = "high"
    return {"volatility": band, "trend": "sideways", "sentiment": "neutral"}


def plan_confidence(tokens: list[TokenSnapshotDTO], goal: OptimizationGoal) -> float:
    """
    Fixed confidence per goal

    Momentum confidence grows with strong, consistent 24h moves:
    clamp(mean × 2 - stdev, 0.3, 0.9).
    """
    if goal is not OptimizationGoal.MOMENTUM:
        return PLAN_CONFIDENCE[goal.value]
    scores = momentum_scores(tokens)
    if len(scores) == 0:
        return MOMENTUM_CONFIDENCE_MIN
    raw = float(np.mean(scores)) * 2 - volatility(scores)
    return min(MOMENTUM_CONFIDENCE_MAX, max(MOMENTUM_CONFIDENCE_MIN, raw))


def optimize_allocation(
    tokens: list[TokenSnapshotDTO],
    goal: OptimizationGoal,
    settings: RiskSettingsDTO,
) -> OptimizationPlanDTO:
    """
    What-if plan for one goal

    Args:
        tokens: Token snapshots
        goal: Allocation goal
        settings: Risk settings for the metrics

    Returns:
        OptimizationPlanDTO: Target weights, actions and heuristic estimates
    """
    current = compute_risk_metrics(tokens, settings)
    weights = target_weights(tokens, goal)
    return {
        "goal": goal,
        "target_weights": weights,
        "current_metrics": current,
        "target_metrics": project_target_metrics(current),
        "rebalance_actions": generate_rebalance_actions(tokens, weights),
        "expected_improvement": expected_improvement(goal),
        "confidence": plan_confidence(tokens, goal),
        "market_conditions": market_conditions(current["volatility"]),
    }


def get_optimization_recommendations(
    tokens: list[TokenSnapshotDTO], settings: RiskSettingsDTO
) -> OptimizationRecommendationsDTO:
    """
    Conservative, balanced, aggressive and risk-parity plans

    Raises:
        EmptyPortfolioError: No tokens
    """
    if len(tokens) == 0:
        raise EmptyPortfolioError("optimization")

    return {
        "conservative": optimize_allocation(
            tokens, OptimizationGoal.MINIMIZE_RISK, settings
        ),
        "balanced": optimize_allocation(
            tokens, OptimizationGoal.MAXIMIZE_SHARPE, settings
        ),
        "aggressive": optimize_allocation(
            tokens, OptimizationGoal.MAXIMIZE_RETURN, settings
        ),
        "risk_parity": optimize_allocation(
            tokens, OptimizationGoal.RISK_PARITY, settings
        ),
    }
