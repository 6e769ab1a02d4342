"""Optimization Plan DTO"""

from typing import TypedDict

from libs.shared.src.dtos.risk.risk_metrics_dto import RiskMetricsDTO
from libs.shared.src.enums.optimization_goal import OptimizationGoal
from libs.shared.src.enums.rebalance_action_type import RebalanceActionType

# symbol -> weight in percent (sums to 100)
TargetWeights = dict[str, float]


class WeightActionDTO(TypedDict):
    """Trade closing the gap between current and target weight

    SELL: percentage = percentage points of the portfolio to sell
    BUY: amount = token units to buy
    """

    symbol: str
    action: RebalanceActionType
    current_weight: float
    target_weight: float
    percentage: float
    amount: float
    reason: str
    impact: float


class RebalanceActionsDTO(TypedDict):
    """Rebalance Actions"""

    sells: list[WeightActionDTO]
    buys: list[WeightActionDTO]


class ExpectedImprovementDTO(TypedDict):
    """Heuristic point estimates"""

    return_increase: float
    risk_reduction: float
    sharpe_improvement: float


class MarketConditionsDTO(TypedDict):
    """Market Conditions"""

    volatility: str
    trend: str
    sentiment: str


class OptimizationPlanDTO(TypedDict):
    """What-if allocation plan"""

    goal: OptimizationGoal
    target_weights: TargetWeights
    current_metrics: RiskMetricsDTO
    target_metrics: RiskMetricsDTO
    rebalance_actions: RebalanceActionsDTO
    expected_improvement: ExpectedImprovementDTO
    confidence: float
    market_conditions: MarketConditionsDTO


class OptimizationRecommendationsDTO(TypedDict):
    """Named allocation plans"""

    conservative: OptimizationPlanDTO
    balanced: OptimizationPlanDTO
    aggressive: OptimizationPlanDTO
    risk_parity: OptimizationPlanDTO
