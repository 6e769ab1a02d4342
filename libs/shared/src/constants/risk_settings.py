"""Risk Analytics Defaults

Heuristic point estimates, not statistically fitted
"""

RISK_FREE_RATE = 0.02  # 2% annual
MARKET_RETURN = 0.10
DEFAULT_BETA = 1.0
TRACKING_ERROR = 0.15
ANNUALIZATION_FACTOR = 252
VAR_CONFIDENCE = 0.95

# Rebalance actions are emitted for weight gaps above this (percentage points)
REBALANCE_DIFF_THRESHOLD_PCT = 1.0
ACTION_IMPACT_FACTOR = 0.1

# Token risk proxy: market cap floor and conviction risk
MARKET_CAP_RISK_REFERENCE = 1_000_000_000
CONVICTION_RISK = {
    "LOW": 0.3,
    "MEDIUM": 0.2,
    "HIGH": 0.1,
}

# Market condition volatility bands
VOLATILITY_LOW_MAX = 0.1
VOLATILITY_MEDIUM_MAX = 0.3

PLAN_CONFIDENCE = {
    "minimize_risk": 0.85,
    "maximize_sharpe": 0.8,
    "maximize_return": 0.7,
    "risk_parity": 0.85,
}
MOMENTUM_CONFIDENCE_MIN = 0.3
MOMENTUM_CONFIDENCE_MAX = 0.9

# What-if projection applied to the current metrics
TARGET_SHARPE_UPLIFT = 1.1
TARGET_VOLATILITY_FACTOR = 0.95

# Improvement figure for the metric a goal targets, baseline for the others
FOCUSED_IMPROVEMENT = {
    "return_increase": 0.15,
    "risk_reduction": 0.20,
    "sharpe_improvement": 0.25,
}
BASELINE_IMPROVEMENT = {
    "return_increase": 0.05,
    "risk_reduction": 0.10,
    "sharpe_improvement": 0.15,
}
