"""Rebalance Thresholds

Conviction-weighted thresholds for rebalance candidate selection
"""

# Tokens worth less than this are ignored as noise
MIN_TOKEN_VALUE = 1.0
MIN_TOKENS_FOR_REBALANCE = 2
MAX_CANDIDATES_PER_BUCKET = 3

# Profit taking: progress (market cap / target) at which a position is harvested
PROFIT_TAKING_THRESHOLDS = {
    "LOW": 0.80,
    "MEDIUM": 0.90,
    "HIGH": 0.95,
}

# Risk: single-token share of the portfolio
CONCENTRATION_WEIGHT_THRESHOLD = 0.40

# Underperformance: losers held with low conviction are flagged harder
UNDERPERFORM_SELL_WEIGHTS = {
    "LOW": 1.5,
    "MEDIUM": 1.0,
    "HIGH": 0.5,
}

BUY_CONVICTION_WEIGHTS = {
    "LOW": 0.7,
    "MEDIUM": 1.0,
    "HIGH": 1.5,
}

# Smart rotation
ROTATION_LOSS_THRESHOLD_PCT = 25.0  # Down 25% or more from entry
ROTATION_POTENTIAL_THRESHOLD = 3.0  # 3x+ potential
ROTATION_SELL_FRACTION = 0.5
EQUAL_WEIGHT_OVERWEIGHT_FACTOR = 1.5
EQUAL_WEIGHT_UNDERWEIGHT_FACTOR = 0.5
EQUAL_WEIGHT_SELL_FRACTION = 0.3

# Portfolio health
HEALTH_SINGLE_TOKEN_PENALTY = 30
HEALTH_MISSING_ENTRY_PENALTY = 20
HEALTH_CONCENTRATION_PENALTY = 15
HEALTH_MAX_WEIGHT_PCT = 60.0
