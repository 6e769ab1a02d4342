"""Exit Strategy Thresholds

Stage tables and potential tiers used by the stage generator
"""

# Floating-point tolerance when accounting for sold amounts
AMOUNT_EPSILON = 1e-5

# Potential tier boundaries (target market cap / market cap)
POTENTIAL_TIER_LOW_MAX = 5  # Low: < 5x
POTENTIAL_TIER_MEDIUM_MAX = 20  # Medium: 5x - 20x, High: >= 20x

# Fixed stage tables: (percentage, multiplier over entry price)
LADDER_STAGES = ((25, 2), (25, 4), (25, 8), (25, 16))
CONSERVATIVE_STAGES = ((30, 3), (30, 6), (40, 10))
MOON_OR_BUST_STAGES = ((25, 5), (25, 10))  # 50% held to target

# Progressive realization: (sell percentage, progress towards target market cap)
PROGRESSIVE_STAGES = ((15, 0.50), (20, 0.75), (25, 0.90), (40, 1.00))

# Dynamic tier tables: (percentage, current multiplier factor, potential cap factor)
DYNAMIC_LADDER_STAGES = {
    "LOW": ((40, 1.5, 0.3), (35, 2, 0.6), (25, 3, 0.9)),
    "MEDIUM": ((25, 2, 0.25), (30, 4, 0.5), (25, 8, 0.75), (20, 12, 1.0)),
    "HIGH": (
        (15, 3, 0.2),
        (20, 6, 0.4),
        (25, 12, 0.6),
        (25, 20, 0.8),
        (15, 30, 1.0),
    ),
}
DYNAMIC_CONSERVATIVE_STAGES = {
    "LOW": ((50, 1.5, 0.4), (30, 2.5, 0.8), (20, 4, 1.0)),
    "MEDIUM": ((35, 2, 0.3), (35, 5, 0.6), (30, 10, 1.0)),
    "HIGH": ((25, 3, 0.2), (30, 8, 0.5), (45, 15, 1.0)),
}
DYNAMIC_MOON_OR_BUST_STAGES = {
    "LOW": ((60, 2, 0.5), (40, 4, 1.0)),
    "MEDIUM": ((30, 3, 0.3), (30, 8, 0.7)),  # 40% held for the moon
    "HIGH": ((20, 5, 0.25), (20, 12, 0.5)),  # 60% held for the moon
}

# Kelly criterion sizing
KELLY_WIN_PROBABILITY_MIN = 0.3
KELLY_WIN_PROBABILITY_MAX = 0.7
KELLY_FRACTION_MIN = 0.1
KELLY_FRACTION_MAX = 0.5
KELLY_LOW_POTENTIAL_SCALE = 0.6
KELLY_HIGH_POTENTIAL_SCALE = 1.2
# Kelly tier tables: (current multiplier factor, potential cap factor) per stage
KELLY_STAGES = {
    "LOW": ((2, 0.5), (4, 1.0)),
    "MEDIUM": ((3, 0.4), (6, 0.7), (10, 1.0)),
    "HIGH": ((5, 0.3), (10, 0.6), (20, 1.0)),
}

# Stage plans authored by a collaborator must sum to 100 within this tolerance
STAGE_PLAN_SUM_TOLERANCE = 0.5
