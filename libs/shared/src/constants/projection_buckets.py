"""Cash-Flow Projection Buckets

Bucket width scales with portfolio size: (exclusive upper bound, width)
"""

PROJECTION_BUCKET_SIZES = (
    (10_000, 2_500),
    (50_000, 5_000),
    (250_000, 25_000),
    (1_000_000, 100_000),
)
PROJECTION_BUCKET_SIZE_MAX = 500_000

# Used when the portfolio has no value yet
PROJECTION_DEFAULT_TOTAL = 10_000

# Stages summing below this are completed by a remainder exit at target
PROJECTION_FULL_EXIT_PCT = 99.9
