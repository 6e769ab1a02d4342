"""Projected Exit DTO"""

from typing import TypedDict


class ProjectedExitDTO(TypedDict):
    """Cash realized when one token reaches one exit stage

    projected_portfolio_value holds every other token's price constant
    """

    projected_portfolio_value: float
    cash_out_value: float
    token_symbol: str
    token_image_url: str | None


class BucketTokenDTO(TypedDict):
    """Token contribution to a projection bucket"""

    symbol: str
    value: float
    image_url: str | None


class ProjectionBucketDTO(TypedDict):
    """Cash out grouped by projected portfolio value"""

    portfolio_value: float
    label: str
    total_cash_out: float
    tokens: list[BucketTokenDTO]


class CashFlowProjectionDTO(TypedDict):
    """Projected exits with their histogram buckets"""

    portfolio_total: float
    bucket_size: float
    projected_exits: list[ProjectedExitDTO]
    buckets: list[ProjectionBucketDTO]
