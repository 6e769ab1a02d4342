"""Token Metrics

Snapshot-derived figures shared by every context.
Missing or non-positive inputs degrade to 0 instead of raising.
"""

from libs.shared.src.dtos.token.token_snapshot_dto import TokenSnapshotDTO
from libs.shared.src.enums.conviction import Conviction


def token_value(token: TokenSnapshotDTO) -> float:
    """Current value (amount × price)"""
    return (token.get("amount") or 0) * (token.get("price") or 0)


def entry_value(token: TokenSnapshotDTO) -> float:
    """Cost basis (amount × entry price)"""
    return (token.get("amount") or 0) * (token.get("entry_price") or 0)


def portfolio_value(tokens: list[TokenSnapshotDTO]) -> float:
    """Total current value of all tokens"""
    return sum(token_value(t) for t in tokens)


def potential_multiplier(token: TokenSnapshotDTO) -> float:
    """
    Raw potential multiplier

    target market cap / market cap, 0 when either is missing

    Args:
        token: Token snapshot

    Returns:
        float: Potential multiplier
    """
    market_cap = token.get("market_cap") or 0
    target_market_cap = token.get("target_market_cap") or 0
    if market_cap <= 0 or target_market_cap <= 0:
        return 0.0
    return target_market_cap / market_cap


def progress_to_target(token: TokenSnapshotDTO) -> float:
    """market cap / target market cap, 0 when either is missing"""
    market_cap = token.get("market_cap") or 0
    target_market_cap = token.get("target_market_cap") or 0
    if market_cap <= 0 or target_market_cap <= 0:
        return 0.0
    return market_cap / target_market_cap


def pnl_ratio(token: TokenSnapshotDTO) -> float:
    """(price - entry) / entry, 0 without an entry price"""
    entry_price = token.get("entry_price") or 0
    if entry_price <= 0:
        return 0.0
    return ((token.get("price") or 0) - entry_price) / entry_price


def token_return(token: TokenSnapshotDTO) -> float:
    """(current value - entry value) / entry value"""
    cost = entry_value(token)
    if cost <= 0:
        return 0.0
    return (token_value(token) - cost) / cost


def conviction_of(token: TokenSnapshotDTO) -> Conviction:
    """Conviction label, MEDIUM when unset"""
    return token.get("conviction") or Conviction.MEDIUM
