import pytest

from libs.shared.src.enums.conviction import Conviction
from libs.shared.src.enums.exit_strategy_kind import ExitStrategyKind


@pytest.fixture
def make_token():
    """Token snapshot factory with sensible defaults"""

    def _make(**overrides):
        token = {
            "id": overrides.get("symbol", "MOCK"),
            "symbol": "MOCK",
            "name": "Mock Token",
            "chain": "solana",
            "pair_address": "0xmock",
            "amount": 100,
            "price": 1,
            "entry_price": 1,
            "market_cap": 1_000_000,
            "target_market_cap": 10_000_000,
            "exit_strategy": ExitStrategyKind.TARGET_ONLY,
            "conviction": Conviction.MEDIUM,
            "custom_exit_stages": [],
            "image_url": None,
            "percent_change_24h": 0,
        }
        token.update(overrides)
        return token

    return _make


@pytest.fixture
def base_token(make_token):
    """entry $1, price $2, market cap $2M → $40M (target price $40)"""
    return make_token(
        amount=100,
        price=2,
        entry_price=1,
        market_cap=2_000_000,
        target_market_cap=40_000_000,
    )


@pytest.fixture
def holding(make_token):
    """Token worth `value` with a given pnl ratio, potential and conviction"""

    def _make(
        symbol,
        value=100.0,
        pnl=0.5,
        potential=10.0,
        conviction=Conviction.MEDIUM,
        **overrides,
    ):
        fields = {
            "symbol": symbol,
            "amount": value,
            "price": 1.0,
            "entry_price": 1.0 / (1 + pnl),
            "market_cap": 1_000_000,
            "target_market_cap": 1_000_000 * potential,
            "conviction": conviction,
        }
        fields.update(overrides)
        return make_token(**fields)

    return _make
