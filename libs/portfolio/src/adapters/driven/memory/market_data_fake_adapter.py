"""Market Data Fake Adapter

Canned quotes keyed by pair address, for tests
"""

from libs.portfolio.src.ports.market_data_provider_port import MarketDataProviderPort
from libs.shared.src.dtos.market.market_quote_dto import MarketQuoteDTO


class MarketDataFakeAdapter(MarketDataProviderPort):
    """Market Data Fake Adapter"""

    def __init__(self) -> None:
        self._quotes: dict[str, MarketQuoteDTO] = {}
        self._failing: set[str] = set()

    def set_quote(self, pair_address: str, quote: MarketQuoteDTO) -> None:
        self._quotes[pair_address.lower()] = quote

    def set_failing(self, pair_address: str) -> None:
        """Make lookups for a pair raise (test use)"""
        self._failing.add(pair_address.lower())

    def get_quote(self, chain: str, pair_address: str) -> MarketQuoteDTO | None:
        key = pair_address.lower()
        if key in self._failing:
            raise ConnectionError(f"quote lookup failed for {pair_address}")
        return self._quotes.get(key)
