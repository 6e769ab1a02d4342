"""Market Data Provider Port"""

from typing import Protocol

from libs.shared.src.dtos.market.market_quote_dto import MarketQuoteDTO


class MarketDataProviderPort(Protocol):
    """Market Data Provider Port

    Latest quotes per trading pair
    """

    def get_quote(self, chain: str, pair_address: str) -> MarketQuoteDTO | None:
        """Get latest quote

        Args:
            chain: Chain identifier (e.g. "solana", "ethereum")
            pair_address: Trading pair address

        Returns:
            MarketQuoteDTO | None: Quote, None if the pair is unknown
        """
        ...
