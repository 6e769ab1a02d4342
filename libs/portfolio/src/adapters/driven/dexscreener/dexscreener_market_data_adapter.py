"""DexScreener Market Data Adapter

Latest pair quotes from the public DexScreener API
Implements MarketDataProviderPort
"""

import logging

import requests

from libs.portfolio.src.ports.market_data_provider_port import MarketDataProviderPort
from libs.shared.src.dtos.market.market_quote_dto import MarketQuoteDTO

DEXSCREENER_PAIRS_URL = "https://api.dexscreener.com/latest/dex/pairs/{chain}/{pair}"


class DexScreenerMarketDataAdapter(MarketDataProviderPort):
    """DexScreener quotes (fdv is used as market cap)"""

    def __init__(self, timeout: float = 10.0) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)
        self._timeout = timeout

    def get_quote(self, chain: str, pair_address: str) -> MarketQuoteDTO | None:
        url = DEXSCREENER_PAIRS_URL.format(chain=chain, pair=pair_address.lower())
        response = requests.get(url, timeout=self._timeout)
        response.raise_for_status()

        pairs = response.json().get("pairs") or []
        for pair in pairs:
            if (pair.get("pairAddress") or "").lower() == pair_address.lower():
                return self._to_quote(pair)

        self._logger.debug(f"No DexScreener pair {chain}/{pair_address}")
        return None

    @staticmethod
    def _to_quote(pair: dict) -> MarketQuoteDTO:
        return {
            "price": float(pair.get("priceUsd") or 0),
            "market_cap": float(pair.get("fdv") or 0),
            "percent_change_24h": float((pair.get("priceChange") or {}).get("h24") or 0),
            "image_url": (pair.get("info") or {}).get("imageUrl") or None,
        }
