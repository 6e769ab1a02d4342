"""Market Quote DTO"""

from typing import TypedDict


class MarketQuoteDTO(TypedDict):
    """Latest market data for one trading pair"""

    price: float
    market_cap: float
    percent_change_24h: float
    image_url: str | None
