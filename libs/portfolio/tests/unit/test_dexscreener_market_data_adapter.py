"""DexScreener Market Data Adapter Unit Tests"""

from unittest.mock import MagicMock, patch

import pytest
import requests

from libs.portfolio.src.adapters.driven.dexscreener.dexscreener_market_data_adapter import (
    DexScreenerMarketDataAdapter,
)


def _response(payload: dict) -> MagicMock:
    response = MagicMock()
    response.json.return_value = payload
    response.raise_for_status.return_value = None
    return response


class TestDexScreenerMarketDataAdapter:
    """Pair quote parsing"""

    @patch(
        "libs.portfolio.src.adapters.driven.dexscreener.dexscreener_market_data_adapter.requests.get"
    )
    def test_parses_pair(self, stub_get) -> None:
        stub_get.return_value = _response(
            {
                "pairs": [
                    {
                        "pairAddress": "0xABC",
                        "priceUsd": "0.25",
                        "fdv": 2500000,
                        "priceChange": {"h24": "-4.2"},
                        "info": {"imageUrl": "https://img/abc.png"},
                    }
                ]
            }
        )

        quote = DexScreenerMarketDataAdapter().get_quote("solana", "0xabc")

        assert quote == {
            "price": 0.25,
            "market_cap": 2_500_000,
            "percent_change_24h": -4.2,
            "image_url": "https://img/abc.png",
        }
        assert stub_get.call_args.args[0].endswith("/pairs/solana/0xabc")

    @patch(
        "libs.portfolio.src.adapters.driven.dexscreener.dexscreener_market_data_adapter.requests.get"
    )
    def test_missing_fields_default(self, stub_get) -> None:
        stub_get.return_value = _response({"pairs": [{"pairAddress": "0xabc"}]})

        quote = DexScreenerMarketDataAdapter().get_quote("base", "0xabc")

        assert quote["price"] == 0
        assert quote["image_url"] is None

    @patch(
        "libs.portfolio.src.adapters.driven.dexscreener.dexscreener_market_data_adapter.requests.get"
    )
    def test_unknown_pair(self, stub_get) -> None:
        stub_get.return_value = _response({"pairs": None})

        assert DexScreenerMarketDataAdapter().get_quote("base", "0xabc") is None

    @patch(
        "libs.portfolio.src.adapters.driven.dexscreener.dexscreener_market_data_adapter.requests.get"
    )
    def test_http_error_propagates(self, stub_get) -> None:
        response = _response({})
        response.raise_for_status.side_effect = requests.HTTPError("503")
        stub_get.return_value = response

        with pytest.raises(requests.HTTPError):
            DexScreenerMarketDataAdapter().get_quote("base", "0xabc")
