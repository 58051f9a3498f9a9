"""
Price source: live BTC/USD quote with fallback.
"""

from .coingecko import (
    FALLBACK_WARNING,
    PriceFetchError,
    PriceQuote,
    SimplePriceResponse,
    fetch_btc_price,
    get_btc_price,
)

__all__ = [
    "FALLBACK_WARNING",
    "PriceFetchError",
    "PriceQuote",
    "SimplePriceResponse",
    "fetch_btc_price",
    "get_btc_price",
]
