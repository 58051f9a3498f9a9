"""
BTC price source: CoinGecko simple-price endpoint with a fallback price.

The engine never calls this; the front end fetches (and caches) a quote and
passes quote.price into ProjectionParams.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Literal, Optional

import requests
from pydantic import BaseModel, PositiveFloat, ValidationError

from core.config import COINGECKO_SIMPLE_PRICE_URL, DEFAULT_REQUEST_TIMEOUT, CalculatorConfig

logger = logging.getLogger(__name__)

FALLBACK_WARNING = "Using approximate price (API unavailable)"

_HEADERS = {"Accept": "application/json", "User-Agent": "when-lambo/0.1"}


class PriceFetchError(RuntimeError):
    """Live price could not be obtained or the payload was unusable."""


class _UsdPrice(BaseModel):
    usd: PositiveFloat


class SimplePriceResponse(BaseModel):
    """Payload shape: {"bitcoin": {"usd": 95123.0}}"""
    bitcoin: _UsdPrice


@dataclass(frozen=True)
class PriceQuote:
    price: float
    source: Literal["live", "fallback"]
    fetched_at: datetime
    warnings: List[str] = field(default_factory=list)

    @property
    def is_fallback(self) -> bool:
        return self.source == "fallback"


def fetch_btc_price(
    *,
    url: str = COINGECKO_SIMPLE_PRICE_URL,
    timeout: float = DEFAULT_REQUEST_TIMEOUT,
    session: Optional[requests.Session] = None,
) -> float:
    """
    Fetch the current BTC/USD price.

    Raises PriceFetchError on any transport, HTTP status, JSON or schema problem.
    """
    http = session if session is not None else requests
    try:
        response = http.get(url, timeout=timeout, headers=_HEADERS)
        response.raise_for_status()
        payload = SimplePriceResponse.model_validate(response.json())
    except requests.JSONDecodeError as exc:
        raise PriceFetchError(f"BTC price response is not JSON: {exc}") from exc
    except requests.RequestException as exc:
        raise PriceFetchError(f"BTC price request failed: {exc}") from exc
    except ValidationError as exc:
        raise PriceFetchError(f"Unexpected BTC price payload: {exc}") from exc
    except ValueError as exc:
        raise PriceFetchError(f"BTC price response is not JSON: {exc}") from exc
    return float(payload.bitcoin.usd)


def get_btc_price(
    config: Optional[CalculatorConfig] = None,
    *,
    session: Optional[requests.Session] = None,
) -> PriceQuote:
    """Live quote when available, otherwise the configured fallback price with a warning."""
    cfg = config or CalculatorConfig()
    now = datetime.now(timezone.utc)
    try:
        price = fetch_btc_price(url=cfg.price_api_url, timeout=cfg.request_timeout, session=session)
    except PriceFetchError as exc:
        logger.warning("Failed to fetch BTC price, using fallback %.0f: %s", cfg.fallback_btc_price, exc)
        return PriceQuote(
            price=float(cfg.fallback_btc_price),
            source="fallback",
            fetched_at=now,
            warnings=[FALLBACK_WARNING],
        )
    logger.info("Fetched live BTC price: %.2f", price)
    return PriceQuote(price=price, source="live", fetched_at=now)
