"""
Calculator configuration.
Slider bounds and defaults mirror the input widgets; price-source settings can be
overridden from the environment (see CalculatorConfig.from_env).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Tuple

# Hard search ceiling: fifty years of monthly steps.
MAX_PROJECTION_MONTHS = 600

DEFAULT_REQUEST_TIMEOUT = 10.0

COINGECKO_SIMPLE_PRICE_URL = (
    "https://api.coingecko.com/api/v3/simple/price?ids=bitcoin&vs_currencies=usd"
)


@dataclass(frozen=True)
class CalculatorConfig:
    max_months: int = MAX_PROJECTION_MONTHS

    # growth / inflation sliders (decimal rates)
    default_growth_rate: float = 0.20
    growth_rate_range: Tuple[float, float] = (0.05, 0.40)
    growth_rate_step: float = 0.01

    default_inflation_rate: float = 0.03
    inflation_rate_range: Tuple[float, float] = (0.0, 0.15)
    inflation_rate_step: float = 0.005

    holdings_step: float = 0.00000001
    savings_step: float = 50.0

    # price source
    price_api_url: str = COINGECKO_SIMPLE_PRICE_URL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    price_refresh_seconds: int = 120
    fallback_btc_price: float = 95000.0  # last known approximate price

    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "CalculatorConfig":
        """Build a config, overriding price-source settings from WHEN_LAMBO_* variables."""
        defaults = cls()
        return cls(
            price_api_url=os.getenv("WHEN_LAMBO_PRICE_API_URL", defaults.price_api_url),
            request_timeout=float(
                os.getenv("WHEN_LAMBO_REQUEST_TIMEOUT", defaults.request_timeout)
            ),
            price_refresh_seconds=int(
                os.getenv("WHEN_LAMBO_PRICE_REFRESH_SECONDS", defaults.price_refresh_seconds)
            ),
            fallback_btc_price=float(
                os.getenv("WHEN_LAMBO_FALLBACK_BTC_PRICE", defaults.fallback_btc_price)
            ),
            log_level=os.getenv("WHEN_LAMBO_LOG_LEVEL", defaults.log_level).upper(),
        )
