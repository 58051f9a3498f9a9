from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class ProjectionParams:
    """
    Caller-supplied inputs for one calculation.

    Rates are decimals (0.20 for 20%). current_unit_price and target_base_price
    may be None when the caller has no price yet or no model selected; the
    engine reports that as a failure rather than raising.
    """

    current_holdings_units: float = 0.0
    current_unit_price: Optional[float] = None
    monthly_contribution: float = 0.0
    annual_growth_rate: float = 0.20
    annual_inflation_rate: float = 0.03
    target_base_price: Optional[float] = None

    @property
    def current_value(self) -> float:
        return self.current_holdings_units * (self.current_unit_price or 0.0)


class ProjectionFailure(str, Enum):
    INVALID_PRICE = "invalid_price"
    INVALID_TARGET = "invalid_target"
    INSUFFICIENT_INPUTS = "insufficient_inputs"
    INVALID_RATE = "invalid_rate"
    HORIZON_EXCEEDED = "horizon_exceeded"
