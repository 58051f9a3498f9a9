from __future__ import annotations

import math
from datetime import date
from typing import Optional

from dateutil.relativedelta import relativedelta


def annual_to_monthly_rate(annual_rate: float) -> float:
    """Effective monthly rate m such that (1 + m)^12 == 1 + annual_rate."""
    return math.pow(1.0 + annual_rate, 1.0 / 12.0) - 1.0


def add_months(start: date, months: int) -> date:
    """
    Calendar month addition. Day-of-month overflow clamps to the last day of the
    target month (Jan 31 + 1 month -> Feb 28/29).
    """
    return start + relativedelta(months=months)


def is_positive(value: Optional[float]) -> bool:
    """True for a finite number > 0; None and NaN are not positive."""
    if value is None:
        return False
    value = float(value)
    return math.isfinite(value) and value > 0


def round_half_away(x: float, decimals: int = 0) -> float:
    """Round half away from zero (2.5 -> 3, -2.5 -> -3), unlike Python's round()."""
    m = 10 ** decimals
    return math.copysign(math.floor(abs(x) * m + 0.5) / m, x)
