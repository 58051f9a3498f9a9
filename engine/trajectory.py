"""
Month-by-month trajectory of portfolio value vs. inflated target, for charting.

Row n carries the same numbers project_forward(params, n) and
inflated_target(target, inflation, n) would return.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

import numpy as np
import pandas as pd

from core.utils import add_months, annual_to_monthly_rate

from .projection import inflated_target
from .types import ProjectionParams


def build_trajectory(
    params: ProjectionParams,
    months: int,
    *,
    as_of: Optional[date] = None,
) -> pd.DataFrame:
    """
    Build a (months + 1)-row table starting at month 0 (today).

    Columns: month, date, unit_price, holdings_units, total_value, target_price,
    total_contributed, affordable.

    Requires a positive current_unit_price and target_base_price; run
    validate_params() first.
    """
    if months < 0:
        raise ValueError(f"months must be >= 0, got {months}")
    if params.current_unit_price is None or params.target_base_price is None:
        raise ValueError("Trajectory needs both a BTC price and a target price.")

    today = as_of if as_of is not None else date.today()
    n_rows = months + 1

    unit_price = np.zeros(n_rows, dtype=float)
    holdings = np.zeros(n_rows, dtype=float)
    total_value = np.zeros(n_rows, dtype=float)
    target = np.zeros(n_rows, dtype=float)

    monthly_rate = annual_to_monthly_rate(params.annual_growth_rate)
    contribution = params.monthly_contribution

    h = params.current_holdings_units
    p = params.current_unit_price
    for t in range(n_rows):
        if t > 0:
            p = p * (1 + monthly_rate)
            if contribution > 0:
                h += contribution / p
        unit_price[t] = p
        holdings[t] = h
        total_value[t] = h * p
        target[t] = inflated_target(params.target_base_price, params.annual_inflation_rate, t)

    month_idx = np.arange(n_rows)
    return pd.DataFrame(
        {
            "month": month_idx,
            "date": pd.to_datetime([add_months(today, int(t)) for t in month_idx]),
            "unit_price": unit_price,
            "holdings_units": holdings,
            "total_value": total_value,
            "target_price": target,
            "total_contributed": contribution * month_idx,
            "affordable": total_value >= target,
        }
    )
