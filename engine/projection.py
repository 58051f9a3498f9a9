"""
Projection engine: when does a BTC stack (plus monthly DCA) catch an inflating price?

Two compounding conventions are used on purpose and must not be unified:
  1. BTC price grows per month at the effective monthly rate (1+g)^(1/12) - 1.
  2. The target price inflates by fractional years: base * (1+i)^(months/12).

Each month the price is grown first and the contribution is then converted to
BTC at the new price.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from core.config import MAX_PROJECTION_MONTHS
from core.utils import add_months, annual_to_monthly_rate
from inputs.validators import FAILURE_MESSAGES, blocking_failures

from .types import (
    Affordable,
    FutureAffordable,
    FutureValue,
    ProjectionFailure,
    ProjectionParams,
    ProjectionResult,
    Unreachable,
)

logger = logging.getLogger(__name__)

HORIZON_EXCEEDED_REASON = "exceeds fifty-year horizon"


def project_forward(params: ProjectionParams, months: int) -> FutureValue:
    """Project holdings and BTC price ``months`` months ahead."""
    if months < 0:
        raise ValueError(f"months must be >= 0, got {months}")

    monthly_rate = annual_to_monthly_rate(params.annual_growth_rate)
    contribution = params.monthly_contribution

    holdings = params.current_holdings_units
    price = params.current_unit_price

    for _ in range(months):
        price = price * (1 + monthly_rate)
        if contribution > 0:
            holdings += contribution / price

    return FutureValue(holdings_units=holdings, unit_price=price, total_value=holdings * price)


def inflated_target(base_price: float, annual_inflation_rate: float, months: int) -> float:
    """Inflation-adjusted price ``months`` months ahead (fractional-year compounding)."""
    years = months / 12
    return base_price * (1 + annual_inflation_rate) ** years


def find_crossover_month(
    params: ProjectionParams,
    *,
    as_of: Optional[date] = None,
    max_months: int = MAX_PROJECTION_MONTHS,
) -> ProjectionResult:
    """
    Find the first month at which projected value >= inflated target price.

    Parameters
    ----------
    params : ProjectionParams
        Holdings, price, monthly contribution, growth/inflation rates, target price.
    as_of : date, optional
        Reference "now" for target dates. Defaults to date.today().
    max_months : int
        Search ceiling (600 = fifty years).

    Returns
    -------
    Affordable (already affordable), FutureAffordable (crossover found) or
    Unreachable (invalid inputs or no crossover within the ceiling).

    The search is a single forward pass carrying (holdings, price) month to month.
    It performs the same float operations in the same order as calling
    project_forward(params, n) for each n, so results are identical.
    """
    today = as_of if as_of is not None else date.today()

    failures = blocking_failures(params)
    if failures:
        failure = failures[0]
        logger.debug("Projection rejected: %s", failure.value)
        return Unreachable(months_searched=0, reason=FAILURE_MESSAGES[failure], failure=failure)

    holdings = params.current_holdings_units
    price = params.current_unit_price
    target = params.target_base_price

    current_value = holdings * price
    if current_value >= target:
        return Affordable(
            target_date=today,
            current_value=current_value,
            target_price=target,
            unit_price=price,
            holdings_units=holdings,
        )

    monthly_rate = annual_to_monthly_rate(params.annual_growth_rate)
    contribution = params.monthly_contribution

    for month in range(1, max_months + 1):
        price = price * (1 + monthly_rate)
        if contribution > 0:
            holdings += contribution / price

        value = holdings * price
        inflated = inflated_target(target, params.annual_inflation_rate, month)

        if value >= inflated:
            logger.debug("Crossover at month %d (value=%.2f, target=%.2f)", month, value, inflated)
            return FutureAffordable(
                months_ahead=month,
                target_date=add_months(today, month),
                future_value=value,
                inflated_target_price=inflated,
                unit_price=price,
                holdings_units=holdings,
                total_contributed=contribution * month,
            )

    logger.debug("No crossover within %d months", max_months)
    return Unreachable(
        months_searched=max_months,
        reason=HORIZON_EXCEEDED_REASON,
        failure=ProjectionFailure.HORIZON_EXCEEDED,
    )
