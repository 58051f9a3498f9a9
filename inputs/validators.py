"""
Input validation for a calculation before it enters the engine.

Catches problems early:
- Missing or non-positive BTC price
- No Lamborghini model selected (missing target price)
- Nothing to project (no holdings and no monthly savings)
- Growth or inflation rate at or below -100%, or not a finite number
- Rates outside the slider ranges, or given in percent instead of decimal
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional

from core.config import CalculatorConfig
from core.utils import is_positive

from .params import ProjectionFailure, ProjectionParams

# Hard cap on Bitcoin supply; holdings above it are almost certainly a typo.
BTC_SUPPLY_CAP = 21_000_000.0

FAILURE_MESSAGES = {
    ProjectionFailure.INVALID_PRICE: "BTC price not available",
    ProjectionFailure.INVALID_TARGET: "Please select a Lamborghini model",
    ProjectionFailure.INSUFFICIENT_INPUTS: "Please enter BTC holdings or monthly savings",
    ProjectionFailure.INVALID_RATE: "Growth and inflation rates must be finite and above -100%",
}


def _is_usable_rate(rate: float) -> bool:
    # (1 + rate) is the compounding base; it must stay positive.
    return math.isfinite(rate) and rate > -1.0


def blocking_failures(params: ProjectionParams) -> List[ProjectionFailure]:
    """
    Failures that make a projection impossible, in check order
    (price, target, inputs, rates). Empty when the engine can run.
    """
    failures = []
    if not is_positive(params.current_unit_price):
        failures.append(ProjectionFailure.INVALID_PRICE)
    if not is_positive(params.target_base_price):
        failures.append(ProjectionFailure.INVALID_TARGET)
    if params.current_holdings_units <= 0 and params.monthly_contribution <= 0:
        failures.append(ProjectionFailure.INSUFFICIENT_INPUTS)
    if not (
        _is_usable_rate(params.annual_growth_rate)
        and _is_usable_rate(params.annual_inflation_rate)
    ):
        failures.append(ProjectionFailure.INVALID_RATE)
    return failures


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for one set of params."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    failures: List[ProjectionFailure] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def failure(self) -> Optional[ProjectionFailure]:
        """First blocking failure, in check order (price, target, inputs, rates)."""
        return self.failures[0] if self.failures else None

    def add_failure(self, failure: ProjectionFailure) -> None:
        self.failures.append(failure)
        self.errors.append(FAILURE_MESSAGES[failure])

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


def validate_params(
    params: ProjectionParams,
    *,
    config: Optional[CalculatorConfig] = None,
) -> ValidationResult:
    """
    Run all validation checks on a set of projection params.
    Returns a ValidationResult with errors (blocking) and warnings (informational).
    """
    cfg = config or CalculatorConfig()
    result = ValidationResult()

    # --- Blocking checks ---
    for failure in blocking_failures(params):
        result.add_failure(failure)

    # --- Rates ---
    for label, rate, (lo, hi) in (
        ("growth rate", params.annual_growth_rate, cfg.growth_rate_range),
        ("inflation rate", params.annual_inflation_rate, cfg.inflation_rate_range),
    ):
        if not _is_usable_rate(rate):
            continue
        if rate > 1.0:
            result.warnings.append(
                f"Annual {label} {rate} > 1.0; check if it is in percent vs decimal form."
            )
        elif rate < lo or rate > hi:
            result.warnings.append(
                f"Annual {label} {rate:.1%} is outside the usual {lo:.0%} - {hi:.0%} range."
            )

    # --- Holdings ---
    if params.current_holdings_units > BTC_SUPPLY_CAP:
        result.warnings.append(
            f"Holdings of {params.current_holdings_units:,.0f} BTC exceed the 21M supply cap."
        )

    return result
