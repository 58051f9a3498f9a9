"""
Engine outputs.

Every result is built fresh by a single find_crossover_month() call; nothing here
is shared or mutated after construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Union

from inputs.params import ProjectionFailure, ProjectionParams


@dataclass(frozen=True)
class FutureValue:
    holdings_units: float
    unit_price: float
    total_value: float


@dataclass(frozen=True)
class Affordable:
    """Current holdings already cover the (un-inflated) target price."""
    target_date: date
    current_value: float
    target_price: float
    unit_price: float
    holdings_units: float
    months_ahead: int = 0

    @property
    def is_affordable(self) -> bool:
        return True


@dataclass(frozen=True)
class FutureAffordable:
    """Projected value first meets the inflated target months_ahead months from now."""
    months_ahead: int
    target_date: date
    future_value: float
    inflated_target_price: float
    unit_price: float
    holdings_units: float
    total_contributed: float

    @property
    def years(self) -> int:
        return self.months_ahead // 12

    @property
    def remaining_months(self) -> int:
        return self.months_ahead % 12

    @property
    def is_affordable(self) -> bool:
        return True


@dataclass(frozen=True)
class Unreachable:
    """No crossover: either the inputs were unusable or the search ran out of horizon."""
    months_searched: int
    reason: str
    failure: ProjectionFailure = ProjectionFailure.HORIZON_EXCEEDED

    @property
    def is_affordable(self) -> bool:
        return False


ProjectionResult = Union[Affordable, FutureAffordable, Unreachable]

__all__ = [
    "ProjectionParams",
    "ProjectionFailure",
    "FutureValue",
    "Affordable",
    "FutureAffordable",
    "Unreachable",
    "ProjectionResult",
]
