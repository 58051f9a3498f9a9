"""
Projection engine: monthly BTC growth + DCA vs. an inflating target price.
"""

from .projection import find_crossover_month, inflated_target, project_forward
from .trajectory import build_trajectory
from .types import (
    Affordable,
    FutureAffordable,
    FutureValue,
    ProjectionFailure,
    ProjectionParams,
    ProjectionResult,
    Unreachable,
)

__all__ = [
    "find_crossover_month",
    "inflated_target",
    "project_forward",
    "build_trajectory",
    "Affordable",
    "FutureAffordable",
    "FutureValue",
    "ProjectionFailure",
    "ProjectionParams",
    "ProjectionResult",
    "Unreachable",
]
