"""
Result card: translates a ProjectionResult into the headline, subtitle and stat
tiles the front end shows.

  Affordable        → "You Can Afford It NOW!" + current value vs. price
  FutureAffordable  → target month + inflated price, projected BTC price, holdings
  Unreachable       → input guidance, or "Keep Stacking!" past the 50-year horizon
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Optional

import pandas as pd

from engine.types import (
    Affordable,
    FutureAffordable,
    ProjectionFailure,
    ProjectionResult,
    Unreachable,
)

from .formatting import format_btc, format_currency, format_date, format_duration

HORIZON_MESSAGE = (
    "With current parameters, it would take more than 50 years. "
    "Consider increasing savings or adjusting expectations."
)

Tone = Literal["success", "info", "warning"]


@dataclass(frozen=True)
class ResultStat:
    value: str
    label: str


@dataclass
class ResultReport:
    """Display-ready result card."""
    icon: str
    title: str
    subtitle: str
    tone: Tone
    stats: List[ResultStat] = field(default_factory=list)

    def to_dataframe(self) -> pd.DataFrame:
        """Stat tiles as a two-column table."""
        return pd.DataFrame(
            [{"Metric": s.label, "Value": s.value} for s in self.stats],
            columns=["Metric", "Value"],
        )


# Guidance shown instead of a result when inputs are missing.
_GUIDANCE = {
    ProjectionFailure.INVALID_PRICE: (
        "⏳", "Waiting for BTC Price", "BTC price not available yet"
    ),
    ProjectionFailure.INVALID_TARGET: (
        "🏎️", "Select Your Dream Lambo", "Choose a model from the dropdown below"
    ),
    ProjectionFailure.INSUFFICIENT_INPUTS: (
        "₿", "Enter Your Bitcoin Details", "Add your current holdings or monthly savings plan"
    ),
    ProjectionFailure.INVALID_RATE: (
        "⚠️", "Check Your Rates", "Growth and inflation must be above -100% per year"
    ),
}


def build_result_report(
    result: ProjectionResult,
    *,
    model_name: Optional[str] = None,
) -> ResultReport:
    if isinstance(result, Affordable):
        return ResultReport(
            icon="🎉",
            title="You Can Afford It NOW!",
            subtitle="Time to visit the dealership!",
            tone="success",
            stats=[
                ResultStat(format_currency(result.current_value), "Your BTC Value"),
                ResultStat(format_currency(result.target_price), "Lambo Price"),
            ],
        )

    if isinstance(result, FutureAffordable):
        name = model_name or "Lamborghini"
        stats = [
            ResultStat(format_currency(result.inflated_target_price), f"{name} (Inflation Adjusted)"),
            ResultStat(format_currency(result.unit_price), "Projected BTC Price"),
            ResultStat(format_btc(result.holdings_units), "Your Future Holdings"),
        ]
        if result.total_contributed > 0:
            stats.append(ResultStat(format_currency(result.total_contributed), "Total Invested"))
        return ResultReport(
            icon="🏎️",
            title=format_date(result.target_date),
            subtitle=f"That's only {format_duration(result.months_ahead)} away!",
            tone="success",
            stats=stats,
        )

    if isinstance(result, Unreachable):
        if result.failure in _GUIDANCE:
            icon, title, subtitle = _GUIDANCE[result.failure]
            return ResultReport(icon=icon, title=title, subtitle=subtitle, tone="info")
        return ResultReport(
            icon="⏳",
            title="Keep Stacking!",
            subtitle=HORIZON_MESSAGE,
            tone="warning",
            stats=[ResultStat(f"{result.months_searched // 12}+ years", "Estimated Timeline")],
        )

    raise TypeError(f"Unsupported projection result: {type(result).__name__}")
