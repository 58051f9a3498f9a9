from __future__ import annotations

import sys
from datetime import date
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Make project root importable
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from inputs.params import ProjectionParams  # noqa: E402


@pytest.fixture
def as_of() -> date:
    return date(2025, 1, 15)


@pytest.fixture
def huracan_params() -> ProjectionParams:
    """0.5 BTC at $90k, no DCA, 20% growth, 3% inflation, Huracán EVO."""
    return ProjectionParams(
        current_holdings_units=0.5,
        current_unit_price=90000.0,
        monthly_contribution=0.0,
        annual_growth_rate=0.20,
        annual_inflation_rate=0.03,
        target_base_price=261274.0,
    )


@pytest.fixture
def dca_params() -> ProjectionParams:
    """Small stack plus steady monthly savings toward an Urus S."""
    return ProjectionParams(
        current_holdings_units=0.1,
        current_unit_price=90000.0,
        monthly_contribution=500.0,
        annual_growth_rate=0.20,
        annual_inflation_rate=0.03,
        target_base_price=239050.0,
    )
