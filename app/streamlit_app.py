"""
When Lambo? BTC Lamborghini Calculator
======================================

Pick a Lamborghini, enter your BTC stack and monthly savings, and the engine
finds the first month your projected holdings cover the inflation-adjusted price.

  1. Price source:  live BTC/USD from CoinGecko, cached, with fallback price
  2. Engine:        monthly growth + DCA vs. fractional-year inflation, 50-year horizon
  3. Presentation:  result card, stat tiles, value-vs-target chart

Run: streamlit run app/streamlit_app.py
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import altair as alt
import pandas as pd
import streamlit as st

# ---------------------------------------------------------------------------
# Make project root importable
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from core.config import CalculatorConfig
from core.schema import LAMBO_MODELS, LamboModel

from inputs.params import ProjectionParams
from inputs.validators import validate_params

from pricing.coingecko import PriceQuote, get_btc_price

from engine.projection import find_crossover_month
from engine.trajectory import build_trajectory
from engine.types import FutureAffordable, ProjectionResult

from presentation.formatting import format_currency
from presentation.messages import (
    growth_rate_message,
    holdings_message,
    holdings_value_detail,
    inflation_rate_message,
    monthly_savings_detail,
    monthly_savings_message,
)
from presentation.report import ResultReport, build_result_report

CONFIG = CalculatorConfig.from_env()

logger = logging.getLogger(__name__)

# Months charted when there is no crossover to stop at.
DEFAULT_CHART_MONTHS = 120


# ---------------------------------------------------------------------------
# Cached price
# ---------------------------------------------------------------------------
@st.cache_data(ttl=CONFIG.price_refresh_seconds, show_spinner="Fetching BTC price...")
def _cached_btc_price() -> PriceQuote:
    return get_btc_price(CONFIG)


# ---------------------------------------------------------------------------
# Chart helpers
# ---------------------------------------------------------------------------
def _plot_value_vs_target(trajectory: pd.DataFrame, *, height: int = 320) -> None:
    if len(trajectory) == 0:
        st.info("No data to plot.")
        return
    long = trajectory.melt(
        id_vars=["date"],
        value_vars=["total_value", "target_price"],
        var_name="series",
        value_name="usd",
    )
    long["series"] = long["series"].map(
        {"total_value": "Your BTC Value", "target_price": "Lambo Price (Inflation Adjusted)"}
    )
    chart = (
        alt.Chart(long).mark_line()
        .encode(
            x=alt.X("date:T", title="Date"),
            y=alt.Y("usd:Q", title="USD", axis=alt.Axis(format="$,.0f")),
            color=alt.Color("series:N", title=None),
        )
        .properties(title="Projected Value vs. Target", height=height)
    )
    st.altair_chart(chart, use_container_width=True)


def _display_report(report: ResultReport) -> None:
    banner = {"success": st.success, "info": st.info, "warning": st.warning}[report.tone]
    banner(f"{report.icon} **{report.title}**  \n{report.subtitle}")
    if report.stats:
        cols = st.columns(len(report.stats))
        for col, stat in zip(cols, report.stats):
            col.metric(stat.label, stat.value)


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------
def _select_model() -> Optional[LamboModel]:
    st.markdown("#### 🏎️ Lamborghini Model")
    model = st.selectbox(
        "Choose your dream Lambo",
        options=list(LAMBO_MODELS),
        index=None,
        format_func=lambda m: m.label,
        placeholder="Select a model...",
    )
    if model is not None:
        st.metric("Target Price", format_currency(model.price))
    return model


def _rate_inputs() -> tuple[float, float]:
    col1, col2 = st.columns(2)
    with col1:
        lo, hi = CONFIG.growth_rate_range
        growth_pct = st.slider(
            "📈 Expected BTC Growth (% / year)",
            round(lo * 100), round(hi * 100), round(CONFIG.default_growth_rate * 100),
            round(CONFIG.growth_rate_step * 100),
        )
        st.caption(growth_rate_message(growth_pct))
    with col2:
        lo, hi = CONFIG.inflation_rate_range
        inflation_pct = st.slider(
            "💸 Expected Inflation (% / year)",
            round(lo * 100, 1), round(hi * 100, 1), round(CONFIG.default_inflation_rate * 100, 1),
            round(CONFIG.inflation_rate_step * 100, 1),
        )
        st.caption(inflation_rate_message(inflation_pct))
    return growth_pct / 100, inflation_pct / 100


def _stack_inputs(btc_price: float) -> tuple[float, float]:
    col1, col2 = st.columns(2)
    with col1:
        holdings = st.number_input(
            "₿ Current BTC Holdings", min_value=0.0, value=0.0,
            step=CONFIG.holdings_step, format="%.8f",
        )
        st.caption(holdings_message(holdings))
        detail = holdings_value_detail(holdings, btc_price)
        if detail:
            st.metric("Current Value", detail)
    with col2:
        savings = st.number_input(
            "💰 Monthly Savings (USD)", min_value=0.0, value=0.0, step=CONFIG.savings_step,
        )
        st.caption(monthly_savings_message(savings))
        detail = monthly_savings_detail(savings, btc_price)
        if detail:
            st.caption(detail)
    return holdings, savings


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main() -> None:
    logging.basicConfig(
        level=CONFIG.log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    st.set_page_config(page_title="When Lambo?", page_icon="🏎️", layout="centered")
    st.title("🏎️ When Lambo?")

    quote = _cached_btc_price()
    if quote.is_fallback:
        st.markdown(f"**Current BTC Price:** ~{format_currency(quote.price)}")
        for warning in quote.warnings:
            st.caption(warning)
    else:
        st.markdown(f"**Current BTC Price:** {format_currency(quote.price)}")

    model = _select_model()
    growth_rate, inflation_rate = _rate_inputs()
    holdings, savings = _stack_inputs(quote.price)

    params = ProjectionParams(
        current_holdings_units=holdings,
        current_unit_price=quote.price,
        monthly_contribution=savings,
        annual_growth_rate=growth_rate,
        annual_inflation_rate=inflation_rate,
        target_base_price=model.price if model is not None else None,
    )

    st.divider()
    result: ProjectionResult = find_crossover_month(params, max_months=CONFIG.max_months)
    logger.debug("Projection result: %s", result)
    _display_report(build_result_report(result, model_name=model.name if model else None))

    validation = validate_params(params, config=CONFIG)
    if not validation.is_valid:
        return
    for warning in validation.warnings:
        st.warning(warning)

    chart_months = (
        result.months_ahead if isinstance(result, FutureAffordable) else DEFAULT_CHART_MONTHS
    )
    if chart_months > 0:
        trajectory = build_trajectory(params, chart_months)
        _plot_value_vs_target(trajectory)
        with st.expander("Month-by-Month Projection", expanded=False):
            st.dataframe(trajectory, use_container_width=True, hide_index=True)


def run() -> None:
    """Console entry point: serve this page with ``streamlit run``."""
    from streamlit.web import cli as stcli

    sys.argv = ["streamlit", "run", str(Path(__file__).resolve())]
    sys.exit(stcli.main())


if __name__ == "__main__":
    main()
