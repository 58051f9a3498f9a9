"""
Presentation: formatting, input context messages, and the result card.
"""

from .formatting import (
    btc_to_sats,
    format_btc,
    format_currency,
    format_date,
    format_duration,
    format_number,
)
from .messages import (
    growth_rate_message,
    holdings_message,
    holdings_value_detail,
    inflation_rate_message,
    monthly_savings_detail,
    monthly_savings_message,
)
from .report import ResultReport, ResultStat, build_result_report

__all__ = [
    "btc_to_sats",
    "format_btc",
    "format_currency",
    "format_date",
    "format_duration",
    "format_number",
    "growth_rate_message",
    "holdings_message",
    "holdings_value_detail",
    "inflation_rate_message",
    "monthly_savings_detail",
    "monthly_savings_message",
    "ResultReport",
    "ResultStat",
    "build_result_report",
]
