from __future__ import annotations

from datetime import date

from core.utils import round_half_away

SATS_PER_BTC = 100_000_000


def format_currency(amount: float) -> str:
    """Whole US dollars with thousands separators: 261274.4 -> '$261,274'."""
    rounded = round_half_away(amount)
    sign = "-" if rounded < 0 else ""
    return f"{sign}${abs(rounded):,.0f}"


def format_date(d: date) -> str:
    """'March 2028'."""
    return d.strftime("%B %Y")


def _plural(n: int, unit: str) -> str:
    return f"{n} {unit}{'s' if n != 1 else ''}"


def format_duration(months: int) -> str:
    """'5 months', '1 year', '2 years, 3 months'."""
    years, remaining = divmod(int(months), 12)
    if years == 0:
        return _plural(remaining, "month")
    if remaining == 0:
        return _plural(years, "year")
    return f"{_plural(years, 'year')}, {_plural(remaining, 'month')}"


def format_btc(amount: float, decimals: int = 4) -> str:
    return f"{amount:.{decimals}f} BTC"


def format_number(value: float) -> str:
    """Thousands separators, decimals only when needed: 6000 -> '6,000', 399.96 -> '399.96'."""
    if float(value).is_integer():
        return f"{value:,.0f}"
    return f"{value:,.2f}"


def btc_to_sats(amount: float) -> int:
    return int(round_half_away(amount * SATS_PER_BTC))
