"""
Context messages shown next to each input, plus the small conversions they display.
Rates are given in percent here (20 for 20%), matching the sliders.
"""

from __future__ import annotations

from typing import Optional

from .formatting import btc_to_sats, format_number


def growth_rate_message(percent: float) -> str:
    if percent <= 10:
        return "📉 Conservative estimate - similar to traditional markets"
    if percent <= 20:
        return "📊 Moderate growth - reasonable long-term Bitcoin outlook"
    if percent <= 30:
        return "📈 Optimistic - based on historical BTC performance"
    return "🚀 Very bullish - expecting significant adoption growth"


def inflation_rate_message(percent: float) -> str:
    if percent <= 2:
        return "🎯 Low inflation - ideal economic conditions"
    if percent <= 4:
        return "📊 Moderate - typical for developed economies"
    if percent <= 7:
        return "⚠️ Elevated - above central bank targets"
    if percent <= 10:
        return "🔥 High inflation - significant purchasing power erosion"
    return "🚨 Very high - considering extreme scenarios"


def monthly_savings_message(amount: float) -> str:
    if amount <= 0:
        return "Regular contributions accelerate your goal"

    if amount < 100:
        message = "🌱 Every dollar counts - consistency is key!"
    elif amount < 500:
        message = "📈 Solid DCA strategy - building steadily!"
    elif amount < 1000:
        message = "💪 Strong commitment to your financial future!"
    elif amount < 5000:
        message = "🚀 Aggressive stacking - Lambo incoming!"
    else:
        message = "🐋 Whale-level DCA - respect the hustle!"
    return f"{message} (${format_number(amount * 12)}/year)"


def holdings_message(btc: float) -> str:
    if btc <= 0:
        return "Enter amount in BTC (e.g., 0.5 for half a Bitcoin)"
    if btc < 0.01:
        return f"💡 {btc_to_sats(btc):,} satoshis - Every sat counts!"
    if btc < 0.1:
        return "📊 Building your stack - keep stacking!"
    if btc < 1:
        return "🎯 Getting closer to a whole coin!"
    if btc < 10:
        return "🐋 Whole coiner status - impressive!"
    return "🐋🐋 Whale alert! Serious hodler detected."


def monthly_savings_detail(amount: float, btc_price: Optional[float]) -> Optional[str]:
    """'105,263 sats ≈ 0.00105263 BTC/month', or None without a price or amount."""
    if not btc_price or amount <= 0:
        return None
    btc = amount / btc_price
    return f"{btc_to_sats(btc):,} sats ≈ {btc:.8f} BTC/month"


def holdings_value_detail(btc: float, btc_price: Optional[float]) -> Optional[str]:
    """Current USD value of the stack, or None without a price or holdings."""
    if not btc_price or btc <= 0:
        return None
    return f"${format_number(btc * btc_price)}"
