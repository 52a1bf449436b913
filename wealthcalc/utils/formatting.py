from __future__ import annotations

import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

from wealthcalc.core.schemas import CURRENCY_SYMBOLS

Number = Union[int, float, Decimal]


def format_currency(amount: Number, currency: str) -> str:
    """
    Display string for an amount: compact millions, whole units from a
    thousand up, cents below that.
    """
    symbol = CURRENCY_SYMBOLS.get((currency or "").upper(), "$")
    value = float(amount)
    sign = "-" if value < 0 else ""
    value = abs(value)

    if value >= 1_000_000:
        return f"{sign}{symbol}{value / 1_000_000:.1f}M"
    if value >= 1000:
        whole = int(Decimal(str(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP))
        return f"{sign}{symbol}{whole:,}"
    return f"{sign}{symbol}{value:.2f}"


def format_percentage(percentage: Number, decimals: int = 1) -> str:
    return f"{float(percentage):.{decimals}f}%"


def format_ratio(ratio: float) -> str:
    return "∞" if math.isinf(ratio) else f"{ratio:.2f}"


def clamp(value: Number, lo: Number, hi: Number) -> Number:
    return min(max(value, lo), hi)
