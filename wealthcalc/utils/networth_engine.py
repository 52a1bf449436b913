from __future__ import annotations

import math
from decimal import Decimal
from typing import Any, Iterable, List, Optional

from wealthcalc.core.config import SETTINGS
from wealthcalc.utils.calc_models import FinancialItem, NetWorthSnapshot
from wealthcalc.utils.formatting import format_ratio
from wealthcalc.utils.logging import get_logger

logger = get_logger("calc.net_worth")

HEALTHY_RATIO = 1.5
EDITABLE_FIELDS = ("name", "value", "category")

_DEFAULT_ASSETS = [
    ("1", "Cash", "liquid"),
    ("2", "Savings Account", "liquid"),
    ("3", "Other Accounts", "liquid"),
    ("4", "Investments (Stocks/Bonds)", "investment"),
    ("5", "Real Estate", "property"),
    ("6", "Vehicles", "property"),
    ("7", "Retirement Accounts (e.g., PFA, RSA)", "retirement"),
    ("8", "Business Interests", "business"),
    ("9", "Jewelry or Valuables", "personal"),
]

_DEFAULT_LIABILITIES = [
    ("1", "House Rent", "housing"),
    ("2", "Office/Shop Rent", "business"),
    ("3", "Mortgage", "housing"),
    ("4", "Car Loan", "vehicle"),
    ("5", "Personal Loan", "personal"),
    ("6", "Outstanding Bills", "bills"),
    ("7", "Business Debt", "business"),
    ("8", "Family Loan", "personal"),
]


def default_assets() -> List[FinancialItem]:
    return [FinancialItem(id=i, name=n, category=c) for i, n, c in _DEFAULT_ASSETS]


def default_liabilities() -> List[FinancialItem]:
    return [FinancialItem(id=i, name=n, category=c) for i, n, c in _DEFAULT_LIABILITIES]


def add_item(items: List[FinancialItem], item: Optional[FinancialItem] = None) -> List[FinancialItem]:
    """Append `item` (or a blank one with a fresh id); the input list is untouched."""
    return [*items, item if item is not None else FinancialItem()]


def update_item(items: List[FinancialItem], item_id: str, field: str, value: Any) -> List[FinancialItem]:
    """Replace one field of the item matching `item_id`. Unknown ids are a no-op."""
    if field not in EDITABLE_FIELDS:
        logger.warning("Ignoring update of unsupported field %r on item %s", field, item_id)
        return list(items)

    out: List[FinancialItem] = []
    for it in items:
        if it.id == item_id:
            data = it.model_dump()
            data[field] = value
            it = FinancialItem.model_validate(data)
        out.append(it)
    return out


def remove_item(items: List[FinancialItem], item_id: str) -> List[FinancialItem]:
    return [it for it in items if it.id != item_id]


def total_value(items: Iterable[FinancialItem]) -> Decimal:
    return sum((it.value or Decimal(0) for it in items), Decimal(0))


def asset_to_liability_ratio(total_assets: float, total_liabilities: float) -> float:
    if total_liabilities > 0:
        return total_assets / total_liabilities
    if total_assets > 0:
        return math.inf
    return 0.0


def top_items(items: Iterable[FinancialItem], limit: int = 5) -> List[FinancialItem]:
    """Largest items first; display only, summarize() keeps input order."""
    return sorted(items, key=lambda it: it.value, reverse=True)[:limit]


def summarize(
    assets: List[FinancialItem],
    liabilities: List[FinancialItem],
    currency: Optional[str] = None,
) -> NetWorthSnapshot:
    total_assets = float(total_value(assets))
    total_liabilities = float(total_value(liabilities))
    net_worth = float(total_value(assets) - total_value(liabilities))

    ratio = asset_to_liability_ratio(total_assets, total_liabilities)
    healthy = ratio >= HEALTHY_RATIO

    return NetWorthSnapshot(
        currency=currency or SETTINGS.net_worth_currency,
        total_assets=total_assets,
        total_liabilities=total_liabilities,
        net_worth=net_worth,
        assets_breakdown=[it for it in assets if it.value > 0],
        liabilities_breakdown=[it for it in liabilities if it.value > 0],
        asset_to_liability_ratio=ratio,
        ratio_display=format_ratio(ratio),
        is_healthy=healthy,
        health_status="healthy" if healthy else "needs_improvement",
        net_worth_status="positive" if net_worth >= 0 else "negative",
    )
