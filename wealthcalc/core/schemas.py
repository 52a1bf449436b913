from __future__ import annotations

from datetime import datetime, UTC
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


# -------------------------
# Static catalog
# -------------------------

class CurrencyOption(BaseModel):
    code: str
    symbol: str
    name: str


class CompoundingOption(BaseModel):
    frequency: int = Field(..., ge=1)
    label: str
    description: str


CURRENCY_OPTIONS: List[CurrencyOption] = [
    CurrencyOption(code="USD", symbol="$", name="US Dollar"),
    CurrencyOption(code="EUR", symbol="€", name="Euro"),
    CurrencyOption(code="GBP", symbol="£", name="British Pound"),
    CurrencyOption(code="JPY", symbol="¥", name="Japanese Yen"),
    CurrencyOption(code="CAD", symbol="C$", name="Canadian Dollar"),
    CurrencyOption(code="AUD", symbol="A$", name="Australian Dollar"),
    CurrencyOption(code="CHF", symbol="Fr", name="Swiss Franc"),
    CurrencyOption(code="CNY", symbol="¥", name="Chinese Yuan"),
    CurrencyOption(code="INR", symbol="₹", name="Indian Rupee"),
    CurrencyOption(code="NGN", symbol="₦", name="Nigerian Naira"),
]

CURRENCY_SYMBOLS: Dict[str, str] = {c.code: c.symbol for c in CURRENCY_OPTIONS}

COMPOUNDING_OPTIONS: List[CompoundingOption] = [
    CompoundingOption(frequency=12, label="Monthly", description="Interest compounds 12 times per year"),
    CompoundingOption(frequency=4, label="Quarterly", description="Interest compounds 4 times per year"),
    CompoundingOption(frequency=2, label="Semi-Annual", description="Interest compounds 2 times per year"),
    CompoundingOption(frequency=1, label="Annual", description="Interest compounds once per year"),
]


# -------------------------
# Tool layer envelope
# -------------------------


class ErrorEnvelope(BaseModel):
    code: str
    message: str
    details: Optional[Dict[str, Any]] = None


class CalcResponse(BaseModel):
    calculator: str
    data: Dict[str, Any] = Field(default_factory=dict)
    warnings: List[str] = Field(default_factory=list)
    error: Optional[ErrorEnvelope] = None
    computed_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @property
    def ok(self) -> bool:
        return self.error is None
