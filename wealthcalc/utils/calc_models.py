from __future__ import annotations

import uuid
from datetime import date, datetime
from decimal import Decimal
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator

from wealthcalc.core.config import SETTINGS
from wealthcalc.utils.parsing import to_decimal

# Raw user input: numbers or human-formatted strings such as "10,000".
RawAmount = Union[int, float, Decimal, str, None]
RawDate = Union[datetime, date, str, None]


# -------------------------
# Investment
# -------------------------

class InvestmentParameters(BaseModel):
    currency: str = Field(default_factory=lambda: SETTINGS.default_currency)
    initial_amount: RawAmount = 0
    monthly_contribution: RawAmount = 0
    annual_return_percent: RawAmount = 0
    years: RawAmount = 0
    compounding_frequency: RawAmount = Field(default_factory=lambda: SETTINGS.default_compounding_frequency)


class InvestmentResult(BaseModel):
    currency: str
    final_amount: float = 0.0
    total_contributions: float = 0.0
    interest_earned: float = 0.0
    total_growth_percent: float = 0.0
    monthly_contributions_total: float = 0.0


# -------------------------
# Savings goal
# -------------------------

class SavingsGoal(BaseModel):
    currency: str = Field(default_factory=lambda: SETTINGS.default_currency)
    goal_amount: RawAmount = 0
    current_savings: RawAmount = 0
    target_date: RawDate = None
    annual_interest_rate_percent: RawAmount = 0
    goal_name: str = "Your Goal"


class Milestone(BaseModel):
    percentage: int
    months_to_reach: int
    already_reached: bool = False


class SavingsPlan(BaseModel):
    monthly_savings_required: float
    total_months: int
    remaining_amount: float
    total_interest_earned: float
    progress_percent: float
    milestones: List[Milestone] = Field(default_factory=list)


class Alert(BaseModel):
    level: Literal["warning", "success"]
    message: str


class SavingsOutcome(BaseModel):
    goal_name: str
    currency: str
    plan: Optional[SavingsPlan] = None
    alert: Optional[Alert] = None

    @property
    def is_usable(self) -> bool:
        return self.plan is not None and (self.alert is None or self.alert.level != "warning")


# -------------------------
# Net worth
# -------------------------

class FinancialItem(BaseModel):
    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    name: str = ""
    value: Decimal = Decimal(0)
    category: str = "other"

    @field_validator("value", mode="before")
    @classmethod
    def _lenient_value(cls, v):
        return to_decimal(v)

    @field_validator("name", mode="before")
    @classmethod
    def _name_text(cls, v):
        return "" if v is None else str(v)

    @field_validator("category", mode="before")
    @classmethod
    def _category_text(cls, v):
        return "other" if v is None or str(v).strip() == "" else str(v)


class NetWorthSnapshot(BaseModel):
    currency: str
    total_assets: float
    total_liabilities: float
    net_worth: float
    assets_breakdown: List[FinancialItem] = Field(default_factory=list)
    liabilities_breakdown: List[FinancialItem] = Field(default_factory=list)
    asset_to_liability_ratio: float = Field(..., description="assets/liabilities; inf when there are no liabilities")
    ratio_display: str
    is_healthy: bool
    health_status: Literal["healthy", "needs_improvement"]
    net_worth_status: Literal["positive", "negative"]
