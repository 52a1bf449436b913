from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation, getcontext
from typing import List, NamedTuple

import pandas as pd

from wealthcalc.core.config import SETTINGS
from wealthcalc.utils.calc_models import InvestmentParameters, InvestmentResult
from wealthcalc.utils.logging import get_logger
from wealthcalc.utils.parsing import has_invalid_characters, to_decimal

getcontext().prec = 28

logger = get_logger("calc.investment")

MIN_YEARS = Decimal(1)
MAX_YEARS = Decimal(50)
MIN_RETURN_PERCENT = Decimal(0)
MAX_RETURN_PERCENT = Decimal(50)

SCHEDULE_COLUMNS = ["year", "contributions", "balance", "interest"]


class _Inputs(NamedTuple):
    initial: Decimal
    monthly: Decimal
    rate: Decimal
    years: Decimal
    frequency: int


class _Totals(NamedTuple):
    final_amount: Decimal
    total_contributions: Decimal
    monthly_total: Decimal


def _safe_float(x: Decimal, places: str = "0.01") -> float:
    try:
        return float(x.quantize(Decimal(places)))
    except InvalidOperation:
        # too many digits to quantize at the context precision
        return float(x)


def _finite(*values: float) -> bool:
    return all(math.isfinite(v) for v in values)


def _frequency(raw) -> int:
    n = to_decimal(raw)
    if n < 1 or n != n.to_integral_value():
        logger.info("Invalid compounding frequency %r; using default %s", raw, SETTINGS.default_compounding_frequency)
        return SETTINGS.default_compounding_frequency
    return int(n)


def _normalize(params: InvestmentParameters) -> _Inputs:
    return _Inputs(
        initial=to_decimal(params.initial_amount),
        monthly=to_decimal(params.monthly_contribution),
        rate=to_decimal(params.annual_return_percent) / Decimal(100),
        years=to_decimal(params.years),
        frequency=_frequency(params.compounding_frequency),
    )


def _is_degenerate(inp: _Inputs) -> bool:
    return inp.years <= 0 or (inp.initial == 0 and inp.monthly == 0)


def _compound(principal: Decimal, rate: Decimal, frequency: int, years: Decimal) -> Decimal:
    # A = P(1 + r/n)^(nt)
    n = Decimal(frequency)
    return principal * ((Decimal(1) + rate / n) ** (n * years))


def annuity_future_value(payment: Decimal, periodic_rate: Decimal, periods: Decimal) -> Decimal:
    """Future value of an ordinary annuity: PMT * ((1 + i)^n - 1) / i."""
    if periodic_rate == 0:
        return payment * periods
    return payment * (((Decimal(1) + periodic_rate) ** periods) - Decimal(1)) / periodic_rate


def _totals(inp: _Inputs, years: Decimal) -> _Totals:
    months = years * Decimal(12)
    grown_initial = _compound(inp.initial, inp.rate, inp.frequency, years)
    contributions_fv = annuity_future_value(inp.monthly, inp.rate / Decimal(12), months)
    monthly_total = inp.monthly * months
    return _Totals(
        final_amount=grown_initial + contributions_fv,
        total_contributions=inp.initial + monthly_total,
        monthly_total=monthly_total,
    )


def _zero_result(params: InvestmentParameters, initial: Decimal) -> InvestmentResult:
    total_contributions = _safe_float(initial)
    return InvestmentResult(
        currency=params.currency,
        final_amount=0.0,
        total_contributions=total_contributions if _finite(total_contributions) else 0.0,
        interest_earned=0.0,
        total_growth_percent=0.0,
        monthly_contributions_total=0.0,
    )


def project(params: InvestmentParameters) -> InvestmentResult:
    """
    Project a lump sum plus monthly contributions over the investment period.

    The initial amount compounds at the chosen frequency; contributions are
    treated as an ordinary annuity compounding monthly. Never raises: malformed
    amounts count as zero and arithmetic failures yield a zeroed result.
    """
    inp = _normalize(params)
    if _is_degenerate(inp):
        logger.info("Degenerate investment inputs (years=%s, initial=%s, monthly=%s)", inp.years, inp.initial, inp.monthly)
        return _zero_result(params, inp.initial)

    try:
        totals = _totals(inp, inp.years)
        final_amount = _safe_float(totals.final_amount)
        total_contributions = _safe_float(totals.total_contributions)
        monthly_total = _safe_float(totals.monthly_total)
    except ArithmeticError as e:
        logger.warning("Investment projection failed for %s: %s", params.model_dump(), e)
        return _zero_result(params, inp.initial)

    if not _finite(final_amount, total_contributions, monthly_total):
        logger.warning("Investment projection overflowed for %s", params.model_dump())
        return _zero_result(params, inp.initial)

    # exact float difference of the reported totals
    interest = final_amount - total_contributions
    growth = Decimal(str(interest)) / Decimal(str(total_contributions)) * Decimal(100) if total_contributions > 0 else Decimal(0)

    result = InvestmentResult(
        currency=params.currency,
        final_amount=final_amount,
        total_contributions=total_contributions,
        interest_earned=interest,
        total_growth_percent=_safe_float(growth, "0.0001"),
        monthly_contributions_total=monthly_total,
    )
    logger.debug("Investment projection final=%s contributions=%s", result.final_amount, result.total_contributions)
    return result


def growth_schedule(params: InvestmentParameters) -> pd.DataFrame:
    """Year-by-year balances using the same closed form as `project`."""
    inp = _normalize(params)
    if _is_degenerate(inp):
        return pd.DataFrame(columns=SCHEDULE_COLUMNS)
    if inp.years > MAX_YEARS:
        logger.info("Growth schedule skipped: %s years exceeds the %s year limit", inp.years, MAX_YEARS)
        return pd.DataFrame(columns=SCHEDULE_COLUMNS)

    checkpoints: List[Decimal] = [Decimal(y) for y in range(0, int(inp.years) + 1)]
    if inp.years != inp.years.to_integral_value():
        checkpoints.append(inp.years)

    rows = []
    try:
        for t in checkpoints:
            totals = _totals(inp, t)
            balance = _safe_float(totals.final_amount)
            contributions = _safe_float(totals.total_contributions)
            if not _finite(balance, contributions):
                raise OverflowError(f"balance overflow at year {t}")
            rows.append({
                "year": float(t),
                "contributions": contributions,
                "balance": balance,
                "interest": balance - contributions,
            })
    except ArithmeticError as e:
        logger.warning("Growth schedule failed for %s: %s", params.model_dump(), e)
        return pd.DataFrame(columns=SCHEDULE_COLUMNS)

    return pd.DataFrame(rows, columns=SCHEDULE_COLUMNS)


def validate_investment(params: InvestmentParameters) -> List[str]:
    """Advisory checks; the projection still runs whatever this returns."""
    errors: List[str] = []

    initial = to_decimal(params.initial_amount)
    monthly = to_decimal(params.monthly_contribution)
    annual_return = to_decimal(params.annual_return_percent)
    years = to_decimal(params.years)

    if initial < 0:
        errors.append("Initial amount cannot be negative")

    if monthly < 0:
        errors.append("Monthly contribution cannot be negative")

    if annual_return < MIN_RETURN_PERCENT or annual_return > MAX_RETURN_PERCENT:
        errors.append("Annual return must be between 0% and 50%")

    if years < MIN_YEARS or years > MAX_YEARS:
        errors.append("Investment period must be between 1 and 50 years")

    if initial == 0 and monthly == 0:
        errors.append("Enter an initial amount or a monthly contribution")

    freq = to_decimal(params.compounding_frequency)
    if freq < 1 or freq != freq.to_integral_value() or has_invalid_characters(params.compounding_frequency):
        errors.append("Compounding frequency must be a positive whole number")

    labels = {
        "initial_amount": "Initial amount",
        "monthly_contribution": "Monthly contribution",
        "annual_return_percent": "Annual return",
        "years": "Investment period",
    }
    for field, label in labels.items():
        if has_invalid_characters(getattr(params, field)):
            errors.append(f"{label} contains invalid characters")

    return errors
