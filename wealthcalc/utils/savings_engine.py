from __future__ import annotations

import math
from datetime import date, datetime, UTC
from decimal import Decimal, InvalidOperation
from typing import Dict, List, Optional, Sequence, Tuple

from wealthcalc.utils.calc_models import Alert, Milestone, RawDate, SavingsGoal, SavingsOutcome, SavingsPlan
from wealthcalc.utils.logging import get_logger
from wealthcalc.utils.parsing import to_datetime, to_decimal

logger = get_logger("calc.savings")

DAYS_PER_MONTH = 30.44
MILESTONE_PERCENTAGES: Tuple[int, ...] = (25, 50, 75, 100)
_HALF_CENT = Decimal("0.005")

MSG_INVALID_INPUT = "Please enter a valid goal amount and target date."
MSG_PAST_DATE = "Target date must be in the future."
MSG_GOAL_REACHED = "Congratulations! You've already reached your savings goal!"
MSG_UNCOMPUTABLE = "Unable to compute a savings plan for these inputs."


def _money(x: Decimal) -> float:
    try:
        return float(x.quantize(Decimal("0.01")))
    except InvalidOperation:
        return float(x)


def _pct(x: Decimal) -> float:
    try:
        return float(x.quantize(Decimal("0.0001")))
    except InvalidOperation:
        return float(x)


def months_until(target: datetime, as_of: datetime) -> int:
    """Whole months (30.44-day months, rounded up) from `as_of` to `target`."""
    days = (target - as_of).total_seconds() / 86400.0
    return math.ceil(days / DAYS_PER_MONTH)


def default_target_date(today: Optional[date] = None) -> date:
    """Two years from today; Feb 29 falls back to Feb 28."""
    today = today or datetime.now(UTC).date()
    try:
        return today.replace(year=today.year + 2)
    except ValueError:
        return today.replace(year=today.year + 2, day=28)


def required_monthly_savings(
    goal_amount: Decimal,
    current_savings: Decimal,
    total_months: int,
    monthly_rate: Decimal,
) -> Tuple[Decimal, Decimal]:
    """
    Level monthly payment that grows current savings plus contributions to the goal.

    Inverts the ordinary-annuity future value: PMT = gap * i / ((1 + i)^n - 1),
    where gap is what compounding the current savings alone leaves uncovered.
    Returns (payment, interest earned); interest is floored at zero.
    """
    remaining = goal_amount - current_savings
    n = Decimal(total_months)

    if monthly_rate <= 0:
        payment = remaining / n
    else:
        growth = (Decimal(1) + monthly_rate) ** total_months
        gap = goal_amount - current_savings * growth
        payment = Decimal(0) if gap <= 0 else gap * monthly_rate / (growth - Decimal(1))

    interest = remaining - payment * n
    return payment, max(Decimal(0), interest)


def build_milestones(
    monthly_savings: Decimal,
    current_savings: Decimal,
    total_months: int,
    monthly_rate: Decimal,
    goal_amount: Decimal,
    percentages: Sequence[int] = MILESTONE_PERCENTAGES,
) -> List[Milestone]:
    """
    Months needed to reach each percentage of the goal.

    Each month's deposit earns that month's interest: b = (b + payment) * (1 + i),
    or b + payment when the rate is not positive. Thresholds met by current
    savings alone report 0 months; a threshold still short at the end of the
    horizon reports the full horizon.
    """
    thresholds = {p: goal_amount * Decimal(p) / Decimal(100) for p in percentages}
    reached: Dict[int, int] = {}

    for p, amount in thresholds.items():
        if current_savings >= amount:
            reached[p] = 0

    balance = current_savings
    growth = Decimal(1) + max(monthly_rate, Decimal(0))
    month = 0
    while len(reached) < len(thresholds) and month < total_months:
        month += 1
        balance = (balance + monthly_savings) * growth
        for p, amount in thresholds.items():
            if p not in reached and balance + _HALF_CENT >= amount:
                reached[p] = month

    return [
        Milestone(
            percentage=p,
            months_to_reach=reached.get(p, total_months),
            already_reached=reached.get(p) == 0,
        )
        for p in sorted(thresholds)
    ]


def plan(goal: SavingsGoal, *, as_of: RawDate = None) -> SavingsOutcome:
    """
    Solve for the monthly saving needed to hit `goal` by its target date.

    Invalid or degenerate inputs never raise; they come back as an Alert and
    callers should check it before trusting the plan.
    """
    outcome = SavingsOutcome(goal_name=goal.goal_name, currency=goal.currency)

    goal_amount = to_decimal(goal.goal_amount)
    current_savings = to_decimal(goal.current_savings)
    target = to_datetime(goal.target_date)

    if target is None or goal_amount <= 0:
        outcome.alert = Alert(level="warning", message=MSG_INVALID_INPUT)
        return outcome

    now = to_datetime(as_of) if as_of is not None else datetime.now(UTC).replace(tzinfo=None)
    if now is None:
        logger.warning("Unparseable evaluation date %r for %s", as_of, goal.goal_name)
        outcome.alert = Alert(level="warning", message=MSG_INVALID_INPUT)
        return outcome

    total_months = months_until(target, now)
    if total_months <= 0:
        logger.info("Savings target %s is not after %s", target.date(), now.date())
        outcome.alert = Alert(level="warning", message=MSG_PAST_DATE)
        return outcome

    remaining = goal_amount - current_savings
    progress = current_savings / goal_amount * Decimal(100)

    if remaining <= 0:
        outcome.alert = Alert(level="success", message=MSG_GOAL_REACHED)
        outcome.plan = SavingsPlan(
            monthly_savings_required=0.0,
            total_months=total_months,
            remaining_amount=0.0,
            total_interest_earned=0.0,
            progress_percent=_pct(progress),
            milestones=[],
        )
        return outcome

    monthly_rate = to_decimal(goal.annual_interest_rate_percent) / Decimal(100) / Decimal(12)
    try:
        payment, interest = required_monthly_savings(goal_amount, current_savings, total_months, monthly_rate)
        milestones = build_milestones(payment, current_savings, total_months, monthly_rate, goal_amount)
        values = (_money(payment), _money(remaining), _money(interest), _pct(progress))
    except ArithmeticError as e:
        logger.warning("Savings plan failed for %s: %s", goal.goal_name, e)
        outcome.alert = Alert(level="warning", message=MSG_UNCOMPUTABLE)
        return outcome

    if not all(math.isfinite(v) for v in values):
        outcome.alert = Alert(level="warning", message=MSG_UNCOMPUTABLE)
        return outcome

    outcome.plan = SavingsPlan(
        monthly_savings_required=values[0],
        total_months=total_months,
        remaining_amount=values[1],
        total_interest_earned=values[2],
        progress_percent=values[3],
        milestones=milestones,
    )
    logger.debug("Savings plan months=%s monthly=%s", total_months, outcome.plan.monthly_savings_required)
    return outcome
