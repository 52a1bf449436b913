from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from pydantic import ValidationError

from wealthcalc.core.schemas import CalcResponse, ErrorEnvelope
from wealthcalc.utils.calc_models import FinancialItem, InvestmentParameters, RawDate, SavingsGoal
from wealthcalc.utils.investment_engine import growth_schedule, project, validate_investment
from wealthcalc.utils.logging import get_logger, set_calculator
from wealthcalc.utils.networth_engine import summarize
from wealthcalc.utils.savings_engine import plan

logger = get_logger("tools.calc")

# camelCase field names used by the web forms -> canonical model fields
_INVESTMENT_ALIASES = {
    "initialAmount": "initial_amount",
    "monthlyContribution": "monthly_contribution",
    "annualReturn": "annual_return_percent",
    "annualReturnPercent": "annual_return_percent",
    "compoundingFrequency": "compounding_frequency",
}

_SAVINGS_ALIASES = {
    "goalAmount": "goal_amount",
    "currentSavings": "current_savings",
    "targetDate": "target_date",
    "interestRate": "annual_interest_rate_percent",
    "annualInterestRatePercent": "annual_interest_rate_percent",
    "goalName": "goal_name",
}


def _canonical(payload: Optional[Dict[str, Any]], aliases: Dict[str, str]) -> Dict[str, Any]:
    p = dict(payload or {})
    for alias, field in aliases.items():
        if field not in p and alias in p:
            p[field] = p.pop(alias)
        else:
            p.pop(alias, None)
    return p


def tool_project_investment(payload: Dict[str, Any]) -> Dict[str, Any]:
    params = InvestmentParameters(**_canonical(payload, _INVESTMENT_ALIASES))
    out = project(params).model_dump()
    out["issues"] = validate_investment(params)
    return out


def tool_investment_schedule(payload: Dict[str, Any]) -> List[Dict[str, Any]]:
    params = InvestmentParameters(**_canonical(payload, _INVESTMENT_ALIASES))
    return growth_schedule(params).to_dict(orient="records")


def tool_plan_savings(payload: Dict[str, Any], as_of: RawDate = None) -> Dict[str, Any]:
    goal = SavingsGoal(**_canonical(payload, _SAVINGS_ALIASES))
    return plan(goal, as_of=as_of).model_dump()


def tool_summarize_net_worth(payload: Dict[str, Any]) -> Dict[str, Any]:
    p = dict(payload or {})
    assets = [FinancialItem.model_validate(a) for a in p.get("assets") or []]
    liabilities = [FinancialItem.model_validate(x) for x in p.get("liabilities") or []]
    return summarize(assets, liabilities, currency=p.get("currency")).model_dump()


_CALCULATORS: Dict[str, Callable[[Dict[str, Any]], Any]] = {
    "investment": tool_project_investment,
    "investment_schedule": lambda p: {"rows": tool_investment_schedule(p)},
    "savings": tool_plan_savings,
    "net_worth": tool_summarize_net_worth,
}


def _warnings_for(name: str, data: Dict[str, Any]) -> List[str]:
    if name == "investment":
        return list(data.get("issues") or [])
    if name == "savings":
        alert = data.get("alert")
        if alert and alert.get("level") == "warning":
            return [alert["message"]]
    return []


def run_calculator(name: str, payload: Dict[str, Any]) -> CalcResponse:
    """Dispatch a named calculator; malformed payloads come back as an error envelope."""
    fn = _CALCULATORS.get(name)
    if fn is None:
        return CalcResponse(
            calculator=name,
            error=ErrorEnvelope(code="UNKNOWN_CALCULATOR", message=f"Unknown calculator: {name}"),
        )

    set_calculator(name)
    try:
        data = fn(payload)
    except ValidationError as e:
        logger.warning("Rejected %s payload: %s", name, e.error_count())
        return CalcResponse(
            calculator=name,
            error=ErrorEnvelope(
                code="INVALID_PAYLOAD",
                message=str(e),
                details={"errors": e.errors(include_url=False, include_context=False, include_input=False)},
            ),
        )

    return CalcResponse(calculator=name, data=data, warnings=_warnings_for(name, data))
