from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from wealthcalc.tools.calc_tools import (
    tool_investment_schedule,
    tool_plan_savings,
    tool_project_investment,
    tool_summarize_net_worth,
)
from wealthcalc.utils.savings_engine import default_target_date

def main():
    investment = {
        "currency": "USD",
        "initialAmount": "10,000",
        "monthlyContribution": "500",
        "annualReturn": "7",
        "years": "10",
        "compoundingFrequency": 2,
    }
    inv = tool_project_investment(investment)
    print("Final amount:", inv["final_amount"], inv["currency"])
    print("Total contributions:", inv["total_contributions"])
    print("Interest earned:", inv["interest_earned"])
    print("Growth %:", inv["total_growth_percent"])
    for row in tool_investment_schedule(investment):
        print("Year:", row["year"], row["balance"])

    savings = {
        "currency": "USD",
        "goalAmount": 50000,
        "currentSavings": 5000,
        "targetDate": default_target_date().isoformat(),
        "interestRate": 2,
        "goalName": "House deposit",
    }
    sp = tool_plan_savings(savings)
    if sp["alert"]:
        print("Alert:", sp["alert"]["level"], sp["alert"]["message"])
    if sp["plan"]:
        print("Monthly savings:", sp["plan"]["monthly_savings_required"])
        for m in sp["plan"]["milestones"]:
            print("Milestone:", m["percentage"], m["months_to_reach"])

    nw = tool_summarize_net_worth({
        "currency": "NGN",
        "assets": [{"name": "Cash", "value": "250,000"}, {"name": "Vehicles", "value": 1500000}],
        "liabilities": [{"name": "Car Loan", "value": 400000}],
    })
    print("Net worth:", nw["net_worth"], nw["currency"])
    print("Ratio:", nw["ratio_display"], nw["health_status"])

if __name__ == "__main__":
    main()
