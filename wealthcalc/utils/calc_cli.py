from __future__ import annotations

import argparse
import json
from typing import List, Optional

from wealthcalc.core.config import SETTINGS
from wealthcalc.utils.calc_models import FinancialItem, InvestmentParameters, SavingsGoal
from wealthcalc.utils.formatting import format_currency, format_percentage
from wealthcalc.utils.investment_engine import project, validate_investment
from wealthcalc.utils.logging import setup_logging
from wealthcalc.utils.networth_engine import summarize, top_items
from wealthcalc.utils.savings_engine import default_target_date, plan


def _parse_items(pairs: Optional[List[str]]) -> List[FinancialItem]:
    items: List[FinancialItem] = []
    for raw in pairs or []:
        name, _, value = raw.partition("=")
        items.append(FinancialItem(name=name.strip(), value=value))
    return items


def cmd_investment(args: argparse.Namespace) -> int:
    params = InvestmentParameters(
        currency=args.currency,
        initial_amount=args.initial,
        monthly_contribution=args.monthly,
        annual_return_percent=args.rate,
        years=args.years,
        compounding_frequency=args.compounding,
    )
    res = project(params)
    issues = validate_investment(params)

    if args.json:
        print(json.dumps({**res.model_dump(), "issues": issues}, indent=2))
        return 0

    cur = res.currency
    print(f"Final amount:        {format_currency(res.final_amount, cur)}")
    print(f"Total contributions: {format_currency(res.total_contributions, cur)}")
    print(f"Interest earned:     {format_currency(res.interest_earned, cur)}")
    print(f"Total growth:        {format_percentage(res.total_growth_percent)}")
    for i in issues:
        print(f"WARN: {i}")
    return 0


def cmd_savings(args: argparse.Namespace) -> int:
    goal = SavingsGoal(
        currency=args.currency,
        goal_amount=args.goal,
        current_savings=args.current,
        target_date=args.target_date or default_target_date(),
        annual_interest_rate_percent=args.rate,
        goal_name=args.name,
    )
    out = plan(goal)

    if args.json:
        print(out.model_dump_json(indent=2))
    else:
        if out.plan is not None:
            p = out.plan
            print(f"{out.goal_name}: save {format_currency(p.monthly_savings_required, out.currency)} per month")
            print(f"Months to goal:  {p.total_months}")
            print(f"Amount needed:   {format_currency(p.remaining_amount, out.currency)}")
            print(f"Interest earned: {format_currency(p.total_interest_earned, out.currency)}")
            print(f"Progress:        {format_percentage(p.progress_percent)}")
            for m in p.milestones:
                when = "Already reached" if m.already_reached else f"{m.months_to_reach} months"
                print(f"  {m.percentage}% complete: {when}")
        if out.alert is not None:
            print(f"{out.alert.level.upper()}: {out.alert.message}")

    return 2 if out.alert is not None and out.alert.level == "warning" else 0


def cmd_networth(args: argparse.Namespace) -> int:
    snap = summarize(_parse_items(args.asset), _parse_items(args.liability), currency=args.currency)

    if args.json:
        print(snap.model_dump_json(indent=2))
        return 0

    cur = snap.currency
    print(f"Total assets:      {format_currency(snap.total_assets, cur)}")
    print(f"Total liabilities: {format_currency(snap.total_liabilities, cur)}")
    print(f"Net worth:         {format_currency(snap.net_worth, cur)} ({snap.net_worth_status})")
    print(f"Asset/liability:   {snap.ratio_display}:1 ({snap.health_status.replace('_', ' ')})")
    for it in top_items(snap.assets_breakdown):
        print(f"  + {it.name}: {format_currency(it.value, cur)}")
    for it in top_items(snap.liabilities_breakdown):
        print(f"  - {it.name}: {format_currency(it.value, cur)}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="wealthcalc", description="Personal finance calculators")
    p.add_argument("--log-level", default=SETTINGS.log_level)
    sub = p.add_subparsers(dest="cmd", required=True)

    inv = sub.add_parser("investment", help="Project investment growth")
    inv.add_argument("--currency", default=SETTINGS.default_currency)
    inv.add_argument("--initial", default="10000")
    inv.add_argument("--monthly", default="500")
    inv.add_argument("--rate", default="7", help="Annual return in percent")
    inv.add_argument("--years", default="10")
    inv.add_argument("--compounding", default=str(SETTINGS.default_compounding_frequency))
    inv.add_argument("--json", action="store_true")
    inv.set_defaults(func=cmd_investment)

    sav = sub.add_parser("savings", help="Plan monthly savings for a goal")
    sav.add_argument("--currency", default=SETTINGS.default_currency)
    sav.add_argument("--goal", default="50000")
    sav.add_argument("--current", default="5000")
    sav.add_argument("--target-date", default=None, help="ISO date, defaults to two years from today")
    sav.add_argument("--rate", default="2", help="Annual interest in percent")
    sav.add_argument("--name", default="Your Goal")
    sav.add_argument("--json", action="store_true")
    sav.set_defaults(func=cmd_savings)

    nw = sub.add_parser("networth", help="Summarize assets and liabilities")
    nw.add_argument("--currency", default=SETTINGS.net_worth_currency)
    nw.add_argument("--asset", action="append", metavar="NAME=VALUE")
    nw.add_argument("--liability", action="append", metavar="NAME=VALUE")
    nw.add_argument("--json", action="store_true")
    nw.set_defaults(func=cmd_networth)

    return p


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    rc = args.func(args)
    raise SystemExit(rc)


if __name__ == "__main__":
    main()
