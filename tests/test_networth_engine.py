import math
from decimal import Decimal

from wealthcalc.core.config import SETTINGS
from wealthcalc.utils.calc_models import FinancialItem
from wealthcalc.utils.networth_engine import (
    add_item,
    default_assets,
    default_liabilities,
    remove_item,
    summarize,
    top_items,
    update_item,
)


def test_summary_totals_breakdown_and_ratio():
    assets = [FinancialItem(id="a", value=100), FinancialItem(id="b", value=0)]
    liabilities = [FinancialItem(id="l", value=40)]
    snap = summarize(assets, liabilities, currency="USD")

    assert snap.total_assets == 100
    assert snap.total_liabilities == 40
    assert snap.net_worth == 60
    assert [it.id for it in snap.assets_breakdown] == ["a"]
    assert snap.asset_to_liability_ratio == 2.5
    assert snap.ratio_display == "2.50"
    assert snap.is_healthy
    assert snap.health_status == "healthy"
    assert snap.net_worth_status == "positive"


def test_no_liabilities_gives_infinite_ratio():
    snap = summarize([FinancialItem(value=10)], [])
    assert math.isinf(snap.asset_to_liability_ratio)
    assert snap.ratio_display == "∞"
    assert snap.is_healthy
    assert snap.currency == SETTINGS.net_worth_currency


def test_empty_lists_give_zero_ratio():
    snap = summarize(default_assets(), default_liabilities())
    assert snap.total_assets == 0
    assert snap.asset_to_liability_ratio == 0.0
    assert snap.health_status == "needs_improvement"
    assert snap.assets_breakdown == []
    assert snap.liabilities_breakdown == []


def test_negative_net_worth_needs_improvement():
    snap = summarize([FinancialItem(value=100)], [FinancialItem(value=80)])
    assert snap.asset_to_liability_ratio == 1.25
    assert not snap.is_healthy

    snap = summarize([FinancialItem(value=50)], [FinancialItem(value=80)])
    assert snap.net_worth == -30
    assert snap.net_worth_status == "negative"


def test_missing_values_count_as_zero():
    item = FinancialItem(name="Cash", value=None)
    assert item.value == Decimal(0)
    assert summarize([item, FinancialItem(value="1,250.50")], []).total_assets == 1250.5


def test_add_then_remove_round_trips():
    base = default_assets()
    added = add_item(base)
    assert len(added) == len(base) + 1
    assert len(base) == 9

    new = added[-1]
    assert new.name == ""
    assert new.value == 0
    assert new.id not in {it.id for it in base}

    assert remove_item(added, new.id) == base


def test_add_keeps_caller_item():
    item = FinancialItem(id="x", name="Boat", value=5000, category="property")
    assert add_item([], item) == [item]


def test_generated_ids_are_unique():
    items = []
    for _ in range(5):
        items = add_item(items)
    assert len({it.id for it in items}) == 5


def test_update_changes_one_field_of_one_item():
    base = default_liabilities()
    updated = update_item(base, "3", "value", "1,500")

    assert updated[2].value == Decimal("1500")
    assert updated[2].name == "Mortgage"
    assert updated[:2] == base[:2]
    assert updated[3:] == base[3:]
    assert base[2].value == 0

    renamed = update_item(updated, "3", "name", "Home loan")
    assert renamed[2].name == "Home loan"
    assert renamed[2].value == Decimal("1500")


def test_update_unknown_id_or_field_is_a_noop():
    base = default_assets()
    assert update_item(base, "missing", "value", 10) == base
    assert update_item(base, "1", "id", "zzz") == base


def test_remove_unknown_id_is_a_noop():
    base = default_assets()
    assert remove_item(base, "missing") == base


def test_summarize_is_idempotent():
    assets = [FinancialItem(id="a", value=100)]
    liabilities = [FinancialItem(id="l", value=40)]
    assert summarize(assets, liabilities).model_dump() == summarize(assets, liabilities).model_dump()


def test_top_items_sorted_by_value():
    items = [FinancialItem(id=str(v), value=v) for v in (5, 50, 1, 20, 10, 30)]
    assert [it.id for it in top_items(items)] == ["50", "30", "20", "10", "5"]
