from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from wealthcalc.utils.parsing import has_invalid_characters, to_datetime, to_decimal


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("1,234.56", Decimal("1234.56")),
        ("1,,2,3,4", Decimal("1234")),
        ("1.2.3", Decimal("1.23")),
        ("-5", Decimal("5")),
        ("  42 ", Decimal("42")),
        ("$10k", Decimal("10")),
        ("", Decimal(0)),
        (".", Decimal(0)),
        ("abc", Decimal(0)),
        (None, Decimal(0)),
        (7, Decimal(7)),
        (2.5, Decimal("2.5")),
        (-3, Decimal(-3)),
        (float("nan"), Decimal(0)),
        (float("inf"), Decimal(0)),
        (Decimal("Infinity"), Decimal(0)),
    ],
)
def test_to_decimal(raw, expected):
    assert to_decimal(raw) == expected


def test_to_decimal_ignores_booleans():
    assert to_decimal(True) == 0


@pytest.mark.parametrize("raw", ["1,000", "12.50", "", "  3 ", 5, None])
def test_clean_inputs_have_no_invalid_characters(raw):
    assert not has_invalid_characters(raw)


@pytest.mark.parametrize("raw", ["-5", "1e5", "10%", "$100", "ten"])
def test_invalid_characters_detected(raw):
    assert has_invalid_characters(raw)


def test_to_datetime_variants():
    assert to_datetime(date(2026, 5, 1)) == datetime(2026, 5, 1)
    assert to_datetime("2026-05-01") == datetime(2026, 5, 1)
    assert to_datetime(" 2026-05-01T10:30:00 ") == datetime(2026, 5, 1, 10, 30)
    aware = datetime(2026, 5, 1, 12, tzinfo=timezone(timedelta(hours=2)))
    assert to_datetime(aware) == datetime(2026, 5, 1, 10)
    assert to_datetime("") is None
    assert to_datetime("soon") is None
    assert to_datetime(None) is None
    assert to_datetime(20260501) is None
