import math

from wealthcalc.core.schemas import COMPOUNDING_OPTIONS, CURRENCY_OPTIONS, CURRENCY_SYMBOLS
from wealthcalc.utils.formatting import clamp, format_currency, format_percentage, format_ratio


def test_format_currency_ranges():
    assert format_currency(12.3, "EUR") == "€12.30"
    assert format_currency(1234.5, "USD") == "$1,235"
    assert format_currency(999999, "GBP") == "£999,999"
    assert format_currency(2_500_000, "NGN") == "₦2.5M"


def test_format_currency_unknown_code_and_negative_amounts():
    assert format_currency(5, "XYZ") == "$5.00"
    assert format_currency(-5000, "USD") == "-$5,000"
    assert format_currency(-12.5, "inr") == "-₹12.50"


def test_format_percentage_and_ratio():
    assert format_percentage(12.345) == "12.3%"
    assert format_percentage(5, decimals=2) == "5.00%"
    assert format_ratio(math.inf) == "∞"
    assert format_ratio(2.5) == "2.50"


def test_clamp():
    assert clamp(60, 0, 50) == 50
    assert clamp(-1, 0, 50) == 0
    assert clamp(7, 0, 50) == 7


def test_catalog_covers_supported_currencies_and_frequencies():
    assert len(CURRENCY_OPTIONS) == 10
    assert CURRENCY_SYMBOLS["NGN"] == "₦"
    assert CURRENCY_SYMBOLS["INR"] == "₹"
    assert [o.frequency for o in COMPOUNDING_OPTIONS] == [12, 4, 2, 1]
