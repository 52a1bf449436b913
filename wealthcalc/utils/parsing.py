from __future__ import annotations

import re
from datetime import date, datetime, time, UTC
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

_NOT_NUMERIC_RE = re.compile(r"[^0-9.]")
_ALLOWED_INPUT_RE = re.compile(r"^[0-9.,]*$")


def _strip_to_number(text: str) -> str:
    """Keep digits and the first decimal point only."""
    cleaned = _NOT_NUMERIC_RE.sub("", text)
    head, dot, tail = cleaned.partition(".")
    return head + dot + tail.replace(".", "")


def to_decimal(value: Any) -> Decimal:
    """
    Normalize user input into a finite Decimal.

    Strings may carry thousands separators or stray characters; everything
    except digits and the first decimal point is dropped. Anything that still
    does not parse (empty, None, NaN, infinities) becomes zero.
    """
    if value is None or isinstance(value, bool):
        return Decimal(0)

    if isinstance(value, Decimal):
        d = value
    elif isinstance(value, (int, float)):
        try:
            d = Decimal(str(value))
        except InvalidOperation:
            return Decimal(0)
    else:
        text = _strip_to_number(str(value))
        if text in ("", "."):
            return Decimal(0)
        try:
            d = Decimal(text)
        except InvalidOperation:
            return Decimal(0)

    if not d.is_finite():
        return Decimal(0)
    return d


def has_invalid_characters(value: Any) -> bool:
    """True for strings holding anything other than digits, commas and dots."""
    if not isinstance(value, str):
        return False
    return _ALLOWED_INPUT_RE.match(value.strip()) is None


def to_datetime(value: Any) -> Optional[datetime]:
    """Coerce a date, datetime or ISO string into a naive UTC datetime."""
    if value is None:
        return None

    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime.combine(value, time.min)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            dt = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if dt.tzinfo is not None:
        dt = dt.astimezone(UTC).replace(tzinfo=None)
    return dt
