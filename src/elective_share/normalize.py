"""Lenient parsing of user-entered amounts and dates.

Case facts arrive as whatever the person typed: "$1,250.00", "12 %", blank
fields, half-finished dates. Nothing here raises; unusable input becomes zero
(amounts) or None (dates) so a calculation can always run on partial data.
"""

import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Optional, Union

RawAmount = Optional[Union[Decimal, int, float, str]]
RawDate = Optional[Union[date, str]]

ZERO = Decimal("0")

_NON_NUMERIC = re.compile(r"[^0-9.\-]")
# Longest leading literal, the way a lenient float parser reads "12.5.3" as 12.5
_LEADING_NUMBER = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)")

DATE_FORMATS = (
    "%Y-%m-%d",
    "%m/%d/%Y",
    "%m-%d-%Y",
)


def is_blank(value: Any) -> bool:
    """True for None and empty or whitespace-only strings."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def to_amount(value: Any) -> Decimal:
    """Convert a raw entry into a Decimal amount.

    Every character other than digits, minus signs and decimal points is
    stripped before parsing. Empty, unparseable and non-finite input returns 0.

    >>> to_amount("$1,250.50")
    Decimal('1250.50')
    >>> to_amount("n/a")
    Decimal('0')
    """
    if value is None or isinstance(value, bool):
        return ZERO

    if isinstance(value, Decimal):
        return value if value.is_finite() else ZERO

    if isinstance(value, int):
        return Decimal(value)

    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return ZERO
        return Decimal(str(value))

    cleaned = _NON_NUMERIC.sub("", str(value))
    match = _LEADING_NUMBER.match(cleaned)
    if not match:
        return ZERO

    try:
        return Decimal(match.group(0))
    except InvalidOperation:
        return ZERO


def parse_date(value: Any) -> Optional[date]:
    """Parse a calendar date, returning None for blank or malformed input."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if is_blank(value) or not isinstance(value, str):
        return None

    text = value.strip()
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue

    return None
