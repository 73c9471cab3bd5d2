"""
Shared helpers for entity construction.
"""
from datetime import date, datetime
from decimal import Decimal
from typing import Optional, Union

Money = Union[Decimal, int, float, str]


def as_money(value: Money) -> Decimal:
    """Coerce a monetary value to Decimal without float artifacts."""
    if isinstance(value, Decimal):
        return value
    if value is None:
        return Decimal("0")
    return Decimal(str(value))


def as_date(value) -> Optional[date]:
    """
    Normalize a date-like value to a calendar date.

    Accepts date, datetime (time of day discarded) or an ISO string
    ('2024-03-01' or '2024-03-01T09:30:00'). Empty values map to None.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if len(text) > 10 and text[10] in ("T", " "):
        text = text[:10]
    return date.fromisoformat(text)
