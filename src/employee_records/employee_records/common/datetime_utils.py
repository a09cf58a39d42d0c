from __future__ import annotations

import re
from datetime import date, datetime

from ..core.exceptions import ValidationError

ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_iso_date(value: str) -> date:
    """Parse a zero-padded YYYY-MM-DD string into a date."""
    text = value.strip() if isinstance(value, str) else ""
    if not ISO_DATE_PATTERN.match(text):
        raise ValidationError(f"Invalid date {value!r}, expected YYYY-MM-DD")
    try:
        return datetime.strptime(text, "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"Invalid date {value!r}, expected YYYY-MM-DD")


def to_iso(value: date) -> str:
    return value.strftime("%Y-%m-%d")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def today_local() -> date:
    return now_local().date()


def same_month(value: date, reference: date) -> bool:
    return value.year == reference.year and value.month == reference.month
