from __future__ import annotations

import re
from datetime import date, datetime, timedelta
from typing import Iterator

from ..core.exceptions import ValidationError

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

_DAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date.

    Raises ValidationError for anything that is not a zero-padded, existing
    calendar date (e.g. "2025-1-5" or "2025-02-31").
    """
    if not isinstance(value, str) or not _ISO_DATE.match(value):
        raise ValidationError(f"Invalid date: {value!r} (expected YYYY-MM-DD)")
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError as e:
        raise ValidationError(f"Invalid date: {value!r}") from e


def to_iso(value: date) -> str:
    return value.strftime("%Y-%m-%d")


def weekday_index(value: date) -> int:
    """Day of week with 0 = Sunday ... 6 = Saturday."""
    return value.isoweekday() % 7


def day_name(index: int) -> str:
    if 0 <= index < len(_DAY_NAMES):
        return _DAY_NAMES[index]
    return "Unknown"


def iter_dates(start: date, end: date) -> Iterator[date]:
    """Yield every date from start (inclusive) to end (exclusive)."""
    current = start
    while current < end:
        yield current
        current += timedelta(days=1)


def today_local() -> date:
    """Current local calendar date.

    Note: Only outer layers call this; the engine always receives `today`.
    """
    return date.today()
