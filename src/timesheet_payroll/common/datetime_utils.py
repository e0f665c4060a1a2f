from __future__ import annotations

import calendar
from datetime import date, datetime
from typing import Iterator, Union

from ..core.constants import MONTH_FORMAT
from ..core.exceptions import InputError


def parse_iso_date(value: Union[str, date]) -> date:
    """Parse YYYY-MM-DD string into date (dates pass through unchanged)."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError) as exc:
        raise InputError(f"Invalid date: {value!r}, expected YYYY-MM-DD") from exc


def parse_month(value: str) -> tuple[int, int]:
    """Parse a "YYYY-MM" period string into (year, month)."""
    try:
        parsed = datetime.strptime(value.strip(), MONTH_FORMAT)
    except (AttributeError, TypeError, ValueError) as exc:
        raise InputError(f"Invalid month: {value!r}, expected YYYY-MM") from exc
    return parsed.year, parsed.month


def format_month(year: int, month: int) -> str:
    return f"{int(year):04d}-{int(month):02d}"


def days_in_month(year: int, month: int) -> int:
    if not 1 <= int(month) <= 12:
        raise InputError(f"Invalid month number: {month!r}")
    return calendar.monthrange(int(year), int(month))[1]


def month_dates(year: int, month: int) -> Iterator[date]:
    """Yield every calendar day of the month, 1..days_in_month."""
    for day in range(1, days_in_month(year, month) + 1):
        yield date(int(year), int(month), day)


def last_day_of_month(year: int, month: int) -> date:
    return date(int(year), int(month), days_in_month(year, month))
