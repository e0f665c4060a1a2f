from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Mapping

from ..common.datetime_utils import month_dates
from ..core.constants import DEFAULT_ADVANCE_CUTOFF_DAY
from .model import Hours, TimeEntry


@dataclass(frozen=True)
class HoursSummary:
    """Actual hours for a month and their advance (days <= cutoff) / main split."""

    actual_hours: Hours = 0
    advance_hours: Hours = 0
    main_hours: Hours = 0


def index_entries(entries: Iterable[TimeEntry]) -> dict[str, dict[date, TimeEntry]]:
    """Group entries by employee and date. A later entry for the same day replaces the earlier one."""
    by_employee: dict[str, dict[date, TimeEntry]] = {}
    for entry in entries:
        by_employee.setdefault(entry.employee_id, {})[entry.work_date] = entry
    return by_employee


class AttendanceAggregator:
    def __init__(self, *, advance_cutoff_day: int = DEFAULT_ADVANCE_CUTOFF_DAY):
        self._cutoff = int(advance_cutoff_day)

    def summarize(self, employee_id: str, entries: Iterable[TimeEntry], year: int, month: int) -> HoursSummary:
        own = index_entries(e for e in entries if e.employee_id == employee_id)
        return self.summarize_days(own.get(employee_id, {}), year, month)

    def summarize_days(self, by_date: Mapping[date, TimeEntry], year: int, month: int) -> HoursSummary:
        advance: Hours = 0
        main: Hours = 0
        for day in month_dates(year, month):
            entry = by_date.get(day)
            if entry is None:
                continue
            if day.day <= self._cutoff:
                advance += entry.counted_hours
            else:
                main += entry.counted_hours
        return HoursSummary(actual_hours=advance + main, advance_hours=advance, main_hours=main)
