from __future__ import annotations

from ...common.datetime_utils import month_dates
from .base import ScheduleStrategy


class WeekdayStrategy(ScheduleStrategy):
    """5/2: Monday to Friday, 8-hour days."""

    def work_days(self, year: int, month: int) -> int:
        return sum(1 for d in month_dates(year, month) if d.weekday() < 5)
