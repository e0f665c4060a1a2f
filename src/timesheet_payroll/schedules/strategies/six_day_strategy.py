from __future__ import annotations

from ...common.datetime_utils import days_in_month
from .base import ScheduleStrategy


class SixDayWeekStrategy(ScheduleStrategy):
    """6/1: six of every seven days."""

    def work_days(self, year: int, month: int) -> int:
        return days_in_month(year, month) * 6 // 7
