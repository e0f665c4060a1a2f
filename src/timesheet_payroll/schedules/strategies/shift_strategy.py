from __future__ import annotations

from ...common.datetime_utils import days_in_month
from ...core.constants import LONG_SHIFT_HOURS
from .base import ScheduleStrategy


class AlternatingShiftStrategy(ScheduleStrategy):
    """2/2 and 3/3: half of the month's days, 12-hour shifts."""

    shift_hours = LONG_SHIFT_HOURS

    def work_days(self, year: int, month: int) -> int:
        return days_in_month(year, month) // 2
