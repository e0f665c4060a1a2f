from __future__ import annotations

from ...common.datetime_utils import days_in_month
from .base import ScheduleStrategy


class RotationStrategy(ScheduleStrategy):
    """вахта (7/0): every day of the month is worked."""

    def work_days(self, year: int, month: int) -> int:
        return days_in_month(year, month)
