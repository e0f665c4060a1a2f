from __future__ import annotations

from typing import Iterable, Optional

from ..employees.model import Position
from .factory import ScheduleStrategyFactory


class ScheduleHoursCalculator:
    """Planned (norm) hours for a month, per work schedule."""

    def __init__(self, *, factory: Optional[ScheduleStrategyFactory] = None):
        self._factory = factory or ScheduleStrategyFactory()

    def planned_hours(self, schedule_code: Optional[str], year: int, month: int) -> int:
        return self._factory.for_code(schedule_code).planned_hours(year, month)

    def work_days(self, schedule_code: Optional[str], year: int, month: int) -> int:
        return self._factory.for_code(schedule_code).work_days(year, month)

    def staffing_norm_hours(self, positions: Iterable[Position], year: int, month: int) -> int:
        """Norm hours of a staffing table: work days x hours per shift x headcount."""
        total = 0
        for p in positions:
            if not p.is_active:
                continue
            total += max(0, self.work_days(p.work_schedule, year, month) * p.hours_per_shift * p.positions_count)
        return total
