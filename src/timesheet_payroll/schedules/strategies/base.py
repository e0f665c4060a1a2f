from __future__ import annotations

from abc import ABC, abstractmethod

from ...core.constants import DEFAULT_SHIFT_HOURS


class ScheduleStrategy(ABC):
    """Strategy Pattern: how many days a work schedule covers in a month."""

    shift_hours: int = DEFAULT_SHIFT_HOURS

    @abstractmethod
    def work_days(self, year: int, month: int) -> int:
        raise NotImplementedError

    def planned_hours(self, year: int, month: int) -> int:
        return self.work_days(year, month) * self.shift_hours
