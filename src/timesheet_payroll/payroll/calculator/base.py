from __future__ import annotations

from abc import ABC, abstractmethod

from ...timesheet.model import Hours


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll), one per payment type."""

    @abstractmethod
    def actual_wage(self, *, rate: int, actual_hours: Hours, planned_hours: int) -> int:
        raise NotImplementedError

    @abstractmethod
    def planned_wage(self, *, rate: int, planned_hours: int) -> int:
        raise NotImplementedError
