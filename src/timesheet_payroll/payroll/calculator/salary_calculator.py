from __future__ import annotations

from ...common.rounding import proportion
from ...timesheet.model import Hours
from .base import PayrollCalculator


class SalaryPayrollCalculator(PayrollCalculator):
    """Salary rule: full salary once the norm is met, otherwise pro rata to hours worked."""

    def actual_wage(self, *, rate: int, actual_hours: Hours, planned_hours: int) -> int:
        if actual_hours >= planned_hours:
            return rate
        return proportion(rate, actual_hours, planned_hours)

    def planned_wage(self, *, rate: int, planned_hours: int) -> int:
        return rate
