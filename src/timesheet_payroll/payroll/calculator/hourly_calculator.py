from __future__ import annotations

from ...common.rounding import round_half_up, to_decimal
from ...timesheet.model import Hours
from .base import PayrollCalculator


class HourlyPayrollCalculator(PayrollCalculator):
    """Hourly rule: rate x hours."""

    def actual_wage(self, *, rate: int, actual_hours: Hours, planned_hours: int) -> int:
        return round_half_up(to_decimal(rate) * to_decimal(actual_hours))

    def planned_wage(self, *, rate: int, planned_hours: int) -> int:
        return round_half_up(to_decimal(rate) * to_decimal(planned_hours))
