from __future__ import annotations

from typing import Mapping, Optional, Union

from ..common.rounding import proportion
from ..core.enums import PaymentType
from ..timesheet.model import Hours
from .calculator.base import PayrollCalculator
from .calculator.hourly_calculator import HourlyPayrollCalculator
from .calculator.salary_calculator import SalaryPayrollCalculator
from .model import WageSplit


def _payment_type(value: Union[PaymentType, str, None]) -> Optional[PaymentType]:
    try:
        return PaymentType(value)
    except ValueError:
        return None


class WageCalculator:
    """Turns hours and pay terms into money (integers, smallest currency unit)."""

    def __init__(self, *, calculators: Optional[Mapping[PaymentType, PayrollCalculator]] = None):
        self._calculators = dict(calculators or {
            PaymentType.HOURLY: HourlyPayrollCalculator(),
            PaymentType.SALARY: SalaryPayrollCalculator(),
        })

    def wage(
        self,
        payment_type: Union[PaymentType, str, None],
        actual_hours: Hours,
        planned_hours: int,
        monthly_salary: Optional[int] = None,
        hourly_rate: Optional[int] = None,
    ) -> int:
        kind = _payment_type(payment_type)
        rate = monthly_salary if kind == PaymentType.SALARY else hourly_rate
        if kind is None or not rate:
            return 0
        return self._calculators[kind].actual_wage(rate=rate, actual_hours=actual_hours, planned_hours=planned_hours)

    def planned_wage(
        self,
        payment_type: Union[PaymentType, str, None],
        planned_hours: int,
        monthly_salary: Optional[int] = None,
        hourly_rate: Optional[int] = None,
    ) -> int:
        # Anything that is not a salary is budgeted at the hourly rate.
        if _payment_type(payment_type) == PaymentType.SALARY:
            return self._calculators[PaymentType.SALARY].planned_wage(rate=monthly_salary or 0, planned_hours=planned_hours)
        return self._calculators[PaymentType.HOURLY].planned_wage(rate=hourly_rate or 0, planned_hours=planned_hours)

    def split(self, wage: int, advance_hours: Hours, actual_hours: Hours) -> WageSplit:
        """Apportion a wage by hours; main takes the remainder so the parts always add up."""
        advance = proportion(wage, advance_hours, actual_hours) if actual_hours > 0 else 0
        return WageSplit(total=wage, advance=advance, main=wage - advance)
