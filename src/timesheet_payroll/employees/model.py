from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_iso_date
from ..common.validators import coerce_enum, optional_money, require_non_negative
from ..core.constants import DEFAULT_SHIFT_HOURS
from ..core.enums import EmployeeStatus, PaymentMethod, PaymentType, WorkSchedule
from ..core.exceptions import ValidationError


def _optional_date(value) -> Optional[date]:
    if value is None or value == "":
        return None
    return parse_iso_date(value)


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee on a site roster.

    Only one of hourly_rate / monthly_salary is meaningful, the one matching
    payment_type. name and employee_id may be missing in imported data; such
    records are filtered out of reports rather than rejected here.
    """

    employee_id: Optional[str]
    name: Optional[str]
    title: str
    object_id: Optional[str] = None
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    work_schedule: str = WorkSchedule.FIVE_TWO.value
    payment_type: PaymentType = PaymentType.HOURLY
    hourly_rate: Optional[int] = None
    monthly_salary: Optional[int] = None
    payment_method: PaymentMethod = PaymentMethod.CARD
    hire_date: Optional[date] = None
    termination_date: Optional[date] = None

    @property
    def is_identified(self) -> bool:
        return bool(self.employee_id) and bool(self.name and self.name.strip())

    @property
    def rate(self) -> int:
        if self.payment_type == PaymentType.SALARY:
            return self.monthly_salary or 0
        return self.hourly_rate or 0

    def fire(self, on: date) -> Employee:
        return replace(self, status=EmployeeStatus.FIRED, termination_date=on)

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Any],
        *,
        default_payment_method: PaymentMethod = PaymentMethod.CARD,
    ) -> Employee:
        """Build from a raw record (roster form, CSV import row, ORM dict)."""
        employee_id = data.get("employee_id", data.get("id"))
        return cls(
            employee_id=str(employee_id) if employee_id not in (None, "") else None,
            name=(data.get("name") or "").strip() or None,
            title=(data.get("title", data.get("position")) or "").strip(),
            object_id=data.get("object_id", data.get("objectId")),
            status=coerce_enum(EmployeeStatus, data.get("status") or EmployeeStatus.ACTIVE, "status"),
            work_schedule=data.get("work_schedule", data.get("workSchedule")) or WorkSchedule.FIVE_TWO.value,
            payment_type=coerce_enum(
                PaymentType, data.get("payment_type", data.get("paymentType")) or PaymentType.HOURLY, "payment_type"
            ),
            hourly_rate=optional_money(data.get("hourly_rate", data.get("hourlyRate")), "hourly_rate"),
            monthly_salary=optional_money(data.get("monthly_salary", data.get("monthlySalary")), "monthly_salary"),
            payment_method=coerce_enum(
                PaymentMethod,
                data.get("payment_method", data.get("paymentMethod")) or default_payment_method,
                "payment_method",
            ),
            hire_date=_optional_date(data.get("hire_date", data.get("hireDate"))),
            termination_date=_optional_date(data.get("termination_date", data.get("terminationDate"))),
        )


@dataclass(frozen=True)
class Position:
    """Staffing table row: required headcount for a title at a site."""

    position_id: Optional[str]
    object_id: str
    title: str
    work_schedule: str = WorkSchedule.FIVE_TWO.value
    hours_per_shift: int = DEFAULT_SHIFT_HOURS
    payment_type: PaymentType = PaymentType.HOURLY
    hourly_rate: Optional[int] = None
    monthly_salary: Optional[int] = None
    positions_count: int = 1
    is_active: bool = True

    def __post_init__(self):
        require_non_negative(self.positions_count, "positions_count")
        if self.hours_per_shift is None or self.hours_per_shift <= 0:
            raise ValidationError("hours_per_shift must be positive")


@dataclass(frozen=True)
class Vacancy:
    title: str
    count: int
