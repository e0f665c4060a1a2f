from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from ..common.validators import coerce_enum
from ..core.enums import BudgetStatus, PaymentMethod, PaymentType, ReportKind, RosterGroup
from ..employees.model import Vacancy
from ..timesheet.model import Hours


@dataclass(frozen=True)
class ReportRow:
    """Read-model: one employee's line in the monthly timesheet report."""

    employee_id: str
    name: str
    title: str
    group: RosterGroup
    payment_type: PaymentType
    payment_method: PaymentMethod
    rate: int
    planned_hours: int
    actual_hours: Hours
    advance_hours: Hours
    main_hours: Hours
    planned_wage: int
    total_wage: int
    advance_wage: int
    main_wage: int
    additional_pay: int = 0

    @property
    def is_valid(self) -> bool:
        return self.actual_hours >= self.planned_hours

    @property
    def shortfall(self) -> Hours:
        return max(0, self.planned_hours - self.actual_hours)

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "name": self.name,
            "title": self.title,
            "group": self.group.value,
            "payment_type": self.payment_type.value,
            "payment_method": self.payment_method.value,
            "rate": self.rate,
            "planned_hours": self.planned_hours,
            "actual_hours": self.actual_hours,
            "advance_hours": self.advance_hours,
            "main_hours": self.main_hours,
            "planned_wage": self.planned_wage,
            "total_wage": self.total_wage,
            "advance_wage": self.advance_wage,
            "main_wage": self.main_wage,
            "additional_pay": self.additional_pay,
            "is_valid": self.is_valid,
        }


@dataclass(frozen=True)
class GroupSubtotal:
    actual_hours: Hours = 0
    total_wage: int = 0


@dataclass(frozen=True)
class ChannelTotals:
    """Amounts by payment channel: bank card vs cash sheet."""

    card: int = 0
    cash: int = 0

    @property
    def total(self) -> int:
        return self.card + self.cash

    def to_dict(self) -> dict:
        return {"card": self.card, "cash": self.cash, "total": self.total}


@dataclass(frozen=True)
class ReportTotals:
    planned_hours: int = 0
    actual_hours: Hours = 0
    planned_wage: int = 0
    actual_wage: int = 0
    advance: ChannelTotals = field(default_factory=ChannelTotals)
    main: ChannelTotals = field(default_factory=ChannelTotals)
    additional_pay: int = 0


@dataclass(frozen=True)
class InvalidRow:
    """An employee below the norm, listed so the manager can fix the timesheet."""

    employee_id: str
    name: str
    actual_hours: Hours
    planned_hours: int

    @property
    def shortfall(self) -> Hours:
        return max(0, self.planned_hours - self.actual_hours)


@dataclass(frozen=True)
class Report:
    period: str
    site_id: str
    staff_rows: tuple[ReportRow, ...]
    part_time_rows: tuple[ReportRow, ...]
    staff_subtotal: GroupSubtotal
    part_time_subtotal: GroupSubtotal
    totals: ReportTotals
    vacancies: tuple[Vacancy, ...] = ()
    excluded: tuple[str, ...] = ()
    budget: Optional[int] = None
    budget_status: Optional[BudgetStatus] = None

    @property
    def rows(self) -> tuple[ReportRow, ...]:
        return self.staff_rows + self.part_time_rows

    @property
    def vacancy_total(self) -> int:
        return sum(v.count for v in self.vacancies)

    @property
    def invalid_rows(self) -> list[InvalidRow]:
        return [
            InvalidRow(
                employee_id=r.employee_id,
                name=r.name,
                actual_hours=r.actual_hours,
                planned_hours=r.planned_hours,
            )
            for r in self.rows
            if not r.is_valid
        ]

    @property
    def is_valid(self) -> bool:
        """True when every employee met the norm; an invalid report must not be submitted."""
        return all(r.is_valid for r in self.rows)

    def to_dict(self) -> dict:
        """Plain snapshot for the persisted report record."""
        t = self.totals
        return {
            "period": self.period,
            "site_id": self.site_id,
            "staff": [r.to_dict() for r in self.staff_rows],
            "part_time": [r.to_dict() for r in self.part_time_rows],
            "subtotals": {
                RosterGroup.STAFF.value: _subtotal_dict(self.staff_subtotal),
                RosterGroup.PART_TIME.value: _subtotal_dict(self.part_time_subtotal),
            },
            "totals": {
                "planned_hours": t.planned_hours,
                "actual_hours": t.actual_hours,
                "planned_wage": t.planned_wage,
                "actual_wage": t.actual_wage,
                "advance": t.advance.to_dict(),
                "main": t.main.to_dict(),
                "additional_pay": t.additional_pay,
            },
            "vacancies": [{"title": v.title, "count": v.count} for v in self.vacancies],
            "vacancy_total": self.vacancy_total,
            "is_valid": self.is_valid,
            "invalid": [
                {
                    "employee_id": r.employee_id,
                    "name": r.name,
                    "actual_hours": r.actual_hours,
                    "planned_hours": r.planned_hours,
                    "shortfall": r.shortfall,
                }
                for r in self.invalid_rows
            ],
            "excluded": list(self.excluded),
            "budget": self.budget,
            "budget_status": self.budget_status.value if self.budget_status else None,
        }

    def snapshot(self, kind: Union[ReportKind, str]) -> dict:
        """Per-period view sent for approval: only the advance or only the final part."""
        kind = coerce_enum(ReportKind, kind, "kind")
        advance = kind == ReportKind.ADVANCE
        channels = self.totals.advance if advance else self.totals.main
        return {
            "period": self.period,
            "site_id": self.site_id,
            "type": kind.value,
            "rows": [
                {
                    "employee_id": r.employee_id,
                    "name": r.name,
                    "title": r.title,
                    "group": r.group.value,
                    "payment_method": r.payment_method.value,
                    "hours": r.advance_hours if advance else r.main_hours,
                    "amount": r.advance_wage if advance else r.main_wage,
                }
                for r in self.rows
            ],
            "totals": channels.to_dict(),
            "is_valid": self.is_valid,
        }


def _subtotal_dict(subtotal: GroupSubtotal) -> dict:
    return {"actual_hours": subtotal.actual_hours, "total_wage": subtotal.total_wage}
