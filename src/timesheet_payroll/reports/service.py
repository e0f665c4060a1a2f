from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..common.collation import Collation
from ..common.datetime_utils import days_in_month, format_month, parse_month
from ..core.constants import DEFAULT_BUDGET_TOLERANCE
from ..core.enums import PaymentMethod, RosterGroup
from ..employees.model import Employee, Position
from ..employees.roster import RosterClassifier
from ..employees.vacancies import VacancyResolver
from ..payroll.model import AdditionalPayment, sum_by_employee
from ..payroll.service import WageCalculator
from ..schedules.service import ScheduleHoursCalculator
from ..timesheet.aggregator import AttendanceAggregator, index_entries
from ..timesheet.model import TimeEntry
from .budget import budget_status
from .model import ChannelTotals, GroupSubtotal, Report, ReportRow, ReportTotals

logger = logging.getLogger(__name__)


class PayrollReportService:
    """Builds the monthly timesheet/payroll report for one site.

    Pure computation over an already fetched snapshot of employees, positions
    and time entries; callers are responsible for that snapshot being consistent.
    """

    def __init__(
        self,
        *,
        schedules: Optional[ScheduleHoursCalculator] = None,
        aggregator: Optional[AttendanceAggregator] = None,
        wages: Optional[WageCalculator] = None,
        roster: Optional[RosterClassifier] = None,
        vacancies: Optional[VacancyResolver] = None,
        budget_tolerance: float = DEFAULT_BUDGET_TOLERANCE,
    ):
        collation = Collation()
        self._schedules = schedules or ScheduleHoursCalculator()
        self._aggregator = aggregator or AttendanceAggregator()
        self._wages = wages or WageCalculator()
        self._roster = roster or RosterClassifier(collation)
        self._vacancies = vacancies or VacancyResolver(collation)
        self._budget_tolerance = budget_tolerance

    def build_report(
        self,
        month: str,
        employees: Iterable[Employee],
        time_entries: Iterable[TimeEntry],
        positions: Iterable[Position],
        site_id: str,
        manager_name: Optional[str] = None,
        *,
        additional_payments: Iterable[AdditionalPayment] = (),
        budget: Optional[int] = None,
    ) -> Report:
        year, month_num = parse_month(month)
        # Fail before touching any data if the month has no calendar.
        days_in_month(year, month_num)
        period = format_month(year, month_num)

        employees = list(employees)
        site_employees = [e for e in employees if e.object_id == site_id]
        roster = self._roster.classify(site_employees, manager_name=manager_name)

        entries_by_employee = index_entries(time_entries)
        extras = sum_by_employee(additional_payments, period)

        def rows_for(group: RosterGroup, members) -> tuple[ReportRow, ...]:
            return tuple(
                self._row(emp, group, entries_by_employee.get(emp.employee_id, {}), year, month_num, extras)
                for emp in members
            )

        staff_rows = rows_for(RosterGroup.STAFF, roster.staff)
        part_time_rows = rows_for(RosterGroup.PART_TIME, roster.part_time)
        all_rows = staff_rows + part_time_rows

        totals = _totals(all_rows)
        report = Report(
            period=period,
            site_id=site_id,
            staff_rows=staff_rows,
            part_time_rows=part_time_rows,
            staff_subtotal=_subtotal(staff_rows),
            part_time_subtotal=_subtotal(part_time_rows),
            totals=totals,
            vacancies=tuple(self._vacancies.resolve(positions, employees, site_id)),
            excluded=roster.excluded,
            budget=budget,
            budget_status=budget_status(totals.actual_wage, budget, tolerance=self._budget_tolerance),
        )

        log_extra = {"site_id": site_id, "period": period}
        logger.info(
            "Report built for site %s, %s: %d staff, %d part-time, %d vacancies",
            site_id, period, len(staff_rows), len(part_time_rows), report.vacancy_total,
            extra=log_extra,
        )
        for invalid in report.invalid_rows:
            logger.info(
                "Below norm: %s worked %s of %s hours",
                invalid.name, invalid.actual_hours, invalid.planned_hours,
                extra=log_extra,
            )
        return report

    def _row(self, emp: Employee, group: RosterGroup, by_date, year: int, month: int, extras) -> ReportRow:
        planned_hours = self._schedules.planned_hours(emp.work_schedule, year, month)
        hours = self._aggregator.summarize_days(by_date, year, month)

        total_wage = self._wages.wage(
            emp.payment_type,
            hours.actual_hours,
            planned_hours,
            monthly_salary=emp.monthly_salary,
            hourly_rate=emp.hourly_rate,
        )
        split = self._wages.split(total_wage, hours.advance_hours, hours.actual_hours)

        return ReportRow(
            employee_id=emp.employee_id,
            name=emp.name,
            title=emp.title,
            group=group,
            payment_type=emp.payment_type,
            payment_method=emp.payment_method,
            rate=emp.rate,
            planned_hours=planned_hours,
            actual_hours=hours.actual_hours,
            advance_hours=hours.advance_hours,
            main_hours=hours.main_hours,
            planned_wage=self._wages.planned_wage(
                emp.payment_type,
                planned_hours,
                monthly_salary=emp.monthly_salary,
                hourly_rate=emp.hourly_rate,
            ),
            total_wage=split.total,
            advance_wage=split.advance,
            main_wage=split.main,
            additional_pay=extras.get(emp.employee_id, 0),
        )


def _subtotal(rows: Iterable[ReportRow]) -> GroupSubtotal:
    rows = list(rows)
    return GroupSubtotal(
        actual_hours=sum(r.actual_hours for r in rows),
        total_wage=sum(r.total_wage for r in rows),
    )


def _by_channel(rows: list[ReportRow], attr: str) -> ChannelTotals:
    return ChannelTotals(
        card=sum(getattr(r, attr) for r in rows if r.payment_method == PaymentMethod.CARD),
        cash=sum(getattr(r, attr) for r in rows if r.payment_method == PaymentMethod.CASH),
    )


def _totals(rows: tuple[ReportRow, ...]) -> ReportTotals:
    rows = list(rows)
    return ReportTotals(
        planned_hours=sum(r.planned_hours for r in rows),
        actual_hours=sum(r.actual_hours for r in rows),
        planned_wage=sum(r.planned_wage for r in rows),
        actual_wage=sum(r.total_wage for r in rows),
        advance=_by_channel(rows, "advance_wage"),
        main=_by_channel(rows, "main_wage"),
        additional_pay=sum(r.additional_pay for r in rows),
    )
