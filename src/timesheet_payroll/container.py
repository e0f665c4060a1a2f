from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .common.collation import Collation
from .config import EngineSettings, load_settings
from .employees.roster import RosterClassifier
from .employees.vacancies import VacancyResolver
from .logging_config import setup_logging
from .payroll.service import WageCalculator
from .reports.service import PayrollReportService
from .reports.workflow import ReportWorkflowService
from .schedules.service import ScheduleHoursCalculator
from .timesheet.aggregator import AttendanceAggregator


@dataclass(frozen=True)
class Container:
    settings: EngineSettings
    collation: Collation

    schedule_calculator: ScheduleHoursCalculator
    attendance_aggregator: AttendanceAggregator
    wage_calculator: WageCalculator
    roster_classifier: RosterClassifier
    vacancy_resolver: VacancyResolver

    payroll_report_service: PayrollReportService
    report_workflow: ReportWorkflowService


def build_container(*, settings: Optional[EngineSettings] = None, configure_logging: bool = False) -> Container:
    settings = settings or load_settings()
    if configure_logging:
        setup_logging(settings.log_level, json_output=settings.log_json)

    collation = Collation(settings.locale)

    schedule_calculator = ScheduleHoursCalculator()
    attendance_aggregator = AttendanceAggregator(advance_cutoff_day=settings.advance_cutoff_day)
    wage_calculator = WageCalculator()
    roster_classifier = RosterClassifier(collation, administrator_keyword=settings.administrator_keyword)
    vacancy_resolver = VacancyResolver(collation)

    payroll_report_service = PayrollReportService(
        schedules=schedule_calculator,
        aggregator=attendance_aggregator,
        wages=wage_calculator,
        roster=roster_classifier,
        vacancies=vacancy_resolver,
        budget_tolerance=settings.budget_tolerance,
    )

    return Container(
        settings=settings,
        collation=collation,
        schedule_calculator=schedule_calculator,
        attendance_aggregator=attendance_aggregator,
        wage_calculator=wage_calculator,
        roster_classifier=roster_classifier,
        vacancy_resolver=vacancy_resolver,
        payroll_report_service=payroll_report_service,
        report_workflow=ReportWorkflowService(),
    )
