"""Timesheet Payroll package.

Pure computation engine for monthly timesheet reports: planned hours per work
schedule, attendance aggregation, wage calculation with the advance/final
split, roster ordering and vacancy accounting. Organized by feature modules
(schedules, timesheet, payroll, employees, reports) the same way the rest of
the attendance tooling is.
"""

from .container import Container, build_container
from .reports.model import Report, ReportRow
from .reports.service import PayrollReportService
from .reports.workflow import ReportWorkflowService

__all__ = [
    "Container",
    "PayrollReportService",
    "Report",
    "ReportRow",
    "ReportWorkflowService",
    "build_container",
]
