"""Payment deadlines: the advance is due on the cutoff day (the 15th by default), the final salary on the 5th of the next month."""

from __future__ import annotations

from datetime import date
from typing import Optional, Union

from ..common.datetime_utils import last_day_of_month, parse_month
from ..common.validators import coerce_enum
from ..core.constants import DEFAULT_ADVANCE_CUTOFF_DAY, SALARY_DEADLINE_DAY
from ..core.enums import ReportStatus

# A report already handed to the economist is never overdue
_SETTLED = {ReportStatus.SUBMITTED, ReportStatus.APPROVED}


def advance_deadline(year: int, month: int, cutoff_day: int = DEFAULT_ADVANCE_CUTOFF_DAY) -> date:
    return date(year, month, cutoff_day)


def salary_deadline(year: int, month: int) -> date:
    if month == 12:
        return date(year + 1, 1, SALARY_DEADLINE_DAY)
    return date(year, month + 1, SALARY_DEADLINE_DAY)


def days_until(deadline: date, today: date) -> int:
    return max(0, (deadline - today).days)


def is_past_deadline(period: str, today: date, status: Optional[Union[ReportStatus, str]] = None) -> bool:
    """True once the whole period month is over and the report is not yet submitted."""
    year, month = parse_month(period)
    if status is not None and coerce_enum(ReportStatus, status, "status") in _SETTLED:
        return False
    return today > last_day_of_month(year, month)
