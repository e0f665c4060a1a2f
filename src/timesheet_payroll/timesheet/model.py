from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterator, Optional, Union

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_no_hours, require_range
from ..core.constants import DEFAULT_QUALITY_SCORE, MAX_DAY_HOURS, MAX_QUALITY_SCORE, MIN_QUALITY_SCORE
from ..core.enums import DayType
from ..core.exceptions import ValidationError

Hours = Union[int, float]

# Letter codes managers type into timesheet cells
CELL_CODES = {
    "Б": DayType.SICK,
    "О": DayType.VACATION,
    "НН": DayType.ABSENCE,
    "У": DayType.FIRED,
}


@dataclass(frozen=True)
class TimeEntry:
    """One timesheet cell: hours worked on a date, or a day-type code."""

    employee_id: str
    work_date: date
    hours: Optional[Hours] = None
    day_type: DayType = DayType.WORK
    quality_score: int = DEFAULT_QUALITY_SCORE
    comment: Optional[str] = None

    def __post_init__(self):
        require_range(self.quality_score, "quality_score", MIN_QUALITY_SCORE, MAX_QUALITY_SCORE)
        require_no_hours(self.hours, self.day_type)

    @property
    def counted_hours(self) -> Hours:
        """Hours that contribute to totals: numeric WORK values within 0..24, else 0."""
        if self.day_type != DayType.WORK or self.hours is None or isinstance(self.hours, bool):
            return 0
        if not 0 <= self.hours <= MAX_DAY_HOURS:
            return 0
        return self.hours

    @classmethod
    def from_cell(
        cls,
        employee_id: str,
        work_date: Union[str, date],
        value,
        *,
        quality_score: int = DEFAULT_QUALITY_SCORE,
        comment: Optional[str] = None,
    ) -> TimeEntry:
        hours, day_type = parse_cell(value)
        return cls(
            employee_id=employee_id,
            work_date=parse_iso_date(work_date),
            hours=hours,
            day_type=day_type,
            quality_score=quality_score,
            comment=comment,
        )


def parse_cell(value) -> tuple[Optional[int], DayType]:
    """Interpret a timesheet cell: 0..24 hours, or one of the letter codes."""
    if isinstance(value, str):
        code = value.strip().upper()
        if code in CELL_CODES:
            return None, CELL_CODES[code]
        try:
            value = int(code)
        except ValueError as exc:
            raise ValidationError(f"Unknown timesheet value: {value!r}") from exc
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"Unknown timesheet value: {value!r}")
    require_range(value, "hours", 0, MAX_DAY_HOURS)
    return value, DayType.WORK


class Timesheet:
    """In-memory timesheet: one entry per (employee, date), later writes replace earlier ones."""

    def __init__(self, entries=()):
        self._by_employee_date: dict[tuple[str, date], TimeEntry] = {}
        for entry in entries:
            self.put(entry)

    def put(self, entry: TimeEntry) -> None:
        self._by_employee_date[(entry.employee_id, entry.work_date)] = entry

    def get(self, employee_id: str, work_date: date) -> Optional[TimeEntry]:
        return self._by_employee_date.get((employee_id, work_date))

    def remove(self, employee_id: str, work_date: date) -> bool:
        return self._by_employee_date.pop((employee_id, work_date), None) is not None

    def entries_for(self, employee_id: str) -> list[TimeEntry]:
        items = [e for (emp, _), e in self._by_employee_date.items() if emp == employee_id]
        items.sort(key=lambda e: e.work_date)
        return items

    def __iter__(self) -> Iterator[TimeEntry]:
        return iter(self._by_employee_date.values())

    def __len__(self) -> int:
        return len(self._by_employee_date)
