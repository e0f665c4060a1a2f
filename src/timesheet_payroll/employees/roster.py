from __future__ import annotations

import logging
from dataclasses import dataclass
from operator import attrgetter
from typing import Iterable, Optional

from ..common.collation import Collation
from ..core.constants import DEFAULT_ADMINISTRATOR_KEYWORD
from ..core.enums import EmployeeStatus
from .model import Employee

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Roster:
    """Report ordering of a site's employees."""

    staff: tuple[Employee, ...]
    part_time: tuple[Employee, ...]
    excluded: tuple[str, ...] = ()


def describe_record(employee: Employee) -> str:
    return employee.employee_id or f"<no id: {employee.name or 'no name'}>"


def drop_unidentified(employees: Iterable[Employee]) -> tuple[list[Employee], list[str]]:
    """Split off records without a name or id; they are logged, never raised."""
    kept: list[Employee] = []
    excluded: list[str] = []
    for emp in employees:
        if emp.is_identified:
            kept.append(emp)
            continue
        label = describe_record(emp)
        logger.warning("Skipping employee record without name or id: %s", label, extra={"employee_id": label})
        excluded.append(label)
    return kept, excluded


class RosterClassifier:
    """Staff order: site manager, then administrators, then everyone else.

    Part-time (not registered) employees form their own alphabetical group;
    fired employees are left out.
    """

    def __init__(
        self,
        collation: Optional[Collation] = None,
        *,
        administrator_keyword: str = DEFAULT_ADMINISTRATOR_KEYWORD,
    ):
        self._collation = collation or Collation()
        self._keyword = administrator_keyword

    def is_administrator(self, employee: Employee) -> bool:
        return self._collation.contains(employee.title, self._keyword)

    def classify(self, employees: Iterable[Employee], *, manager_name: Optional[str] = None) -> Roster:
        known, excluded = drop_unidentified(employees)

        manager: list[Employee] = []
        administrators: list[Employee] = []
        others: list[Employee] = []
        part_time: list[Employee] = []

        wanted = (manager_name or "").strip()
        for emp in known:
            if emp.status == EmployeeStatus.NOT_REGISTERED:
                part_time.append(emp)
            elif emp.status != EmployeeStatus.ACTIVE:
                continue
            elif wanted and not manager and self._collation.equals(emp.name.strip(), wanted):
                manager.append(emp)
            elif self.is_administrator(emp):
                administrators.append(emp)
            else:
                others.append(emp)

        by_name = attrgetter("name")
        staff = manager + self._collation.sorted(administrators, key=by_name) + self._collation.sorted(others, key=by_name)
        return Roster(
            staff=tuple(staff),
            part_time=tuple(self._collation.sorted(part_time, key=by_name)),
            excluded=tuple(excluded),
        )
