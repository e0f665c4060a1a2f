from __future__ import annotations

from collections import Counter
from typing import Iterable, Optional

from ..common.collation import Collation
from ..core.enums import EmployeeStatus
from .model import Employee, Position, Vacancy

_STAFFED = {EmployeeStatus.ACTIVE, EmployeeStatus.NOT_REGISTERED}


class VacancyResolver:
    """Unfilled slots per staffing-table row at a site.

    Rows sharing a title are compared against the same headcount separately,
    they are not merged.
    """

    def __init__(self, collation: Optional[Collation] = None):
        self._collation = collation or Collation()

    def resolve(self, positions: Iterable[Position], employees: Iterable[Employee], site_id: str) -> list[Vacancy]:
        staffed = [e for e in employees if e.object_id == site_id and e.is_identified]
        assigned = Counter(e.title for e in staffed if e.status in _STAFFED)

        vacancies = []
        for p in positions:
            if p.object_id != site_id or not p.is_active:
                continue
            needed = max(0, p.positions_count - assigned[p.title])
            if needed > 0:
                vacancies.append(Vacancy(title=p.title, count=needed))
        return self._collation.sorted(vacancies, key=lambda v: v.title)

    @staticmethod
    def total(vacancies: Iterable[Vacancy]) -> int:
        return sum(v.count for v in vacancies)
