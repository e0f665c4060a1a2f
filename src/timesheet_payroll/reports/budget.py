from __future__ import annotations

from typing import Optional

from ..core.constants import DEFAULT_BUDGET_TOLERANCE
from ..core.enums import BudgetStatus


def budget_status(actual_wage: int, budget: Optional[int], *, tolerance: float = DEFAULT_BUDGET_TOLERANCE) -> Optional[BudgetStatus]:
    """Compare the actual payroll fund (ФОТ) with the site budget, +/- tolerance."""
    if budget is None:
        return None
    if actual_wage < budget * (1 - tolerance):
        return BudgetStatus.UNDER
    if actual_wage > budget * (1 + tolerance):
        return BudgetStatus.OVER
    return BudgetStatus.ON_TRACK
