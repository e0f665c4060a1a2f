from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Iterable, Optional

from ..common.validators import require_non_negative
from ..core.enums import AdditionalPaymentType


@dataclass(frozen=True)
class WageSplit:
    """Total wage and its advance (days 1..15) / final parts."""

    total: int
    advance: int
    main: int


@dataclass(frozen=True)
class AdditionalPayment:
    """Sick-leave, vacation, bonus and other payments outside the hour-based wage."""

    employee_id: str
    period: str
    payment_type: AdditionalPaymentType
    amount: int
    description: Optional[str] = None

    def __post_init__(self):
        require_non_negative(self.amount, "amount")


def sum_by_employee(payments: Iterable[AdditionalPayment], period: str) -> dict[str, int]:
    totals: dict[str, int] = defaultdict(int)
    for p in payments:
        if p.period == period:
            totals[p.employee_id] += p.amount
    return dict(totals)
