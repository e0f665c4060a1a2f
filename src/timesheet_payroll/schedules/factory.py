from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..core.enums import WorkSchedule
from .strategies.base import ScheduleStrategy
from .strategies.rotation_strategy import RotationStrategy
from .strategies.shift_strategy import AlternatingShiftStrategy
from .strategies.six_day_strategy import SixDayWeekStrategy
from .strategies.weekday_strategy import WeekdayStrategy

logger = logging.getLogger(__name__)


def _default_strategies() -> dict[str, ScheduleStrategy]:
    shifts = AlternatingShiftStrategy()
    return {
        WorkSchedule.FIVE_TWO.value: WeekdayStrategy(),
        WorkSchedule.TWO_TWO.value: shifts,
        WorkSchedule.THREE_THREE.value: shifts,
        WorkSchedule.SIX_ONE.value: SixDayWeekStrategy(),
        WorkSchedule.ROTATION.value: RotationStrategy(),
    }


@dataclass
class ScheduleStrategyFactory:
    """Factory Pattern: choose the strategy for a schedule code.

    Codes outside the known set are treated as 5/2.
    """

    strategies: dict[str, ScheduleStrategy] = field(default_factory=_default_strategies)
    fallback: ScheduleStrategy = field(default_factory=WeekdayStrategy)

    def for_code(self, code: Optional[str]) -> ScheduleStrategy:
        key = code.value if isinstance(code, WorkSchedule) else (code or "").strip()
        strategy = self.strategies.get(key)
        if strategy is None:
            logger.warning("Unknown work schedule %r, falling back to 5/2", code)
            return self.fallback
        return strategy
