from __future__ import annotations

from dataclasses import dataclass, field

from ...core.enums import DayType
from ...core.exceptions import ConfigurationError
from .absence_calculator import HolidayStrategy, PaidAbsenceStrategy
from .base import DailyHoursStrategy
from .regular_calculator import RegularHoursStrategy


def _default_strategies() -> dict[DayType, DailyHoursStrategy]:
    paid_absence = PaidAbsenceStrategy()
    return {
        DayType.REGULAR: RegularHoursStrategy(),
        DayType.VACATION: paid_absence,
        DayType.SICK: paid_absence,
        DayType.HOLIDAY: HolidayStrategy(),
    }


@dataclass
class DailyHoursStrategyFactory:
    """Factory Pattern: choose the hours strategy for a day type.

    Every DayType must be mapped; a missing mapping is a configuration error.
    """

    strategies: dict[DayType, DailyHoursStrategy] = field(default_factory=_default_strategies)

    def __post_init__(self):
        missing = [t.value for t in DayType if t not in self.strategies]
        if missing:
            raise ConfigurationError(f"No hours strategy for day type(s): {', '.join(missing)}")

    def for_day_type(self, day_type: DayType) -> DailyHoursStrategy:
        strategy = self.strategies.get(day_type) if isinstance(day_type, DayType) else None
        if strategy is None:
            raise ConfigurationError(f"Unknown day type {day_type!r}", details={"day_type": day_type})
        return strategy
