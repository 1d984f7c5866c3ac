from __future__ import annotations

from dataclasses import replace
from typing import Optional

from ..common.datetime_utils import minutes_to_hours
from ..core.exceptions import ExceedsMaxDailyHoursError
from ..entries.model import TimeEntry
from ..policy.model import Policy
from .calculator.factory import DailyHoursStrategyFactory
from .model import DailyHours


class DailyHoursCalculator:
    def __init__(self, *, strategy_factory: Optional[DailyHoursStrategyFactory] = None):
        self._factory = strategy_factory or DailyHoursStrategyFactory()

    def compute(self, entry: TimeEntry, policy: Policy) -> DailyHours:
        strategy = self._factory.for_day_type(entry.day_type)
        decision = strategy.credited_minutes(entry, policy)
        hours = minutes_to_hours(decision.minutes)

        if hours > policy.max_daily_hours:
            raise ExceedsMaxDailyHoursError(
                f"Total hours ({hours}) cannot exceed {policy.max_daily_hours} hours per day",
                work_date=entry.work_date,
                details={"hours": hours, "max_daily_hours": policy.max_daily_hours},
            )

        return DailyHours(
            day_type=entry.day_type,
            minutes=decision.minutes,
            hours=hours,
            work_date=entry.work_date,
            holiday=decision.holiday,
        )

    def apply(self, entry: TimeEntry, policy: Policy) -> TimeEntry:
        """Return a copy of `entry` carrying its derived hours."""
        daily = self.compute(entry, policy)
        return replace(
            entry,
            total_hours=daily.hours,
            holiday_pay_rate=daily.holiday.pay_rate if daily.holiday else None,
        )
