from __future__ import annotations

from decimal import Decimal

from ...common.datetime_utils import format_clock, minutes_of_day
from ...core.exceptions import MissingTimeError, NegativeHoursError
from ...entries.model import TimeEntry
from ...policy.model import Policy
from .base import DailyHoursStrategy, HoursDecision


class RegularHoursStrategy(DailyHoursStrategy):
    """Standard rule: (end - start) - lunch, never below 0."""

    def credited_minutes(self, entry: TimeEntry, policy: Policy) -> HoursDecision:
        if entry.start_time is None or entry.end_time is None:
            raise MissingTimeError(
                "Start and end times are required for a regular work day",
                work_date=entry.work_date,
                details={"start_time": entry.start_time, "end_time": entry.end_time},
            )

        minutes = minutes_of_day(entry.end_time) - minutes_of_day(entry.start_time)
        lunch = 0
        if entry.has_lunch:
            lunch = minutes_of_day(entry.lunch_end_time) - minutes_of_day(entry.lunch_start_time)
        minutes -= lunch

        if minutes < 0:
            raise NegativeHoursError(
                f"Worked time between {format_clock(entry.start_time)} and {format_clock(entry.end_time)} "
                f"less {lunch} minutes of lunch is negative",
                work_date=entry.work_date,
                details={"start_time": entry.start_time, "end_time": entry.end_time, "lunch_minutes": lunch},
            )
        return HoursDecision(minutes=Decimal(minutes))
