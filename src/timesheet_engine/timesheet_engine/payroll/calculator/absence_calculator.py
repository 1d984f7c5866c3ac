from __future__ import annotations

from ...common.datetime_utils import hours_to_minutes
from ...core.exceptions import UnrecognizedHolidayError
from ...entries.model import TimeEntry
from ...policy.model import Policy
from .base import DailyHoursStrategy, HoursDecision


class PaidAbsenceStrategy(DailyHoursStrategy):
    """Vacation and sick days credit the policy's standard daily hours."""

    def credited_minutes(self, entry: TimeEntry, policy: Policy) -> HoursDecision:
        return HoursDecision(minutes=hours_to_minutes(policy.standard_daily_hours))


class HolidayStrategy(DailyHoursStrategy):
    """Holidays credit standard hours (or the holiday's own figure) and flag holiday pay."""

    def credited_minutes(self, entry: TimeEntry, policy: Policy) -> HoursDecision:
        holiday = policy.holiday_on(entry.work_date)
        if holiday is None:
            day = entry.work_date.isoformat() if entry.work_date else "an undated entry"
            raise UnrecognizedHolidayError(
                f"No company holiday is configured on {day}",
                work_date=entry.work_date,
                details={"day_type": entry.day_type.value},
            )

        hours = holiday.hours if holiday.hours is not None else policy.standard_daily_hours
        return HoursDecision(minutes=hours_to_minutes(hours), holiday=holiday)
