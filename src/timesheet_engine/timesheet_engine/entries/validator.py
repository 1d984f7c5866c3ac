from __future__ import annotations

from datetime import date
from typing import Optional

from ..common.datetime_utils import format_clock, minutes_of_day
from ..core.enums import DayType
from ..core.exceptions import (
    BoundsError,
    ConfigurationError,
    EntryWindowError,
    IncompleteIntervalError,
    InconsistentStateError,
    MissingTimeError,
    OrderingError,
    ValidationError,
)
from ..policy.model import Policy
from .model import TimeEntry, ValidationResult


class TimeEntryValidator:
    """Checks one day's raw entry against the policy.

    Checks run in a fixed order (presence of the work times and of both
    lunch boundaries, ordering, bounds, lunch, entry window) and stop at the first failure, so identical input always reports
    the same error. Unknown day types raise ConfigurationError instead of being
    reported in the result.
    """

    def validate(self, entry: TimeEntry, policy: Policy, *, today: Optional[date] = None) -> ValidationResult:
        if not isinstance(entry.day_type, DayType):
            raise ConfigurationError(
                f"Unknown day type {entry.day_type!r}",
                work_date=entry.work_date,
                details={"day_type": entry.day_type},
            )

        try:
            if entry.day_type is DayType.REGULAR:
                self._check_regular(entry, policy)
            else:
                self._check_absence(entry)
            if today is not None:
                self._check_window(entry, policy, today)
        except ValidationError as e:
            return ValidationResult(entry=entry, error=e)
        return ValidationResult(entry=entry)

    def _check_regular(self, entry: TimeEntry, policy: Policy) -> None:
        if entry.start_time is None or entry.end_time is None:
            missing = "Start time" if entry.start_time is None else "End time"
            raise MissingTimeError(
                f"{missing} is required for a regular work day",
                work_date=entry.work_date,
                details={"start_time": entry.start_time, "end_time": entry.end_time},
            )
        if (entry.lunch_start_time is None) != (entry.lunch_end_time is None):
            missing = "Lunch start time" if entry.lunch_start_time is None else "Lunch end time"
            raise IncompleteIntervalError(
                f"{missing} is required when the other lunch time is entered",
                work_date=entry.work_date,
                details={"lunch_start_time": entry.lunch_start_time, "lunch_end_time": entry.lunch_end_time},
            )

        start = minutes_of_day(entry.start_time)
        end = minutes_of_day(entry.end_time)

        if start >= end:
            raise OrderingError(
                f"End time ({format_clock(entry.end_time)}) must be after start time ({format_clock(entry.start_time)})",
                work_date=entry.work_date,
                details={"start_time": entry.start_time, "end_time": entry.end_time},
            )

        if start < policy.min_start_time:
            raise BoundsError(
                f"Start time ({format_clock(entry.start_time)}) must not be before {format_clock(policy.min_start_time)}",
                work_date=entry.work_date,
                details={"start_time": entry.start_time, "min_start_time": policy.min_start_time},
            )
        if end > policy.max_end_time:
            raise BoundsError(
                f"End time ({format_clock(entry.end_time)}) must not be after {format_clock(policy.max_end_time)}",
                work_date=entry.work_date,
                details={"end_time": entry.end_time, "max_end_time": policy.max_end_time},
            )

        self._check_lunch(entry, policy, start, end)

    def _check_lunch(self, entry: TimeEntry, policy: Policy, start: int, end: int) -> None:
        if not entry.has_lunch:
            return
        lunch_start, lunch_end = entry.lunch_start_time, entry.lunch_end_time
        ls, le = minutes_of_day(lunch_start), minutes_of_day(lunch_end)
        if ls >= le:
            raise OrderingError(
                f"Lunch end time ({format_clock(lunch_end)}) must be after lunch start time ({format_clock(lunch_start)})",
                work_date=entry.work_date,
                details={"lunch_start_time": lunch_start, "lunch_end_time": lunch_end},
            )

        if ls < start or le > end:
            raise BoundsError(
                f"Lunch ({format_clock(lunch_start)} - {format_clock(lunch_end)}) must fall between "
                f"{format_clock(entry.start_time)} and {format_clock(entry.end_time)}",
                work_date=entry.work_date,
                details={
                    "lunch_start_time": lunch_start,
                    "lunch_end_time": lunch_end,
                    "start_time": entry.start_time,
                    "end_time": entry.end_time,
                },
            )

        duration = le - ls
        if not policy.min_lunch_duration <= duration <= policy.max_lunch_duration:
            raise BoundsError(
                f"Lunch must last between {policy.min_lunch_duration} and {policy.max_lunch_duration} minutes "
                f"(got {duration})",
                work_date=entry.work_date,
                details={
                    "lunch_minutes": duration,
                    "min_lunch_duration": policy.min_lunch_duration,
                    "max_lunch_duration": policy.max_lunch_duration,
                },
            )

    def _check_absence(self, entry: TimeEntry) -> None:
        if entry.has_clock_times:
            raise InconsistentStateError(
                f"{entry.day_type.value.title()} days cannot have clock times",
                work_date=entry.work_date,
                details={
                    "day_type": entry.day_type.value,
                    "start_time": entry.start_time,
                    "end_time": entry.end_time,
                    "lunch_start_time": entry.lunch_start_time,
                    "lunch_end_time": entry.lunch_end_time,
                },
            )

    def _check_window(self, entry: TimeEntry, policy: Policy, today: date) -> None:
        if entry.work_date is None:
            return

        if entry.work_date > today and not policy.allow_future_time_entry:
            raise EntryWindowError(
                "Time cannot be entered for future dates",
                work_date=entry.work_date,
                details={"today": today},
            )

        if entry.work_date < today:
            age = (today - entry.work_date).days
            if not policy.allow_past_time_entry:
                raise EntryWindowError(
                    "Time cannot be entered for past dates",
                    work_date=entry.work_date,
                    details={"today": today},
                )
            if age > policy.past_time_entry_limit:
                raise EntryWindowError(
                    f"Time can only be entered up to {policy.past_time_entry_limit} days back",
                    work_date=entry.work_date,
                    details={"today": today, "days_back": age, "past_time_entry_limit": policy.past_time_entry_limit},
                )
