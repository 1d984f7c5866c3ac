from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from decimal import Decimal
from typing import Optional

from ..core.enums import DayType
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class TimeEntry:
    """Domain entity: one calendar day on a timesheet.

    `total_hours` and `holiday_pay_rate` are derived by the daily calculator and
    stay None on raw client input.
    """

    day_type: DayType = DayType.REGULAR
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    lunch_start_time: Optional[time] = None
    lunch_end_time: Optional[time] = None
    work_date: Optional[date] = None
    total_hours: Optional[Decimal] = None
    holiday_pay_rate: Optional[Decimal] = None

    @property
    def has_clock_times(self) -> bool:
        return any(
            t is not None
            for t in (self.start_time, self.end_time, self.lunch_start_time, self.lunch_end_time)
        )

    @property
    def has_lunch(self) -> bool:
        return self.lunch_start_time is not None and self.lunch_end_time is not None


@dataclass(frozen=True)
class ValidationResult:
    entry: TimeEntry
    error: Optional[ValidationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> TimeEntry:
        if self.error is not None:
            raise self.error
        return self.entry
