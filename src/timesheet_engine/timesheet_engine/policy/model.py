from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Optional

from ..core.constants import (
    DAYS_PER_WEEK,
    DEFAULT_HOLIDAY_PAY_MULTIPLIER,
    DEFAULT_PAST_TIME_ENTRY_LIMIT,
    DEFAULT_STANDARD_DAILY_HOURS,
    MINUTES_PER_DAY,
    WORKDAYS_PER_WEEK,
)
from ..core.exceptions import ConfigurationError


@dataclass(frozen=True)
class Holiday:
    """A company holiday. `hours` overrides the policy's standard daily hours."""

    date: date
    name: str
    pay_rate: Decimal
    hours: Optional[Decimal] = None


@dataclass(frozen=True)
class Policy:
    """Company rules governing validation bounds and hour classification.

    Durations are in hours unless the field name says minutes; clock bounds are
    minutes from midnight. Weekly band caps default to the daily thresholds
    times five working days.
    """

    max_daily_hours: Decimal
    max_weekly_hours: Decimal
    min_lunch_duration: int
    max_lunch_duration: int
    overtime_threshold: Decimal
    double_time_threshold: Decimal
    min_start_time: int
    max_end_time: int
    pay_period_start_date: date
    pay_period_length: int
    holidays: tuple[Holiday, ...] = ()

    standard_daily_hours: Decimal = DEFAULT_STANDARD_DAILY_HOURS
    holiday_pay_multiplier: Decimal = DEFAULT_HOLIDAY_PAY_MULTIPLIER
    weekly_overtime_threshold: Optional[Decimal] = None
    weekly_double_time_threshold: Optional[Decimal] = None

    allow_future_time_entry: bool = False
    allow_past_time_entry: bool = True
    past_time_entry_limit: int = DEFAULT_PAST_TIME_ENTRY_LIMIT

    company_name: str = ""

    _holidays_by_date: dict = field(init=False, repr=False, compare=False, hash=False)

    def __post_init__(self):
        by_date: dict[date, Holiday] = {}
        for h in self.holidays:
            if h.date in by_date:
                raise ConfigurationError(
                    f"Two holidays configured on {h.date.isoformat()}",
                    details={"first": by_date[h.date].name, "second": h.name},
                )
            by_date[h.date] = h
        object.__setattr__(self, "holidays", tuple(sorted(self.holidays, key=lambda h: h.date)))
        object.__setattr__(self, "_holidays_by_date", by_date)
        self._check_invariants()

    def _check_invariants(self) -> None:
        if self.min_lunch_duration > self.max_lunch_duration:
            raise ConfigurationError(
                "Minimum lunch duration exceeds maximum lunch duration",
                details={"min_lunch_duration": self.min_lunch_duration, "max_lunch_duration": self.max_lunch_duration},
            )
        if not self.overtime_threshold <= self.double_time_threshold <= self.max_daily_hours:
            raise ConfigurationError(
                "Thresholds must satisfy overtime <= double time <= max daily hours",
                details={
                    "overtime_threshold": self.overtime_threshold,
                    "double_time_threshold": self.double_time_threshold,
                    "max_daily_hours": self.max_daily_hours,
                },
            )
        if self.weekly_regular_cap > self.weekly_overtime_cap:
            raise ConfigurationError(
                "Weekly overtime threshold exceeds weekly double time threshold",
                details={"weekly_overtime_threshold": self.weekly_regular_cap, "weekly_double_time_threshold": self.weekly_overtime_cap},
            )
        if not 0 <= self.min_start_time < self.max_end_time < MINUTES_PER_DAY:
            raise ConfigurationError(
                "Earliest start time must be before latest end time, no later than 11:59 PM",
                details={"min_start_time": self.min_start_time, "max_end_time": self.max_end_time},
            )
        if self.pay_period_length <= 0 or self.pay_period_length % DAYS_PER_WEEK:
            raise ConfigurationError(
                "Pay period length must be a positive number of whole weeks",
                details={"pay_period_length": self.pay_period_length},
            )
        if self.pay_period_start_date.weekday() != 0:
            raise ConfigurationError(
                "Pay period anchor date must be a Monday",
                details={"pay_period_start_date": self.pay_period_start_date},
            )
        if self.standard_daily_hours > self.max_daily_hours:
            raise ConfigurationError(
                "Standard daily hours exceed max daily hours",
                details={"standard_daily_hours": self.standard_daily_hours, "max_daily_hours": self.max_daily_hours},
            )

    @property
    def weekly_regular_cap(self) -> Decimal:
        if self.weekly_overtime_threshold is not None:
            return self.weekly_overtime_threshold
        return self.overtime_threshold * WORKDAYS_PER_WEEK

    @property
    def weekly_overtime_cap(self) -> Decimal:
        if self.weekly_double_time_threshold is not None:
            return self.weekly_double_time_threshold
        return self.double_time_threshold * WORKDAYS_PER_WEEK

    @property
    def weeks_per_period(self) -> int:
        return self.pay_period_length // DAYS_PER_WEEK

    def holiday_on(self, day: Optional[date]) -> Optional[Holiday]:
        if day is None:
            return None
        return self._holidays_by_date.get(day)
