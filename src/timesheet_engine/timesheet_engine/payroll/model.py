from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..core.constants import ZERO_HOURS
from ..core.enums import DayType, Weekday
from ..core.exceptions import DomainError
from ..entries.model import TimeEntry
from ..policy.model import Holiday


@dataclass(frozen=True)
class DailyHours:
    """Hours credited for one day. Pay amounts are left to payroll."""

    day_type: DayType
    minutes: Decimal
    hours: Decimal
    work_date: Optional[date] = None
    holiday: Optional[Holiday] = None

    @property
    def holiday_rate_eligible(self) -> bool:
        return self.holiday is not None


@dataclass(frozen=True)
class WeekData:
    """Five computed entries (Monday..Friday) and the week's hour bands."""

    entries: tuple[TimeEntry, ...]
    regular_hours: Decimal
    overtime_hours: Decimal
    double_time_hours: Decimal
    week_start: Optional[date] = None

    @property
    def extra_hours(self) -> Decimal:
        return self.overtime_hours + self.double_time_hours

    @property
    def total_hours(self) -> Decimal:
        return self.regular_hours + self.extra_hours

    @property
    def vacation_hours(self) -> Decimal:
        return sum(
            (e.total_hours for e in self.entries if e.day_type is DayType.VACATION),
            ZERO_HOURS,
        )

    def by_weekday(self) -> dict[Weekday, TimeEntry]:
        return dict(zip(Weekday, self.entries))


@dataclass(frozen=True)
class PayPeriod:
    start_date: date
    end_date: date
    weeks: tuple[WeekData, ...]

    @property
    def vacation_hours(self) -> Decimal:
        return sum((w.vacation_hours for w in self.weeks), ZERO_HOURS)

    @property
    def total_hours(self) -> Decimal:
        return sum((w.total_hours for w in self.weeks), ZERO_HOURS)

    @property
    def regular_hours(self) -> Decimal:
        return sum((w.regular_hours for w in self.weeks), ZERO_HOURS)

    @property
    def extra_hours(self) -> Decimal:
        return sum((w.extra_hours for w in self.weeks), ZERO_HOURS)


@dataclass(frozen=True)
class PeriodBounds:
    start_date: date
    end_date: date
    week_starts: tuple[date, ...]


@dataclass(frozen=True)
class EntryIssue:
    """Where in the period an error was found. `weekday` is None for week-level errors."""

    week_index: int
    weekday: Optional[Weekday]
    error: DomainError

    def to_dict(self) -> dict:
        data = self.error.to_dict()
        data["week"] = self.week_index + 1
        data["day"] = self.weekday.value if self.weekday else None
        return data


@dataclass(frozen=True)
class WeekOutcome:
    """One week's result: computed entries always, an aggregate only when clean."""

    week_index: int
    entries: tuple[TimeEntry, ...]
    week: Optional[WeekData]
    issues: tuple[EntryIssue, ...] = ()


@dataclass(frozen=True)
class PeriodEvaluation:
    start_date: date
    end_date: date
    outcomes: tuple[WeekOutcome, ...]

    @property
    def issues(self) -> tuple[EntryIssue, ...]:
        return tuple(issue for o in self.outcomes for issue in o.issues)

    @property
    def ok(self) -> bool:
        return not self.issues

    def to_period(self) -> PayPeriod:
        return PayPeriod(
            start_date=self.start_date,
            end_date=self.end_date,
            weeks=tuple(o.week for o in self.outcomes),
        )
