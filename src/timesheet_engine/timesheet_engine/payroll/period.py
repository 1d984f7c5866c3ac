from __future__ import annotations

from dataclasses import replace
from datetime import date, timedelta
from typing import Optional, Sequence

from ..core.constants import DAYS_PER_WEEK
from ..core.enums import Weekday
from ..core.exceptions import (
    ComputationError,
    MalformedTimesheetError,
    MisalignedPeriodError,
    TimesheetBatchError,
    ValidationError,
)
from ..entries.model import TimeEntry
from ..entries.validator import TimeEntryValidator
from ..policy.model import Policy
from .daily import DailyHoursCalculator
from .model import EntryIssue, PayPeriod, PeriodBounds, PeriodEvaluation, WeekOutcome
from .weekly import WeeklyAggregator


def period_containing(day: date, policy: Policy) -> date:
    """Start of the pay period that contains `day` (works before the anchor too)."""
    offset = (day - policy.pay_period_start_date).days
    return policy.pay_period_start_date + timedelta(days=offset - offset % policy.pay_period_length)


def period_end(start_date: date, policy: Policy) -> date:
    return start_date + timedelta(days=policy.pay_period_length - 1)


def week_starts(start_date: date, policy: Policy) -> tuple[date, ...]:
    return tuple(start_date + timedelta(days=DAYS_PER_WEEK * i) for i in range(policy.weeks_per_period))


def period_bounds(start_date: date, policy: Policy) -> PeriodBounds:
    return PeriodBounds(
        start_date=start_date,
        end_date=period_end(start_date, policy),
        week_starts=week_starts(start_date, policy),
    )


def ensure_aligned(start_date: date, policy: Policy) -> None:
    offset = (start_date - policy.pay_period_start_date).days
    if offset % policy.pay_period_length:
        expected = period_containing(start_date, policy)
        raise MisalignedPeriodError(
            f"Pay period cannot start on {start_date.isoformat()}; "
            f"periods of {policy.pay_period_length} days start from {policy.pay_period_start_date.isoformat()} "
            f"(nearest earlier start {expected.isoformat()})",
            work_date=start_date,
            details={
                "start_date": start_date,
                "pay_period_start_date": policy.pay_period_start_date,
                "pay_period_length": policy.pay_period_length,
            },
        )


class PayPeriodGenerator:
    """Dates, validates, computes and folds every week of one pay period."""

    def __init__(
        self,
        *,
        validator: Optional[TimeEntryValidator] = None,
        daily: Optional[DailyHoursCalculator] = None,
        weekly: Optional[WeeklyAggregator] = None,
    ):
        self._validator = validator or TimeEntryValidator()
        self._daily = daily or DailyHoursCalculator()
        self._weekly = weekly or WeeklyAggregator()

    def generate(
        self,
        start_date: date,
        weeks_of_entries: Sequence[Sequence[TimeEntry]],
        policy: Policy,
        *,
        today: Optional[date] = None,
    ) -> PayPeriod:
        evaluation = self.evaluate(start_date, weeks_of_entries, policy, today=today)
        if not evaluation.ok:
            raise TimesheetBatchError(evaluation.issues)
        return evaluation.to_period()

    def evaluate(
        self,
        start_date: date,
        weeks_of_entries: Sequence[Sequence[TimeEntry]],
        policy: Policy,
        *,
        today: Optional[date] = None,
    ) -> PeriodEvaluation:
        """Like generate(), but returns every week's outcome and all collected issues.

        Misalignment and configuration errors are raised; everything else is
        collected per entry or per week.
        """
        ensure_aligned(start_date, policy)

        if len(weeks_of_entries) != policy.weeks_per_period:
            raise MalformedTimesheetError(
                f"A pay period of {policy.pay_period_length} days needs {policy.weeks_per_period} weeks "
                f"(got {len(weeks_of_entries)})",
                work_date=start_date,
                details={"weeks": len(weeks_of_entries)},
            )

        outcomes = tuple(
            self._evaluate_week(i, week_start, weeks_of_entries[i], policy, today)
            for i, week_start in enumerate(week_starts(start_date, policy))
        )
        return PeriodEvaluation(start_date=start_date, end_date=period_end(start_date, policy), outcomes=outcomes)

    def _evaluate_week(
        self,
        index: int,
        week_start: date,
        entries: Sequence[TimeEntry],
        policy: Policy,
        today: Optional[date],
    ) -> WeekOutcome:
        if len(entries) != len(Weekday):
            error = MalformedTimesheetError(
                f"A week needs exactly {len(Weekday)} entries (got {len(entries)})",
                work_date=week_start,
                details={"entries": len(entries)},
            )
            return WeekOutcome(week_index=index, entries=tuple(entries), week=None, issues=(EntryIssue(index, None, error),))

        issues: list[EntryIssue] = []
        computed: list[TimeEntry] = []
        for offset, (weekday, entry) in enumerate(zip(Weekday, entries)):
            dated = self._assign_date(entry, week_start + timedelta(days=offset))
            result = self._validator.validate(dated, policy, today=today)
            if not result.ok:
                issues.append(EntryIssue(index, weekday, result.error))
                computed.append(dated)
                continue
            try:
                computed.append(self._daily.apply(dated, policy))
            except (ValidationError, ComputationError) as e:
                issues.append(EntryIssue(index, weekday, e))
                computed.append(dated)

        week = None
        if not issues:
            try:
                week = self._weekly.aggregate(computed, policy, week_start=week_start)
            except (ValidationError, ComputationError) as e:
                issues.append(EntryIssue(index, None, e))

        return WeekOutcome(week_index=index, entries=tuple(computed), week=week, issues=tuple(issues))

    @staticmethod
    def _assign_date(entry: TimeEntry, day: date) -> TimeEntry:
        if entry.work_date is not None and entry.work_date != day:
            raise MisalignedPeriodError(
                f"Entry dated {entry.work_date.isoformat()} was submitted for {day.isoformat()}",
                work_date=entry.work_date,
                details={"expected_date": day},
            )
        return replace(entry, work_date=day)
