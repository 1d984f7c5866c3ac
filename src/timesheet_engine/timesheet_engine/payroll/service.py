from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from ..entries.model import TimeEntry
from ..policy.model import Policy
from .model import EntryIssue, PayPeriod, PeriodBounds, PeriodEvaluation
from .period import PayPeriodGenerator, period_bounds, period_containing

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TimesheetReport:
    evaluation: PeriodEvaluation
    period: Optional[PayPeriod]

    @property
    def ok(self) -> bool:
        return self.period is not None

    @property
    def issues(self) -> tuple[EntryIssue, ...]:
        return self.evaluation.issues


class TimesheetService:
    """Batch entry point: one employee's pay period in, totals or every error out."""

    def __init__(self, policy: Policy, *, generator: Optional[PayPeriodGenerator] = None):
        self._policy = policy
        self._generator = generator or PayPeriodGenerator()

    @property
    def policy(self) -> Policy:
        return self._policy

    def compute(
        self,
        start_date: date,
        weeks_of_entries: Sequence[Sequence[TimeEntry]],
        *,
        today: Optional[date] = None,
    ) -> TimesheetReport:
        evaluation = self._generator.evaluate(start_date, weeks_of_entries, self._policy, today=today)

        if not evaluation.ok:
            for issue in evaluation.issues:
                logger.warning(
                    "Timesheet %s week %d %s: %s",
                    start_date.isoformat(),
                    issue.week_index + 1,
                    issue.weekday.value if issue.weekday else "-",
                    issue.error.message,
                )
            return TimesheetReport(evaluation=evaluation, period=None)

        period = evaluation.to_period()
        logger.info(
            "Computed pay period %s..%s: total=%s vacation=%s",
            period.start_date.isoformat(),
            period.end_date.isoformat(),
            period.total_hours,
            period.vacation_hours,
        )
        return TimesheetReport(evaluation=evaluation, period=period)

    def current_period(self, today: date) -> PeriodBounds:
        return period_bounds(period_containing(today, self._policy), self._policy)
