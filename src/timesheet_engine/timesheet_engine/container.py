from __future__ import annotations

from dataclasses import dataclass

from .entries.validator import TimeEntryValidator
from .payroll.calculator.factory import DailyHoursStrategyFactory
from .payroll.daily import DailyHoursCalculator
from .payroll.period import PayPeriodGenerator
from .payroll.service import TimesheetService
from .payroll.weekly import WeeklyAggregator
from .policy.model import Policy


@dataclass(frozen=True)
class Container:
    policy: Policy

    validator: TimeEntryValidator
    daily_calculator: DailyHoursCalculator
    weekly_aggregator: WeeklyAggregator
    period_generator: PayPeriodGenerator

    timesheet_service: TimesheetService


def build_container(*, policy: Policy) -> Container:
    validator = TimeEntryValidator()
    daily_calculator = DailyHoursCalculator(strategy_factory=DailyHoursStrategyFactory())
    weekly_aggregator = WeeklyAggregator()
    period_generator = PayPeriodGenerator(
        validator=validator,
        daily=daily_calculator,
        weekly=weekly_aggregator,
    )
    timesheet_service = TimesheetService(policy, generator=period_generator)

    return Container(
        policy=policy,
        validator=validator,
        daily_calculator=daily_calculator,
        weekly_aggregator=weekly_aggregator,
        period_generator=period_generator,
        timesheet_service=timesheet_service,
    )
