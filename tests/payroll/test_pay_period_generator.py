from __future__ import annotations

from datetime import date, time
from decimal import Decimal

import pytest

from src.timesheet_engine.timesheet_engine.core.enums import DayType, Weekday
from src.timesheet_engine.timesheet_engine.core.exceptions import (
    ExceedsMaxWeeklyHoursError,
    InconsistentStateError,
    MalformedTimesheetError,
    MisalignedPeriodError,
    MissingTimeError,
    TimesheetBatchError,
)
from src.timesheet_engine.timesheet_engine.entries.model import TimeEntry
from src.timesheet_engine.timesheet_engine.payroll.period import (
    PayPeriodGenerator,
    period_bounds,
    period_containing,
)
from src.timesheet_engine.timesheet_engine.policy.loader import policy_from_mapping

POLICY = policy_from_mapping(
    {"payPeriodStartDate": "2024-01-01", "payPeriodLength": 14},
    [
        {"date": "2024-01-01", "name": "New Year's Day"},
        {"date": "2024-02-19", "name": "Family Day", "payRate": 2},
    ],
)

WORKDAY = TimeEntry(start_time=time(8), end_time=time(17), lunch_start_time=time(12), lunch_end_time=time(12, 30))
VACATION = TimeEntry(day_type=DayType.VACATION)


def test_full_period_totals():
    weeks = [[WORKDAY] * 5, [WORKDAY] * 4 + [VACATION]]

    period = PayPeriodGenerator().generate(date(2024, 1, 15), weeks, POLICY)

    assert period.start_date == date(2024, 1, 15)
    assert period.end_date == date(2024, 1, 28)
    assert period.weeks[0].total_hours == Decimal("42.5")
    assert period.weeks[0].regular_hours == Decimal("40")
    assert period.weeks[0].overtime_hours == Decimal("2.5")
    assert period.weeks[1].total_hours == Decimal("42")
    assert period.total_hours == Decimal("84.5")
    assert period.total_hours == sum(w.total_hours for w in period.weeks)
    assert period.vacation_hours == Decimal("8")


def test_dates_are_assigned_from_period_start():
    period = PayPeriodGenerator().generate(date(2024, 1, 15), [[WORKDAY] * 5, [WORKDAY] * 5], POLICY)

    assert period.weeks[0].week_start == date(2024, 1, 15)
    assert period.weeks[1].week_start == date(2024, 1, 22)
    assert period.weeks[1].by_weekday()[Weekday.FRIDAY].work_date == date(2024, 1, 26)
    assert WORKDAY.work_date is None


def test_holiday_matched_by_assigned_date():
    holiday = TimeEntry(day_type=DayType.HOLIDAY)
    weeks = [[WORKDAY] * 5, [holiday] + [WORKDAY] * 4]

    period = PayPeriodGenerator().generate(date(2024, 2, 12), weeks, POLICY)

    family_day = period.weeks[1].entries[0]
    assert family_day.work_date == date(2024, 2, 19)
    assert family_day.total_hours == Decimal("8")
    assert family_day.holiday_pay_rate == Decimal("2")


def test_misaligned_start_is_fatal():
    with pytest.raises(MisalignedPeriodError):
        PayPeriodGenerator().generate(date(2024, 1, 8), [[WORKDAY] * 5] * 2, POLICY)


def test_periods_before_anchor_are_aligned():
    period = PayPeriodGenerator().generate(date(2023, 12, 18), [[WORKDAY] * 5] * 2, POLICY)

    assert period.end_date == date(2023, 12, 31)


def test_wrong_number_of_weeks():
    with pytest.raises(MalformedTimesheetError):
        PayPeriodGenerator().generate(date(2024, 1, 15), [[WORKDAY] * 5], POLICY)


def test_entry_dated_outside_its_slot_is_fatal():
    stray = TimeEntry(start_time=time(8), end_time=time(16), work_date=date(2024, 3, 1))

    with pytest.raises(MisalignedPeriodError):
        PayPeriodGenerator().generate(date(2024, 1, 15), [[stray] + [WORKDAY] * 4, [WORKDAY] * 5], POLICY)


def test_errors_are_collected_across_the_batch():
    missing_end = TimeEntry(start_time=time(8))
    vacation_with_times = TimeEntry(day_type=DayType.VACATION, start_time=time(9))
    weeks = [
        [WORKDAY, missing_end, WORKDAY, vacation_with_times, WORKDAY],
        [WORKDAY] * 5,
    ]

    evaluation = PayPeriodGenerator().evaluate(date(2024, 1, 15), weeks, POLICY)

    assert not evaluation.ok
    assert evaluation.outcomes[0].week is None
    assert evaluation.outcomes[1].week is not None
    assert [(i.weekday, type(i.error)) for i in evaluation.issues] == [
        (Weekday.TUESDAY, MissingTimeError),
        (Weekday.THURSDAY, InconsistentStateError),
    ]
    assert evaluation.issues[0].error.work_date == date(2024, 1, 16)

    with pytest.raises(TimesheetBatchError) as exc:
        PayPeriodGenerator().generate(date(2024, 1, 15), weeks, POLICY)
    assert len(exc.value.issues) == 2


def test_weekly_limit_is_a_week_level_issue():
    long_day = TimeEntry(start_time=time(7), end_time=time(19), lunch_start_time=time(12), lunch_end_time=time(12, 30))

    evaluation = PayPeriodGenerator().evaluate(date(2024, 1, 15), [[long_day] * 5, [WORKDAY] * 5], POLICY)

    (issue,) = evaluation.issues
    assert issue.weekday is None
    assert isinstance(issue.error, ExceedsMaxWeeklyHoursError)
    assert evaluation.outcomes[0].entries[0].total_hours == Decimal("11.5")


def test_short_week_is_collected_not_fatal():
    evaluation = PayPeriodGenerator().evaluate(date(2024, 1, 15), [[WORKDAY] * 4, [WORKDAY] * 5], POLICY)

    (issue,) = evaluation.issues
    assert isinstance(issue.error, MalformedTimesheetError)
    assert evaluation.outcomes[1].week is not None


def test_recomputation_is_deterministic():
    weeks = [[WORKDAY, VACATION, WORKDAY, WORKDAY, WORKDAY], [WORKDAY] * 5]
    generator = PayPeriodGenerator()

    first = generator.generate(date(2024, 1, 15), weeks, POLICY)
    second = generator.generate(date(2024, 1, 15), weeks, POLICY)

    assert first == second
    assert first.vacation_hours == Decimal("8")


def test_period_containing_any_day():
    assert period_containing(date(2024, 1, 20), POLICY) == date(2024, 1, 15)
    assert period_containing(date(2024, 1, 15), POLICY) == date(2024, 1, 15)
    assert period_containing(date(2023, 12, 31), POLICY) == date(2023, 12, 18)


def test_period_bounds():
    bounds = period_bounds(date(2024, 1, 15), POLICY)

    assert bounds.end_date == date(2024, 1, 28)
    assert bounds.week_starts == (date(2024, 1, 15), date(2024, 1, 22))
