from __future__ import annotations

from dataclasses import replace
from datetime import date, time

import pytest

from src.timesheet_engine.timesheet_engine.core.enums import DayType
from src.timesheet_engine.timesheet_engine.core.exceptions import (
    BoundsError,
    ConfigurationError,
    EntryWindowError,
    IncompleteIntervalError,
    InconsistentStateError,
    MissingTimeError,
    OrderingError,
)
from src.timesheet_engine.timesheet_engine.entries.model import TimeEntry
from src.timesheet_engine.timesheet_engine.entries.validator import TimeEntryValidator
from src.timesheet_engine.timesheet_engine.payroll.daily import DailyHoursCalculator
from src.timesheet_engine.timesheet_engine.policy.loader import policy_from_mapping

POLICY = policy_from_mapping({}, [{"date": "2024-01-01", "name": "New Year's Day"}])


def regular(start, end, lunch_start=None, lunch_end=None, work_date=None) -> TimeEntry:
    return TimeEntry(
        day_type=DayType.REGULAR,
        start_time=start,
        end_time=end,
        lunch_start_time=lunch_start,
        lunch_end_time=lunch_end,
        work_date=work_date,
    )


def error_of(entry, policy=POLICY, **kwargs):
    return TimeEntryValidator().validate(entry, policy, **kwargs).error


def test_regular_day_with_lunch_is_valid():
    result = TimeEntryValidator().validate(regular(time(8), time(17), time(12), time(12, 30)), POLICY)

    assert result.ok
    assert result.raise_for_error() is result.entry


@pytest.mark.parametrize("start,end", [(None, time(17)), (time(8), None), (None, None)])
def test_missing_start_or_end(start, end):
    assert isinstance(error_of(regular(start, end)), MissingTimeError)


def test_end_before_start_names_both_times():
    err = error_of(regular(time(17), time(8)))

    assert isinstance(err, OrderingError)
    assert "8:00 AM" in err.message
    assert "5:00 PM" in err.message


def test_end_equal_to_start_is_ordering_error():
    assert isinstance(error_of(regular(time(9), time(9))), OrderingError)


def test_bounds_are_inclusive():
    assert error_of(regular(time(7, 0), time(20, 0))) is None


@pytest.mark.parametrize("start,end", [(time(6, 59), time(17)), (time(8), time(20, 1))])
def test_one_minute_outside_bounds_fails(start, end):
    assert isinstance(error_of(regular(start, end)), BoundsError)


def test_only_one_lunch_boundary():
    assert isinstance(error_of(regular(time(8), time(17), time(12), None)), IncompleteIntervalError)
    assert isinstance(error_of(regular(time(8), time(17), None, time(12, 30))), IncompleteIntervalError)


def test_lunch_end_before_lunch_start():
    assert isinstance(error_of(regular(time(8), time(17), time(12, 30), time(12))), OrderingError)


@pytest.mark.parametrize(
    "lunch_start,lunch_end",
    [
        (time(12), time(12, 20)),  # too short
        (time(12), time(13, 30)),  # too long
        (time(7, 30), time(8, 15)),  # starts before work
        (time(16, 45), time(17, 15)),  # ends after work
    ],
)
def test_lunch_bounds(lunch_start, lunch_end):
    assert isinstance(error_of(regular(time(8), time(17), lunch_start, lunch_end)), BoundsError)


def test_lunch_duration_limits_are_inclusive():
    assert error_of(regular(time(8), time(17), time(12), time(12, 30))) is None
    assert error_of(regular(time(8), time(17), time(12), time(13))) is None


@pytest.mark.parametrize("day_type", [DayType.VACATION, DayType.SICK, DayType.HOLIDAY])
def test_absence_days_without_times_are_valid(day_type):
    assert error_of(TimeEntry(day_type=day_type)) is None


@pytest.mark.parametrize("field", ["start_time", "end_time", "lunch_start_time", "lunch_end_time"])
def test_absence_day_with_clock_time_is_inconsistent(field):
    entry = replace(TimeEntry(day_type=DayType.VACATION), **{field: time(9)})

    assert isinstance(error_of(entry), InconsistentStateError)


def test_unknown_day_type_is_fatal():
    with pytest.raises(ConfigurationError):
        TimeEntryValidator().validate(TimeEntry(day_type="OVERTIME"), POLICY)


def test_check_order_is_deterministic():
    # ordering is reported before bounds
    assert isinstance(error_of(regular(time(6), time(5))), OrderingError)
    # bounds are reported before lunch
    assert isinstance(error_of(regular(time(6), time(12), time(11), time(13))), BoundsError)
    # a one-sided lunch is a presence failure, reported before ordering and bounds
    assert isinstance(error_of(regular(time(6), time(5), time(11), None)), IncompleteIntervalError)
    assert isinstance(error_of(regular(time(6), time(12), None, time(11))), IncompleteIntervalError)
    # work times are still checked for presence first
    assert isinstance(error_of(regular(None, time(12), time(11), None)), MissingTimeError)


def test_revalidating_computed_entry_is_idempotent():
    entry = regular(time(8), time(17), time(12), time(12, 30), work_date=date(2024, 1, 2))
    computed = DailyHoursCalculator().apply(entry, POLICY)

    first = TimeEntryValidator().validate(computed, POLICY)
    second = TimeEntryValidator().validate(first.entry, POLICY)
    assert first.ok and second.ok


def test_future_entries_rejected_unless_allowed():
    entry = regular(time(8), time(17), work_date=date(2024, 1, 11))
    today = date(2024, 1, 10)

    assert isinstance(error_of(entry, today=today), EntryWindowError)
    allowed = replace(POLICY, allow_future_time_entry=True)
    assert error_of(entry, allowed, today=today) is None


def test_past_entries_limited_to_window():
    today = date(2024, 1, 10)

    assert error_of(regular(time(8), time(17), work_date=date(2023, 12, 27)), today=today) is None
    assert isinstance(error_of(regular(time(8), time(17), work_date=date(2023, 12, 26)), today=today), EntryWindowError)

    no_past = replace(POLICY, allow_past_time_entry=False)
    assert isinstance(error_of(regular(time(8), time(17), work_date=date(2024, 1, 9)), no_past, today=today), EntryWindowError)


def test_window_is_skipped_without_today_or_date():
    assert error_of(regular(time(8), time(17), work_date=date(2000, 1, 3))) is None
    assert error_of(regular(time(8), time(17)), today=date(2024, 1, 10)) is None
