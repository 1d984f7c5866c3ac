"""JSON payload <-> domain values for the timesheet API.

Payload shape follows the client's timesheet form: weeks keyed monday..friday,
each day carrying dayType and optional clock times ("HH:MM" or "h:mm AM/PM").
"""

from __future__ import annotations

from datetime import date, time
from decimal import Decimal
from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_clock_time, parse_iso_date
from ..core.enums import DayType, Weekday
from ..core.exceptions import ConfigurationError, MalformedTimesheetError
from ..entries.model import TimeEntry
from ..payroll.model import PayPeriod, PeriodBounds, PeriodEvaluation, WeekData, WeekOutcome


def parse_day_type(value: Any) -> DayType:
    try:
        return DayType(str(value or DayType.REGULAR.value).strip().upper())
    except ValueError:
        raise ConfigurationError(f"Unknown day type {value!r}", details={"day_type": value})


def parse_day(raw: Mapping[str, Any]) -> TimeEntry:
    if not isinstance(raw, Mapping):
        raise MalformedTimesheetError("Each day must be an object")
    return TimeEntry(
        day_type=parse_day_type(raw.get("dayType")),
        start_time=parse_clock_time(raw.get("startTime")),
        end_time=parse_clock_time(raw.get("endTime")),
        lunch_start_time=parse_clock_time(raw.get("lunchStartTime")),
        lunch_end_time=parse_clock_time(raw.get("lunchEndTime")),
        work_date=parse_iso_date(raw["date"]) if raw.get("date") else None,
    )


def parse_week(raw: Mapping[str, Any]) -> list[TimeEntry]:
    if not isinstance(raw, Mapping):
        raise MalformedTimesheetError("Each week must be an object")
    missing = [d.value for d in Weekday if d.value not in raw]
    if missing:
        raise MalformedTimesheetError(f"Week is missing {', '.join(missing)}", details={"missing": ",".join(missing)})
    return [parse_day(raw[d.value]) for d in Weekday]


def parse_compute_request(body: Optional[Mapping[str, Any]]) -> tuple[date, list[list[TimeEntry]], Optional[date]]:
    if not isinstance(body, Mapping):
        raise MalformedTimesheetError("Request body must be a JSON object")
    if not body.get("startDate"):
        raise MalformedTimesheetError("startDate is required")
    weeks = body.get("weeks")
    if not isinstance(weeks, list):
        raise MalformedTimesheetError("weeks must be a list")

    start_date = parse_iso_date(body["startDate"])
    today = parse_iso_date(body["today"]) if body.get("today") else None
    return start_date, [parse_week(w) for w in weeks], today


def _hours(value: Optional[Decimal]) -> Optional[float]:
    return None if value is None else float(value)


def _clock(value: Optional[time]) -> Optional[str]:
    return value.strftime("%H:%M") if value else None


def entry_to_dict(entry: TimeEntry) -> dict:
    return {
        "date": entry.work_date.isoformat() if entry.work_date else None,
        "dayType": entry.day_type.value,
        "startTime": _clock(entry.start_time),
        "endTime": _clock(entry.end_time),
        "lunchStartTime": _clock(entry.lunch_start_time),
        "lunchEndTime": _clock(entry.lunch_end_time),
        "totalHours": _hours(entry.total_hours),
        "holidayPayRate": _hours(entry.holiday_pay_rate),
    }


def week_to_dict(week: WeekData) -> dict:
    data: dict[str, Any] = {d.value: entry_to_dict(e) for d, e in week.by_weekday().items()}
    data.update(
        {
            "weekStart": week.week_start.isoformat() if week.week_start else None,
            "regularHours": float(week.regular_hours),
            "overtimeHours": float(week.overtime_hours),
            "doubleTimeHours": float(week.double_time_hours),
            "extraHours": float(week.extra_hours),
            "vacationHours": float(week.vacation_hours),
            "totalHours": float(week.total_hours),
        }
    )
    return data


def outcome_to_dict(outcome: WeekOutcome) -> dict:
    if outcome.week is not None:
        return week_to_dict(outcome.week)
    data: dict[str, Any] = {d.value: entry_to_dict(e) for d, e in zip(Weekday, outcome.entries)}
    data["totalHours"] = None
    data["errors"] = [issue.to_dict() for issue in outcome.issues]
    return data


def period_to_dict(period: PayPeriod) -> dict:
    return {
        "startDate": period.start_date.isoformat(),
        "endDate": period.end_date.isoformat(),
        "weeks": [week_to_dict(w) for w in period.weeks],
        "regularHours": float(period.regular_hours),
        "extraHours": float(period.extra_hours),
        "vacationHours": float(period.vacation_hours),
        "totalHours": float(period.total_hours),
    }


def evaluation_to_dict(evaluation: PeriodEvaluation) -> dict:
    return {
        "startDate": evaluation.start_date.isoformat(),
        "endDate": evaluation.end_date.isoformat(),
        "weeks": [outcome_to_dict(o) for o in evaluation.outcomes],
    }


def bounds_to_dict(bounds: PeriodBounds) -> dict:
    return {
        "startDate": bounds.start_date.isoformat(),
        "endDate": bounds.end_date.isoformat(),
        "weekStarts": [d.isoformat() for d in bounds.week_starts],
    }
