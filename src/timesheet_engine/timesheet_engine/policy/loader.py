"""Build a Policy from the settings store.

The settings store keeps timesheet rules as a camelCase mapping (the same shape
the admin settings screen edits), with holidays as a separate list. Missing
keys fall back to DEFAULT_SETTINGS.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Iterable, Mapping, Optional

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_hours, require_int
from ..core.exceptions import ConfigurationError, ValidationError
from .model import Holiday, Policy

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS: dict[str, Any] = {
    "companyName": "",
    "payPeriodStartDate": "2024-01-01",
    "payPeriodLength": 14,
    "maxDailyHours": 15,
    "maxWeeklyHours": 50,
    "minLunchDuration": 30,
    "maxLunchDuration": 60,
    "minStartTime": 420,
    "maxEndTime": 1200,
    "overtimeThreshold": 8,
    "doubleTimeThreshold": 12,
    "weeklyOvertimeThreshold": None,
    "weeklyDoubleTimeThreshold": None,
    "holidayHoursDefault": 8,
    "holidayPayMultiplier": 1.5,
    "allowFutureTimeEntry": False,
    "allowPastTimeEntry": True,
    "pastTimeEntryLimit": 14,
}


def _as_date(value, field_name: str) -> date:
    if isinstance(value, date):
        return value
    try:
        return parse_iso_date(value)
    except ValidationError:
        raise ConfigurationError(f"{field_name} is not a valid date", details={field_name: value})


def _as_bool(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


def holiday_from_mapping(raw: Mapping[str, Any], *, default_pay_rate) -> Holiday:
    name = str(raw.get("name") or "").strip()
    if not name:
        raise ConfigurationError("Holiday name is required", details={"holiday": raw.get("date")})

    pay_rate = raw.get("payRate", raw.get("payMultiplier"))
    hours = raw.get("hoursDefault", raw.get("hours"))
    return Holiday(
        date=_as_date(raw.get("date"), "holiday date"),
        name=name,
        pay_rate=require_hours(default_pay_rate if pay_rate is None else pay_rate, "payRate"),
        hours=None if hours is None else require_hours(hours, "hoursDefault"),
    )


def policy_from_mapping(
    settings: Mapping[str, Any],
    holidays: Optional[Iterable[Mapping[str, Any]]] = None,
) -> Policy:
    s = {**DEFAULT_SETTINGS, **{k: v for k, v in settings.items() if v is not None}}
    if holidays is None:
        holidays = s.get("holidays") or []

    multiplier = require_hours(s["holidayPayMultiplier"], "holidayPayMultiplier")
    weekly_ot = s.get("weeklyOvertimeThreshold")
    weekly_dt = s.get("weeklyDoubleTimeThreshold")

    policy = Policy(
        max_daily_hours=require_hours(s["maxDailyHours"], "maxDailyHours"),
        max_weekly_hours=require_hours(s["maxWeeklyHours"], "maxWeeklyHours"),
        min_lunch_duration=require_int(s["minLunchDuration"], "minLunchDuration"),
        max_lunch_duration=require_int(s["maxLunchDuration"], "maxLunchDuration"),
        overtime_threshold=require_hours(s["overtimeThreshold"], "overtimeThreshold"),
        double_time_threshold=require_hours(s["doubleTimeThreshold"], "doubleTimeThreshold"),
        min_start_time=require_int(s["minStartTime"], "minStartTime"),
        max_end_time=require_int(s["maxEndTime"], "maxEndTime"),
        pay_period_start_date=_as_date(s["payPeriodStartDate"], "payPeriodStartDate"),
        pay_period_length=require_int(s["payPeriodLength"], "payPeriodLength", minimum=1),
        holidays=tuple(holiday_from_mapping(h, default_pay_rate=multiplier) for h in holidays),
        standard_daily_hours=require_hours(s["holidayHoursDefault"], "holidayHoursDefault"),
        holiday_pay_multiplier=multiplier,
        weekly_overtime_threshold=None if weekly_ot is None else require_hours(weekly_ot, "weeklyOvertimeThreshold"),
        weekly_double_time_threshold=None if weekly_dt is None else require_hours(weekly_dt, "weeklyDoubleTimeThreshold"),
        allow_future_time_entry=_as_bool(s["allowFutureTimeEntry"]),
        allow_past_time_entry=_as_bool(s["allowPastTimeEntry"]),
        past_time_entry_limit=require_int(s["pastTimeEntryLimit"], "pastTimeEntryLimit"),
        company_name=str(s.get("companyName") or ""),
    )
    logger.debug("Loaded policy for %r with %d holiday(s)", policy.company_name, len(policy.holidays))
    return policy


def policy_from_settings(settings_module) -> Policy:
    """Build the policy from a config.* settings module."""
    return policy_from_mapping(
        getattr(settings_module, "TIMESHEET_SETTINGS", {}),
        getattr(settings_module, "HOLIDAYS", []),
    )


def policy_to_dict(policy: Policy) -> dict:
    return {
        "companyName": policy.company_name,
        "payPeriodStartDate": policy.pay_period_start_date.isoformat(),
        "payPeriodLength": policy.pay_period_length,
        "maxDailyHours": float(policy.max_daily_hours),
        "maxWeeklyHours": float(policy.max_weekly_hours),
        "minLunchDuration": policy.min_lunch_duration,
        "maxLunchDuration": policy.max_lunch_duration,
        "minStartTime": policy.min_start_time,
        "maxEndTime": policy.max_end_time,
        "overtimeThreshold": float(policy.overtime_threshold),
        "doubleTimeThreshold": float(policy.double_time_threshold),
        "weeklyOvertimeThreshold": float(policy.weekly_regular_cap),
        "weeklyDoubleTimeThreshold": float(policy.weekly_overtime_cap),
        "holidayHoursDefault": float(policy.standard_daily_hours),
        "holidayPayMultiplier": float(policy.holiday_pay_multiplier),
        "allowFutureTimeEntry": policy.allow_future_time_entry,
        "allowPastTimeEntry": policy.allow_past_time_entry,
        "pastTimeEntryLimit": policy.past_time_entry_limit,
        "holidays": [
            {
                "date": h.date.isoformat(),
                "name": h.name,
                "payRate": float(h.pay_rate),
                "hoursDefault": float(h.hours) if h.hours is not None else None,
            }
            for h in policy.holidays
        ],
    }
