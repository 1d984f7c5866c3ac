from __future__ import annotations

import re
from datetime import date, datetime, time
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

from ..core.constants import HOURS_QUANTUM, MINUTES_PER_HOUR
from ..core.exceptions import ValidationError

_CLOCK_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})(?::\d{2})?\s*([AaPp][Mm])?\s*$")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date '{value}', expected YYYY-MM-DD")


def parse_clock_time(value: Optional[str]) -> Optional[time]:
    """Parse "HH:MM" (24h) or "h:mm AM/PM" into a time; blank means absent."""
    if value is None or not str(value).strip():
        return None

    m = _CLOCK_RE.match(str(value))
    if not m:
        raise ValidationError(f"Invalid time '{value}'")

    hours, minutes, period = int(m.group(1)), int(m.group(2)), m.group(3)
    if period:
        if not 1 <= hours <= 12:
            raise ValidationError(f"Invalid time '{value}'")
        hours = hours % 12 + (12 if period.upper() == "PM" else 0)
    if hours > 23 or minutes > 59:
        raise ValidationError(f"Invalid time '{value}'")
    return time(hours, minutes)


def minutes_of_day(value: time) -> int:
    return value.hour * MINUTES_PER_HOUR + value.minute


def format_clock(value: Union[time, int]) -> str:
    """Human-readable 12-hour clock, e.g. 8:00 AM."""
    minutes = value if isinstance(value, int) else minutes_of_day(value)
    hours, mins = divmod(minutes, MINUTES_PER_HOUR)
    period = "PM" if hours % 24 >= 12 else "AM"
    return f"{hours % 12 or 12}:{mins:02d} {period}"


def to_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def minutes_to_hours(minutes: int) -> Decimal:
    """Minutes -> hours, two decimals, round-half-up."""
    return (Decimal(minutes) / MINUTES_PER_HOUR).quantize(HOURS_QUANTUM, rounding=ROUND_HALF_UP)


def hours_to_minutes(hours) -> Decimal:
    return to_decimal(hours) * MINUTES_PER_HOUR


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
