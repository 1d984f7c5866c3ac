from __future__ import annotations

from enum import Enum


class DayType(str, Enum):
    """Classification of a calendar day on a timesheet."""

    REGULAR = "REGULAR"
    VACATION = "VACATION"
    HOLIDAY = "HOLIDAY"
    SICK = "SICK"


class Weekday(str, Enum):
    """Working days collected on a timesheet week, in order."""

    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
