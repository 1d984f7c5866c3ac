from __future__ import annotations

from datetime import date, time
from decimal import Decimal
from typing import Any, Mapping, Optional, Sequence


class DomainError(Exception):
    """Base exception for business rule violations."""

    def __init__(
        self,
        message: str,
        *,
        work_date: Optional[date] = None,
        details: Optional[Mapping[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.work_date = work_date
        self.details = dict(details or {})

    @property
    def code(self) -> str:
        return type(self).__name__

    def to_dict(self) -> dict:
        return {
            "code": self.code,
            "message": self.message,
            "date": self.work_date.isoformat() if self.work_date else None,
            "details": {k: _plain(v) for k, v in self.details.items()},
        }


def _plain(value: Any) -> Any:
    if value is None or isinstance(value, (bool, int, str)):
        return value
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, (date, time)):
        return value.isoformat()
    return str(value)


class ConfigurationError(DomainError):
    """Malformed policy or unknown day type. Aborts the whole computation."""


class ValidationError(DomainError):
    """Raised when a single entry is invalid or violates domain rules."""


class MissingTimeError(ValidationError):
    """A worked day is missing its start or end time."""


class OrderingError(ValidationError):
    """An interval ends at or before it starts."""


class BoundsError(ValidationError):
    """A time or duration falls outside policy limits."""


class IncompleteIntervalError(ValidationError):
    """Only one boundary of the lunch interval was given."""


class InconsistentStateError(ValidationError):
    """A paid-absence day carries clock times."""


class EntryWindowError(ValidationError):
    """The entry date lies outside the window the policy accepts entries for."""


class MalformedTimesheetError(ValidationError):
    """Wrong number of days in a week or weeks in a pay period."""


class ComputationError(DomainError):
    """Raised when derived hours break a policy limit."""


class NegativeHoursError(ComputationError):
    pass


class ExceedsMaxDailyHoursError(ComputationError):
    pass


class ExceedsMaxWeeklyHoursError(ComputationError):
    pass


class UnrecognizedHolidayError(ComputationError):
    pass


class MisalignedPeriodError(ComputationError):
    """Pay period does not tile the calendar from the configured anchor date."""


class TimesheetBatchError(DomainError):
    """Every issue collected while computing one pay period."""

    def __init__(self, issues: Sequence, message: Optional[str] = None):
        self.issues = tuple(issues)
        super().__init__(message or f"Timesheet has {len(self.issues)} error(s)")

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["issues"] = [issue.to_dict() for issue in self.issues]
        return data
