from __future__ import annotations

from decimal import Decimal, InvalidOperation

from ..core.exceptions import ConfigurationError
from .datetime_utils import to_decimal


def require_hours(value, field_name: str) -> Decimal:
    try:
        hours = to_decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise ConfigurationError(f"{field_name} is not a number", details={field_name: value})
    if not hours.is_finite() or hours < 0:
        raise ConfigurationError(f"{field_name} must be a non-negative number", details={field_name: value})
    return hours


def require_int(value, field_name: str, *, minimum: int = 0) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} is not an integer", details={field_name: value})
    try:
        exact = to_decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise ConfigurationError(f"{field_name} is not an integer", details={field_name: value})
    # no silent truncation: 29.9 is rejected, "30" and 30.0 are accepted
    if not exact.is_finite() or exact != exact.to_integral_value():
        raise ConfigurationError(f"{field_name} is not an integer", details={field_name: value})
    number = int(exact)
    if number < minimum:
        raise ConfigurationError(f"{field_name} must be at least {minimum}", details={field_name: value})
    return number
