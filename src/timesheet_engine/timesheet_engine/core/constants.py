"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * 60
DAYS_PER_WEEK = 7
WORKDAYS_PER_WEEK = 5

HOURS_QUANTUM = Decimal("0.01")
ZERO_HOURS = Decimal("0.00")

DEFAULT_STANDARD_DAILY_HOURS = Decimal("8")
DEFAULT_HOLIDAY_PAY_MULTIPLIER = Decimal("1.5")
DEFAULT_PAST_TIME_ENTRY_LIMIT = 14
