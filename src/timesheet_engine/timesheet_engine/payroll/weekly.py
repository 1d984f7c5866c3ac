from __future__ import annotations

from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Sequence

from ..core.constants import HOURS_QUANTUM, WORKDAYS_PER_WEEK, ZERO_HOURS
from ..core.exceptions import ExceedsMaxWeeklyHoursError, MalformedTimesheetError
from ..entries.model import TimeEntry
from ..policy.model import Policy
from .model import WeekData


def split_bands(raw_total: Decimal, regular_cap: Decimal, overtime_cap: Decimal) -> tuple[Decimal, Decimal, Decimal]:
    """Split a weekly total into (regular, overtime, double time).

    Bands are quantized to hundredths; any rounding difference goes to the
    largest band so the three always sum to `raw_total`.
    """
    regular = min(raw_total, regular_cap)
    overtime = min(raw_total - regular, overtime_cap - regular_cap)
    double = raw_total - regular - overtime

    bands = [b.quantize(HOURS_QUANTUM, rounding=ROUND_HALF_UP) for b in (regular, overtime, double)]
    drift = raw_total - sum(bands, ZERO_HOURS)
    if drift:
        largest = max(range(3), key=lambda i: bands[i])
        bands[largest] += drift
    return bands[0], bands[1], bands[2]


class WeeklyAggregator:
    """Sums five computed days and classifies the weekly total into bands.

    Entries must already carry `total_hours` and arrive Monday..Friday; the
    aggregator never reorders or dates them.
    """

    def aggregate(self, entries: Sequence[TimeEntry], policy: Policy, *, week_start: Optional[date] = None) -> WeekData:
        entries = tuple(entries)
        if len(entries) != WORKDAYS_PER_WEEK:
            raise MalformedTimesheetError(
                f"A week needs exactly {WORKDAYS_PER_WEEK} entries (got {len(entries)})",
                work_date=week_start,
                details={"entries": len(entries)},
            )
        uncomputed = [i for i, e in enumerate(entries) if e.total_hours is None]
        if uncomputed:
            raise MalformedTimesheetError(
                "Weekly totals need computed daily hours",
                work_date=week_start,
                details={"uncomputed_days": ",".join(str(i) for i in uncomputed)},
            )

        raw_total = ZERO_HOURS
        for e in entries:
            raw_total += e.total_hours

        if raw_total > policy.max_weekly_hours:
            raise ExceedsMaxWeeklyHoursError(
                f"Total hours ({raw_total}) cannot exceed {policy.max_weekly_hours} hours per week",
                work_date=week_start,
                details={"hours": raw_total, "max_weekly_hours": policy.max_weekly_hours},
            )

        regular, overtime, double = split_bands(raw_total, policy.weekly_regular_cap, policy.weekly_overtime_cap)
        return WeekData(
            entries=entries,
            regular_hours=regular,
            overtime_hours=overtime,
            double_time_hours=double,
            week_start=week_start,
        )
