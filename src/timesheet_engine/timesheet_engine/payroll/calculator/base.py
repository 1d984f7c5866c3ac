from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from ...entries.model import TimeEntry
from ...policy.model import Holiday, Policy


@dataclass(frozen=True)
class HoursDecision:
    minutes: Decimal
    holiday: Optional[Holiday] = None


class DailyHoursStrategy(ABC):
    """Calculator interface (Strategy Pattern per day type)."""

    @abstractmethod
    def credited_minutes(self, entry: TimeEntry, policy: Policy) -> HoursDecision:
        raise NotImplementedError
