from __future__ import annotations

from abc import ABC, abstractmethod

from ...time_entries.model import TimeEntry
from ..model import ShiftDayAllocation
from ..rates import RateTable


class ShiftCalculator(ABC):
    """Calculator interface (Strategy Pattern for shift hours)."""

    @abstractmethod
    def split_shift(self, entry: TimeEntry, rates: RateTable) -> list[ShiftDayAllocation]:
        raise NotImplementedError
