from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from ..core.enums import EntryStatus


@dataclass(frozen=True)
class TimeEntry:
    """Domain entity: one clock-in/clock-out record.

    Note: Owned by the time tracking store; this package only reads it.
    ``clock_out`` is None while the shift is still running.
    """

    entry_id: str
    user_id: str
    clock_in: datetime
    clock_out: Optional[datetime] = None
    location: Optional[str] = None
    hourly_rate: Optional[Decimal] = None
    locked: bool = False
    break_minutes: int = 0
    status: EntryStatus = EntryStatus.COMPLETED

    @property
    def is_open(self) -> bool:
        return self.clock_out is None
