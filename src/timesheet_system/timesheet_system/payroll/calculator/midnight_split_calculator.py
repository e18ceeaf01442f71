from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone, tzinfo
from decimal import ROUND_HALF_UP, Decimal

from ...common.datetime_utils import is_aware, local_date, next_midnight
from ...core.constants import HOURS_QUANTUM, MAX_SHIFT_HOURS, SECONDS_PER_HOUR
from ...core.exceptions import InvalidEntry
from ...time_entries.model import TimeEntry
from ..model import ShiftDayAllocation
from ..rates import RateTable
from .base import ShiftCalculator

logger = logging.getLogger(__name__)


def to_hours(delta: timedelta) -> Decimal:
    seconds = Decimal(delta // timedelta(milliseconds=1)) / Decimal(1000)
    return (seconds / SECONDS_PER_HOUR).quantize(HOURS_QUANTUM, rounding=ROUND_HALF_UP)


class MidnightSplitCalculator(ShiftCalculator):
    """Standard rule: split a shift at the first local midnight after clock-in.

    A clock-out at or before clock-in is read as "next day" (records stored as
    11:00 PM -> 7:00 AM without a date rollover).
    """

    def __init__(self, tz: tzinfo = timezone.utc):
        self._tz = tz

    def split_shift(self, entry: TimeEntry, rates: RateTable) -> list[ShiftDayAllocation]:
        if not isinstance(entry.clock_in, datetime) or not is_aware(entry.clock_in):
            raise InvalidEntry("clockIn must be a timezone-aware instant", entry_id=entry.entry_id)
        if entry.clock_out is None:
            return []
        if not is_aware(entry.clock_out):
            raise InvalidEntry("clockOut must be a timezone-aware instant", entry_id=entry.entry_id)

        start = entry.clock_in.astimezone(timezone.utc)
        end = entry.clock_out.astimezone(timezone.utc)
        if end <= start:
            end += timedelta(days=1)
        if end <= start:
            logger.debug("Entry %s has no duration after rollover; ignoring", entry.entry_id)
            return []
        if end - start > timedelta(hours=MAX_SHIFT_HOURS):
            raise InvalidEntry(
                f"shift spans more than {MAX_SHIFT_HOURS} hours", entry_id=entry.entry_id
            )

        midnight = next_midnight(start, self._tz)
        # A short DST day can put a second local midnight inside a 24 h span.
        if end > next_midnight(midnight, self._tz):
            raise InvalidEntry("shift crosses more than one local midnight", entry_id=entry.entry_id)

        start_day_hours = to_hours(min(end, midnight) - start)
        carry_hours = to_hours(max(timedelta(0), end - midnight))

        rate = rates.resolve(entry)
        start_date = local_date(start, self._tz)

        allocations = [
            ShiftDayAllocation(
                date_iso=start_date.isoformat(),
                hours=start_day_hours,
                is_start_day=True,
                is_carry_only=False,
                hourly_rate=rate,
                source_entry_id=entry.entry_id,
            )
        ]
        if carry_hours > 0:
            allocations.append(
                ShiftDayAllocation(
                    date_iso=(start_date + timedelta(days=1)).isoformat(),
                    hours=carry_hours,
                    is_start_day=False,
                    is_carry_only=True,
                    hourly_rate=rate,
                    source_entry_id=entry.entry_id,
                )
            )
        return allocations
