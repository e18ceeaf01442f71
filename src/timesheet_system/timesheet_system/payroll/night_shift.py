from __future__ import annotations

from datetime import datetime, timedelta, tzinfo
from typing import Optional

from ..core.constants import MORNING_END_HOUR, NIGHT_START_HOUR


def is_night_shift(clock_in: datetime, clock_out: Optional[datetime], tz: tzinfo) -> bool:
    """Night shift: starts from 6 PM, ends before 6 AM, or wraps past midnight.

    Open shifts are never classified.
    """

    if clock_out is None:
        return False

    local_in = clock_in.astimezone(tz)
    local_out = clock_out.astimezone(tz)
    if local_out <= local_in:
        local_out += timedelta(days=1)

    starts_at_night = local_in.hour >= NIGHT_START_HOUR
    ends_in_morning = local_out.hour < MORNING_END_HOUR
    crosses_midnight = local_out.hour < local_in.hour
    return starts_at_night or ends_in_morning or crosses_midnight
