from __future__ import annotations

from typing import Any, Mapping

from ..common.validators import optional_instant, parse_bool, parse_rate, require_instant
from ..core.enums import EntryStatus
from ..core.exceptions import InvalidEntry
from .model import TimeEntry


def _first(record: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = record.get(key)
        if value is not None and value != "":
            return value
    return None


def entry_from_record(record: Mapping[str, Any]) -> TimeEntry:
    """Validate a raw time-entry record and build a TimeEntry.

    Accepts both the API's camelCase keys (``clockIn``, ``hourlyRate``) and
    snake_case column names. Raises InvalidEntry for a missing id or a
    missing/naive/unparseable ``clockIn``.
    """

    entry_id = _first(record, "id", "entry_id")
    if entry_id is None:
        raise InvalidEntry("id is required")

    clock_in = require_instant(_first(record, "clockIn", "clock_in"), "clockIn", entry_id=entry_id)
    clock_out = optional_instant(_first(record, "clockOut", "clock_out"), "clockOut", entry_id=entry_id)

    location = _first(record, "location", "jobName", "job_name")
    status_s = _first(record, "status")
    try:
        status = EntryStatus(status_s) if status_s else (
            EntryStatus.ACTIVE if clock_out is None else EntryStatus.COMPLETED
        )
    except ValueError:
        raise InvalidEntry(f"unknown status {status_s!r}", entry_id=entry_id)

    try:
        break_minutes = int(_first(record, "breakMinutes", "break_minutes") or 0)
    except (TypeError, ValueError):
        raise InvalidEntry("breakMinutes must be a whole number", entry_id=entry_id)

    return TimeEntry(
        entry_id=str(entry_id),
        user_id=str(_first(record, "userId", "user_id") or ""),
        clock_in=clock_in,
        clock_out=clock_out,
        location=str(location).strip() if location is not None else None,
        hourly_rate=parse_rate(_first(record, "hourlyRate", "hourly_rate")),
        locked=parse_bool(record.get("locked"), "locked", entry_id=entry_id),
        break_minutes=break_minutes,
        status=status,
    )
