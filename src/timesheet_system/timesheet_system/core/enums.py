from __future__ import annotations

from enum import Enum, IntEnum


class Weekday(IntEnum):
    """Weekday numbering compatible with ``date.weekday()``."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def parse(cls, value: "str | int | Weekday") -> "Weekday":
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            return cls(value)
        return cls[str(value).strip().upper()]


class EntryStatus(str, Enum):
    """Lifecycle of a clock-in/clock-out record in the time tracking store."""

    ACTIVE = "active"
    COMPLETED = "completed"
    AUTO_CLOCKED_OUT = "auto-clocked-out"


class TimesheetStatus(str, Enum):
    """Approval workflow of a weekly payroll timesheet."""

    PENDING = "pending"
    SUBMITTED = "submitted"
    APPROVED = "approved"
    REJECTED = "rejected"
    EXPORTED = "exported"


class HolidayRateType(str, Enum):
    """How the holiday premium is expressed."""

    ADDITIONAL = "additional"
    CUSTOM = "custom"

    @classmethod
    def parse(cls, value: "str | HolidayRateType") -> "HolidayRateType":
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())
