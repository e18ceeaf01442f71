from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Sequence

from ..core.constants import MONEY_QUANTUM
from ..core.enums import TimesheetStatus, Weekday

ZERO = Decimal("0.00")


def line_pay(hours: Decimal, rate: Decimal) -> Decimal:
    """Pay for one allocation, rounded half-up to cents."""
    return (hours * rate).quantize(MONEY_QUANTUM, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class ShiftDayAllocation:
    """Hours of one time entry attributed to one calendar date."""

    date_iso: str
    hours: Decimal
    is_start_day: bool
    is_carry_only: bool
    hourly_rate: Optional[Decimal]
    source_entry_id: str

    @property
    def work_date(self) -> date:
        return date.fromisoformat(self.date_iso)

    @property
    def start_date(self) -> date:
        """Calendar date the originating shift started on."""
        if self.is_carry_only:
            return self.work_date - timedelta(days=1)
        return self.work_date

    @property
    def pay(self) -> Decimal:
        return line_pay(self.hours, self.hourly_rate or ZERO)


@dataclass(frozen=True)
class ReportWindow:
    """Inclusive reporting period, usually one week."""

    start: date
    end: date

    @classmethod
    def week_containing(cls, day: date, week_start: Weekday = Weekday.MONDAY) -> "ReportWindow":
        offset = (day.weekday() - int(week_start)) % 7
        start = day - timedelta(days=offset)
        return cls(start=start, end=start + timedelta(days=6))

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end

    def previous(self) -> "ReportWindow":
        length = self.end - self.start + timedelta(days=1)
        return ReportWindow(start=self.start - length, end=self.end - length)

    def next(self) -> "ReportWindow":
        length = self.end - self.start + timedelta(days=1)
        return ReportWindow(start=self.start + length, end=self.end + length)


@dataclass(frozen=True)
class WeeklySummary:
    period_start: date
    period_end: date
    regular_hours: Decimal = ZERO
    holiday_hours: Decimal = ZERO
    total_hours: Decimal = ZERO
    total_pay: Decimal = ZERO
    worked_days: int = 0


@dataclass(frozen=True)
class DailyRow:
    """Read-model for one line of the weekly timesheet table."""

    work_date: date
    entry_id: str
    location: Optional[str]
    start_display: str
    end_display: str
    hours: Decimal
    hourly_rate: Decimal
    daily_pay: Decimal
    running_total: Decimal
    is_holiday: bool
    is_overnight_start: bool
    is_overnight_continuation: bool
    is_night_shift: bool
    locked: bool


@dataclass(frozen=True)
class WeeklyReport:
    user_id: str
    full_name: str
    window: ReportWindow
    summary: WeeklySummary
    rows: Sequence[DailyRow]
    skipped_entry_ids: Sequence[str] = ()


@dataclass(frozen=True)
class TimesheetDraft:
    """Pending timesheet created from a weekly summary before approval."""

    user_id: str
    period_start: date
    period_end: date
    total_hours: Decimal
    regular_hours: Decimal
    overtime_hours: Decimal = ZERO
    status: TimesheetStatus = TimesheetStatus.PENDING

    def to_payload(self) -> dict:
        return {
            "userId": self.user_id,
            "periodStart": self.period_start.isoformat(),
            "periodEnd": self.period_end.isoformat(),
            "totalHours": f"{self.total_hours:.2f}",
            "regularHours": f"{self.regular_hours:.2f}",
            "overtimeHours": f"{self.overtime_hours:.2f}",
            "status": self.status.value,
        }
