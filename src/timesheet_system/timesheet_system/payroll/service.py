from __future__ import annotations

import logging
from datetime import date, timezone, tzinfo
from decimal import Decimal
from typing import Any, Iterable, Mapping, Optional

from ..common.datetime_utils import day_range_bounds, format_clock
from ..core.constants import DEFAULT_HOURLY_RATE
from ..core.enums import Weekday
from ..core.exceptions import InvalidEntry, ValidationError
from ..time_entries.mapper import entry_from_record
from ..time_entries.model import TimeEntry
from ..time_entries.repository import TimeEntryRepository
from ..users.repository import UserRepository
from .aggregator import WeeklyAggregator
from .calculator.base import ShiftCalculator
from .calculator.midnight_split_calculator import MidnightSplitCalculator
from .model import (
    ZERO,
    DailyRow,
    ReportWindow,
    ShiftDayAllocation,
    TimesheetDraft,
    WeeklyReport,
)
from .night_shift import is_night_shift
from .rates import HolidayPayPolicy, RateTable

logger = logging.getLogger(__name__)

MIDNIGHT_LABEL = "12:00 AM"


class TimesheetReportService:
    def __init__(
        self,
        entries: TimeEntryRepository,
        users: UserRepository,
        *,
        tz: tzinfo = timezone.utc,
        week_start: Weekday = Weekday.MONDAY,
        holidays: Iterable[date] = (),
        fallback_rate: Decimal = DEFAULT_HOURLY_RATE,
        calculator: Optional[ShiftCalculator] = None,
        aggregator: Optional[WeeklyAggregator] = None,
        holiday_policy: Optional[HolidayPayPolicy] = None,
    ):
        self._entries = entries
        self._users = users
        self._tz = tz
        self._week_start = Weekday.parse(week_start)
        self._holidays = frozenset(holidays)
        self._fallback_rate = fallback_rate
        self._calculator = calculator or MidnightSplitCalculator(tz)
        self._aggregator = aggregator or WeeklyAggregator()
        self._holiday_policy = holiday_policy or HolidayPayPolicy()

    def window_for(self, week_of: date) -> ReportWindow:
        return ReportWindow.week_containing(week_of, self._week_start)

    def load_entries(self, records: Iterable[Mapping[str, Any]]) -> tuple[list[TimeEntry], list[str]]:
        """Map raw records to entries, skipping the invalid ones."""
        entries: list[TimeEntry] = []
        skipped: list[str] = []
        for record in records:
            try:
                entries.append(entry_from_record(record))
            except InvalidEntry as e:
                logger.warning("Skipping time entry: %s", e)
                skipped.append(str(e.entry_id) if e.entry_id is not None else "?")
        return entries, skipped

    def allocate(
        self,
        entries: Iterable[TimeEntry],
        rates: RateTable,
        *,
        skipped: Optional[list[str]] = None,
    ) -> list[ShiftDayAllocation]:
        allocations: list[ShiftDayAllocation] = []
        for entry in entries:
            try:
                allocations.extend(self._calculator.split_shift(entry, rates))
            except InvalidEntry as e:
                logger.warning("Skipping time entry: %s", e)
                if skipped is not None:
                    skipped.append(entry.entry_id)
        return allocations

    def build_weekly_report(self, *, user_id: str, week_of: date) -> WeeklyReport:
        profile = self._users.get_pay_profile(user_id)
        if not profile:
            raise ValidationError(f"Unknown user {user_id!r}")

        window = self.window_for(week_of)
        start, end = day_range_bounds(window.start, window.end, self._tz)
        records = self._entries.list_records_for_user(user_id, start=start, end=end)

        entries, skipped = self.load_entries(records)
        rates = RateTable.for_profile(profile, fallback=self._fallback_rate)
        allocations = self.allocate(entries, rates, skipped=skipped)

        summary = self._aggregator.summarize(
            allocations, window, self._holidays, rates, holiday_policy=self._holiday_policy
        )
        rows = self._build_rows(entries, allocations, window)

        logger.debug(
            "Weekly report user=%s window=%s..%s entries=%d skipped=%d",
            user_id, window.start, window.end, len(entries), len(skipped),
        )
        return WeeklyReport(
            user_id=profile.user_id,
            full_name=profile.full_name,
            window=window,
            summary=summary,
            rows=rows,
            skipped_entry_ids=tuple(skipped),
        )

    def build_timesheet_draft(self, *, user_id: str, week_of: date) -> TimesheetDraft:
        summary = self.build_weekly_report(user_id=user_id, week_of=week_of).summary
        return TimesheetDraft(
            user_id=user_id,
            period_start=summary.period_start,
            period_end=summary.period_end,
            total_hours=summary.total_hours,
            regular_hours=summary.regular_hours,
        )

    def _build_rows(
        self,
        entries: list[TimeEntry],
        allocations: list[ShiftDayAllocation],
        window: ReportWindow,
    ) -> list[DailyRow]:
        by_id = {e.entry_id: e for e in entries}
        split_ids = {a.source_entry_id for a in allocations if a.is_carry_only}

        included = [a for a in allocations if window.contains(a.start_date)]
        included.sort(key=lambda a: (a.work_date, a.is_start_day, by_id[a.source_entry_id].clock_in))

        rows: list[DailyRow] = []
        running = ZERO
        for a in included:
            entry = by_id[a.source_entry_id]
            overnight = a.source_entry_id in split_ids
            running += a.hours
            rate = a.hourly_rate if a.hourly_rate is not None else self._fallback_rate
            on_holiday = a.start_date in self._holidays

            if a.is_carry_only:
                start_display, end_display = MIDNIGHT_LABEL, format_clock(entry.clock_out, self._tz)
            elif overnight:
                start_display, end_display = format_clock(entry.clock_in, self._tz), MIDNIGHT_LABEL
            else:
                start_display = format_clock(entry.clock_in, self._tz)
                end_display = format_clock(entry.clock_out, self._tz)

            rows.append(
                DailyRow(
                    work_date=a.work_date,
                    entry_id=entry.entry_id,
                    location=entry.location,
                    start_display=start_display,
                    end_display=end_display,
                    hours=a.hours,
                    hourly_rate=rate,
                    daily_pay=self._holiday_policy.pay(a.hours, rate, on_holiday=on_holiday),
                    running_total=running,
                    is_holiday=on_holiday,
                    is_overnight_start=overnight and a.is_start_day,
                    is_overnight_continuation=a.is_carry_only,
                    is_night_shift=is_night_shift(entry.clock_in, entry.clock_out, self._tz),
                    locked=entry.locked,
                )
            )
        return rows
