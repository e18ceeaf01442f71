from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

from ..core.constants import HOURS_QUANTUM, MONEY_QUANTUM
from .model import ZERO, ReportWindow, ShiftDayAllocation, WeeklySummary
from .rates import HolidayPayPolicy, RateTable


class WeeklyAggregator:
    """Reduce shift-day allocations into a WeeklySummary.

    Attribution follows the shift's start day: every allocation of a shift
    that started inside the window counts, including a carry past the window
    end; a carry into the window from a shift that started before it does not.
    Holiday status follows the start day as well, so a shift that starts on a
    holiday is holiday time in full.

    Pay is summed from per-allocation amounts already rounded to cents, so
    the total always equals the sum of the table rows.
    """

    def summarize(
        self,
        allocations: Iterable[ShiftDayAllocation],
        window: ReportWindow,
        holidays: Iterable[date] = (),
        rates: Optional[RateTable] = None,
        holiday_policy: Optional[HolidayPayPolicy] = None,
    ) -> WeeklySummary:
        holiday_set = frozenset(holidays)
        fallback = rates.fallback if rates is not None else ZERO
        policy = holiday_policy or HolidayPayPolicy()

        total_hours = ZERO
        holiday_hours = ZERO
        total_pay = ZERO
        start_days: set[date] = set()

        for a in allocations:
            if not window.contains(a.start_date):
                continue

            on_holiday = a.start_date in holiday_set
            total_hours += a.hours
            if on_holiday:
                holiday_hours += a.hours

            rate = a.hourly_rate if a.hourly_rate is not None else fallback
            total_pay += policy.pay(a.hours, rate, on_holiday=on_holiday)

            if a.is_start_day:
                start_days.add(a.work_date)

        return WeeklySummary(
            period_start=window.start,
            period_end=window.end,
            regular_hours=(total_hours - holiday_hours).quantize(HOURS_QUANTUM),
            holiday_hours=holiday_hours.quantize(HOURS_QUANTUM),
            total_hours=total_hours.quantize(HOURS_QUANTUM),
            total_pay=total_pay.quantize(MONEY_QUANTUM),
            worked_days=len(start_days),
        )
