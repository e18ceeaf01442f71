"""Example: use the payroll layer directly (no Flask, no database).

Goal: show that controllers are thin; the hours arithmetic lives in services.
"""

from datetime import date
from decimal import Decimal

from src.timesheet_system.timesheet_system.common.datetime_utils import get_zone
from src.timesheet_system.timesheet_system.payroll.aggregator import WeeklyAggregator
from src.timesheet_system.timesheet_system.payroll.calculator.midnight_split_calculator import MidnightSplitCalculator
from src.timesheet_system.timesheet_system.payroll.model import ReportWindow
from src.timesheet_system.timesheet_system.payroll.rates import RateTable
from src.timesheet_system.timesheet_system.time_entries.mapper import entry_from_record


def main():
    tz = get_zone("America/New_York")
    records = [
        {"id": "day", "userId": "u1", "clockIn": "2024-03-04T09:00:00-05:00", "clockOut": "2024-03-04T17:00:00-05:00"},
        {"id": "night", "userId": "u1", "clockIn": "2024-03-05T22:00:00-05:00", "clockOut": "2024-03-06T06:00:00-05:00",
         "location": "Vitas Central Florida"},
    ]
    rates = RateTable(default_hourly_rate=Decimal("25.00"), job_rates={"Vitas Central Florida": Decimal("30.00")})

    calculator = MidnightSplitCalculator(tz)
    allocations = []
    for record in records:
        allocations.extend(calculator.split_shift(entry_from_record(record), rates))

    for a in allocations:
        print(a.date_iso, a.hours, "carry" if a.is_carry_only else "start", a.hourly_rate, a.pay)

    window = ReportWindow.week_containing(date(2024, 3, 4))
    print(WeeklyAggregator().summarize(allocations, window, rates=rates))

    # The night shift starts on a holiday: all 8 h are holiday hours at 1.5x
    print(WeeklyAggregator().summarize(allocations, window, holidays={date(2024, 3, 5)}, rates=rates))


if __name__ == "__main__":
    main()
