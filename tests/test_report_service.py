from __future__ import annotations

from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from src.timesheet_system.timesheet_system.core.enums import HolidayRateType, TimesheetStatus, Weekday
from src.timesheet_system.timesheet_system.core.exceptions import ValidationError
from src.timesheet_system.timesheet_system.payroll.rates import HolidayPayPolicy
from src.timesheet_system.timesheet_system.payroll.service import TimesheetReportService


def _service(entries_repo, users_repo, **kwargs) -> TimesheetReportService:
    kwargs.setdefault("tz", timezone.utc)
    return TimesheetReportService(entries_repo, users_repo, **kwargs)


def test_weekly_report_totals(entries_repo, users_repo):
    report = _service(entries_repo, users_repo).build_weekly_report(user_id="u1", week_of=date(2024, 3, 6))

    s = report.summary
    assert (s.period_start, s.period_end) == (date(2024, 3, 4), date(2024, 3, 10))
    assert s.total_hours == Decimal("16.00")
    assert s.regular_hours == Decimal("16.00")
    assert s.total_pay == Decimal("480.00")
    assert s.worked_days == 2
    assert report.full_name == "Ada Nurse"
    assert report.skipped_entry_ids == ()


def test_report_queries_the_local_week_range(entries_repo, users_repo):
    _service(entries_repo, users_repo).build_weekly_report(user_id="u1", week_of=date(2024, 3, 10))

    assert entries_repo.last_args == {
        "user_id": "u1",
        "start": datetime(2024, 3, 4, tzinfo=timezone.utc),
        "end": datetime(2024, 3, 11, tzinfo=timezone.utc),
    }


def test_report_rows_link_overnight_halves(entries_repo, users_repo):
    rows = _service(entries_repo, users_repo).build_weekly_report(user_id="u1", week_of=date(2024, 3, 4)).rows

    assert [(r.work_date, r.hours, r.running_total) for r in rows] == [
        (date(2024, 3, 4), Decimal("8.00"), Decimal("8.00")),
        (date(2024, 3, 5), Decimal("2.00"), Decimal("10.00")),
        (date(2024, 3, 6), Decimal("6.00"), Decimal("16.00")),
    ]

    day, start, carry = rows
    assert (day.start_display, day.end_display) == ("9:00 AM", "5:00 PM")
    assert (start.start_display, start.end_display) == ("10:00 PM", "12:00 AM")
    assert (carry.start_display, carry.end_display) == ("12:00 AM", "6:00 AM")
    assert start.is_overnight_start and not start.is_overnight_continuation
    assert carry.is_overnight_continuation and not carry.is_overnight_start
    assert start.is_night_shift and carry.is_night_shift
    assert not day.is_night_shift
    assert carry.daily_pay == Decimal("180.00")


def test_invalid_and_open_entries_do_not_break_the_week(scenario_records, make_entries_repo, users_repo):
    records = scenario_records + [
        {"id": "bad", "userId": "u1", "clockIn": "not a time"},
        {"id": "open", "userId": "u1", "clockIn": "2024-03-07T09:00:00Z", "clockOut": None},
        {"id": "long", "userId": "u1", "clockIn": "2024-03-08T09:00:00Z", "clockOut": "2024-03-09T12:00:00Z"},
    ]

    report = _service(make_entries_repo(records), users_repo).build_weekly_report(
        user_id="u1", week_of=date(2024, 3, 4)
    )

    assert report.summary.total_hours == Decimal("16.00")
    assert report.summary.worked_days == 2
    assert sorted(report.skipped_entry_ids) == ["bad", "long"]


def test_rate_comes_from_job_then_user_default(make_entries_repo, users_repo):
    records = [
        {"id": "a", "userId": "u1", "clockIn": "2024-03-04T09:00:00Z", "clockOut": "2024-03-04T13:00:00Z",
         "location": "Vitas Citrus"},
        {"id": "b", "userId": "u1", "clockIn": "2024-03-05T09:00:00Z", "clockOut": "2024-03-05T13:00:00Z",
         "location": "Haven"},
    ]

    report = _service(make_entries_repo(records), users_repo).build_weekly_report(
        user_id="u1", week_of=date(2024, 3, 4)
    )

    assert [r.hourly_rate for r in report.rows] == [Decimal("32.00"), Decimal("25.00")]
    assert report.summary.total_pay == Decimal("228.00")


def test_holidays_and_week_start_come_from_settings(entries_repo, users_repo):
    svc = _service(entries_repo, users_repo, week_start=Weekday.SUNDAY, holidays=[date(2024, 3, 4)])

    report = svc.build_weekly_report(user_id="u1", week_of=date(2024, 3, 4))

    assert report.window.start == date(2024, 3, 3)
    assert report.summary.holiday_hours == Decimal("8.00")
    assert report.summary.regular_hours == Decimal("8.00")
    assert report.rows[0].is_holiday
    # 8 h at 30.00 * 1.5 on the holiday plus 8 h at 30.00
    assert report.rows[0].daily_pay == Decimal("360.00")
    assert report.summary.total_pay == Decimal("600.00")


def test_overnight_shift_starting_on_a_holiday_is_paid_as_holiday_in_full(entries_repo, users_repo):
    report = _service(entries_repo, users_repo, holidays=[date(2024, 3, 5)]).build_weekly_report(
        user_id="u1", week_of=date(2024, 3, 4)
    )

    assert report.summary.holiday_hours == Decimal("8.00")
    assert report.summary.regular_hours == Decimal("8.00")
    assert report.summary.total_pay == Decimal("600.00")
    assert [r.is_holiday for r in report.rows] == [False, True, True]
    assert [r.daily_pay for r in report.rows] == [Decimal("240.00"), Decimal("90.00"), Decimal("270.00")]


def test_custom_holiday_rate_is_applied_to_rows_and_totals(entries_repo, users_repo):
    policy = HolidayPayPolicy(rate_type=HolidayRateType.CUSTOM, custom_rate=Decimal("2"))
    svc = _service(entries_repo, users_repo, holidays=[date(2024, 3, 5)], holiday_policy=policy)

    report = svc.build_weekly_report(user_id="u1", week_of=date(2024, 3, 4))

    assert [r.daily_pay for r in report.rows] == [Decimal("240.00"), Decimal("120.00"), Decimal("360.00")]
    assert report.summary.total_pay == Decimal("720.00")


def test_row_pay_adds_up_to_total_pay_with_half_cents(make_entries_repo, users_repo):
    records = [
        {"id": "a", "userId": "u1", "clockIn": "2024-03-04T09:00:00Z", "clockOut": "2024-03-04T09:15:00Z",
         "hourlyRate": "10.10"},
        {"id": "b", "userId": "u1", "clockIn": "2024-03-05T09:00:00Z", "clockOut": "2024-03-05T09:15:00Z",
         "hourlyRate": "10.10"},
    ]

    report = _service(make_entries_repo(records), users_repo).build_weekly_report(
        user_id="u1", week_of=date(2024, 3, 4)
    )

    assert [r.daily_pay for r in report.rows] == [Decimal("2.53"), Decimal("2.53")]
    assert sum(r.daily_pay for r in report.rows) == report.summary.total_pay == Decimal("5.06")


def test_unknown_user_is_rejected(entries_repo, users_repo):
    with pytest.raises(ValidationError):
        _service(entries_repo, users_repo).build_weekly_report(user_id="nobody", week_of=date(2024, 3, 4))


def test_timesheet_draft_payload(entries_repo, users_repo):
    draft = _service(entries_repo, users_repo).build_timesheet_draft(user_id="u1", week_of=date(2024, 3, 8))

    assert draft.status == TimesheetStatus.PENDING
    assert draft.to_payload() == {
        "userId": "u1",
        "periodStart": "2024-03-04",
        "periodEnd": "2024-03-10",
        "totalHours": "16.00",
        "regularHours": "16.00",
        "overtimeHours": "0.00",
        "status": "pending",
    }
