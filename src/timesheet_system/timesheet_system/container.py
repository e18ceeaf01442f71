from __future__ import annotations

from dataclasses import dataclass
from datetime import date, tzinfo
from decimal import Decimal
from typing import Iterable, Optional

from .core.constants import DEFAULT_HOURLY_RATE
from .core.enums import Weekday
from .database.connection import DBConfig, DatabaseConnection
from .payroll.rates import HolidayPayPolicy
from .payroll.service import TimesheetReportService
from .time_entries.mysql_time_entry_repository import MySQLTimeEntryRepository
from .time_entries.repository import TimeEntryRepository
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository


@dataclass(frozen=True)
class Container:
    tz: tzinfo

    time_entries_repo: TimeEntryRepository
    users_repo: UserRepository

    timesheet_report_service: TimesheetReportService

    conn: Optional[DatabaseConnection] = None


def build_services(
    *,
    time_entries_repo: TimeEntryRepository,
    users_repo: UserRepository,
    tz: tzinfo,
    week_start: Weekday = Weekday.MONDAY,
    holidays: Iterable[date] = (),
    fallback_rate: Decimal = DEFAULT_HOURLY_RATE,
    holiday_policy: Optional[HolidayPayPolicy] = None,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    timesheet_report_service = TimesheetReportService(
        time_entries_repo,
        users_repo,
        tz=tz,
        week_start=week_start,
        holidays=holidays,
        fallback_rate=fallback_rate,
        holiday_policy=holiday_policy,
    )
    return Container(
        tz=tz,
        time_entries_repo=time_entries_repo,
        users_repo=users_repo,
        timesheet_report_service=timesheet_report_service,
        conn=conn,
    )


def build_container(
    *,
    db_config: dict,
    tz: tzinfo,
    week_start: Weekday = Weekday.MONDAY,
    holidays: Iterable[date] = (),
    fallback_rate: Decimal = DEFAULT_HOURLY_RATE,
    holiday_policy: Optional[HolidayPayPolicy] = None,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    return build_services(
        time_entries_repo=MySQLTimeEntryRepository(conn),
        users_repo=MySQLUserRepository(conn),
        tz=tz,
        week_start=week_start,
        holidays=holidays,
        fallback_rate=fallback_rate,
        holiday_policy=holiday_policy,
        conn=conn,
    )
