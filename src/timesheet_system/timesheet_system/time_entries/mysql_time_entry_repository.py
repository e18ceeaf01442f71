from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Mapping, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_datetime
from .repository import TimeEntryRepository


class MySQLTimeEntryRepository(TimeEntryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_records_for_user(
        self,
        user_id: str,
        *,
        start: datetime,
        end: datetime,
    ) -> Sequence[Mapping[str, Any]]:
        # DATETIME columns hold naive UTC
        start_utc = start.astimezone(timezone.utc).replace(tzinfo=None)
        end_utc = end.astimezone(timezone.utc).replace(tzinfo=None)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, user_id, clock_in, clock_out, location, job_name,
                       hourly_rate, locked, break_minutes, status
                FROM time_entries
                WHERE user_id=%s AND clock_in >= %s AND clock_in < %s
                ORDER BY clock_in ASC
                """,
                (user_id, start_utc, end_utc),
            )
            rows = fetchall(cur)

            return [
                {
                    "id": r["id"],
                    "userId": r["user_id"],
                    "clockIn": normalize_mysql_datetime(r["clock_in"]),
                    "clockOut": normalize_mysql_datetime(r.get("clock_out")),
                    "location": r.get("location"),
                    "jobName": r.get("job_name"),
                    "hourlyRate": r.get("hourly_rate"),
                    "locked": bool(r.get("locked") or 0),
                    "breakMinutes": int(r.get("break_minutes") or 0),
                    "status": r.get("status"),
                }
                for r in rows
            ]
