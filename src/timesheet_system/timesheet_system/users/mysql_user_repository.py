from __future__ import annotations

from typing import Optional

from ..common.validators import parse_rate
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, load_json_object
from .model import PayProfile
from .repository import UserRepository


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_pay_profile(self, user_id: str) -> Optional[PayProfile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, full_name, default_hourly_rate, job_rates
                FROM users
                WHERE id=%s
                """,
                (user_id,),
            )
            r = fetchone(cur)
            if not r:
                return None

            job_rates = {}
            for location, raw in load_json_object(r.get("job_rates")).items():
                rate = parse_rate(raw)
                if rate is not None:
                    job_rates[str(location)] = rate

            return PayProfile(
                user_id=str(r["id"]),
                full_name=r.get("full_name") or "",
                default_hourly_rate=parse_rate(r.get("default_hourly_rate")),
                job_rates=job_rates,
            )
