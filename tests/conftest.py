from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

import pytest

from src.timesheet_system.timesheet_system.users.model import PayProfile


class InMemoryTimeEntries:
    def __init__(self, records=None, *, error: Optional[Exception] = None):
        self._records = list(records or [])
        self._error = error
        self.last_args = None

    def list_records_for_user(self, user_id: str, *, start: datetime, end: datetime):
        self.last_args = {"user_id": user_id, "start": start, "end": end}
        if self._error is not None:
            raise self._error
        return [r for r in self._records if r.get("userId") == user_id]


class InMemoryUsers:
    def __init__(self, profiles: dict[str, PayProfile]):
        self._profiles = profiles

    def get_pay_profile(self, user_id: str) -> Optional[PayProfile]:
        return self._profiles.get(user_id)


@pytest.fixture
def scenario_records():
    """One day shift on Monday and one overnight shift Tuesday -> Wednesday."""
    return [
        {
            "id": "e1",
            "userId": "u1",
            "clockIn": "2024-03-04T09:00:00Z",
            "clockOut": "2024-03-04T17:00:00Z",
            "hourlyRate": "30",
        },
        {
            "id": "e2",
            "userId": "u1",
            "clockIn": "2024-03-05T22:00:00Z",
            "clockOut": "2024-03-06T06:00:00Z",
            "hourlyRate": "30",
        },
    ]


@pytest.fixture
def profiles():
    return {
        "u1": PayProfile(
            user_id="u1",
            full_name="Ada Nurse",
            default_hourly_rate=Decimal("25.00"),
            job_rates={"Vitas Citrus": Decimal("32.00")},
        )
    }


@pytest.fixture
def entries_repo(scenario_records):
    return InMemoryTimeEntries(scenario_records)


@pytest.fixture
def users_repo(profiles):
    return InMemoryUsers(profiles)


@pytest.fixture
def make_entries_repo():
    return InMemoryTimeEntries
