from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Protocol, Sequence


class TimeEntryRepository(Protocol):
    """Read access to the external time tracking store.

    Records are returned raw (one mapping per entry) so that validation
    happens in one place: ``time_entries.mapper.entry_from_record``.
    """

    def list_records_for_user(
        self,
        user_id: str,
        *,
        start: datetime,
        end: datetime,
    ) -> Sequence[Mapping[str, Any]]:
        """Entries whose clock-in lies in the half-open UTC range [start, end)."""

        raise NotImplementedError
