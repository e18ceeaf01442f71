from __future__ import annotations

from typing import Any, Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidEntry(ValidationError):
    """Raised when a single time entry cannot be turned into allocations.

    Callers aggregating many entries skip the offending one instead of
    failing the whole report.
    """

    def __init__(self, reason: str, *, entry_id: Optional[Any] = None):
        self.reason = reason
        self.entry_id = entry_id
        prefix = f"Time entry {entry_id!r}: " if entry_id is not None else "Time entry: "
        super().__init__(prefix + reason)
