from __future__ import annotations

from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from ..core.exceptions import InvalidEntry
from .datetime_utils import is_aware, parse_instant


def require_instant(value: Any, field_name: str, *, entry_id: Any = None) -> datetime:
    """Accept an aware datetime or an ISO string carrying an offset."""
    if value is None or value == "":
        raise InvalidEntry(f"{field_name} is required", entry_id=entry_id)

    if isinstance(value, str):
        try:
            value = parse_instant(value)
        except ValueError:
            raise InvalidEntry(f"{field_name} is not a valid timestamp: {value!r}", entry_id=entry_id)

    if not isinstance(value, datetime):
        raise InvalidEntry(f"{field_name} has unsupported type {type(value).__name__}", entry_id=entry_id)
    if not is_aware(value):
        raise InvalidEntry(f"{field_name} must carry a UTC offset", entry_id=entry_id)
    return value


def optional_instant(value: Any, field_name: str, *, entry_id: Any = None) -> Optional[datetime]:
    if value is None or value == "":
        return None
    return require_instant(value, field_name, entry_id=entry_id)


def parse_rate(value: Any) -> Optional[Decimal]:
    """Parse an hourly rate; anything missing, unparseable or non-positive is ``None``."""
    if value is None or isinstance(value, bool):
        return None
    try:
        rate = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    if not rate.is_finite() or rate <= 0:
        return None
    return rate


_TRUE_STRINGS = {"true", "t", "yes", "y", "1"}
_FALSE_STRINGS = {"false", "f", "no", "n", "0", ""}


def parse_bool(value: Any, field_name: str, *, entry_id: Any = None) -> bool:
    """Parse a flag from a bool, a 0/1 column value or a string like ``"false"``."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        s = value.strip().lower()
        if s in _TRUE_STRINGS:
            return True
        if s in _FALSE_STRINGS:
            return False
    raise InvalidEntry(f"{field_name} is not a boolean: {value!r}", entry_id=entry_id)
