from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Mapping, Optional


@dataclass(frozen=True)
class PayProfile:
    """Domain entity: the pay-related slice of a user profile.

    ``job_rates`` maps a job/location label to the hourly rate paid there.
    """

    user_id: str
    full_name: str
    default_hourly_rate: Optional[Decimal] = None
    job_rates: Mapping[str, Decimal] = field(default_factory=dict)
