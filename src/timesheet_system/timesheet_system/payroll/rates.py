from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Mapping, Optional

from ..core.constants import (
    DEFAULT_HOLIDAY_ADDITIONAL_RATE,
    DEFAULT_HOLIDAY_CUSTOM_RATE,
    DEFAULT_HOLIDAY_RATE_TYPE,
    DEFAULT_HOURLY_RATE,
)
from ..core.enums import HolidayRateType
from ..time_entries.model import TimeEntry
from ..users.model import PayProfile
from .model import line_pay


@dataclass(frozen=True)
class RateTable:
    """Hourly rate resolution chain for one user.

    entry rate -> job rate (keyed by location) -> user default -> fallback.
    """

    default_hourly_rate: Optional[Decimal] = None
    job_rates: Mapping[str, Decimal] = field(default_factory=dict)
    fallback: Decimal = DEFAULT_HOURLY_RATE

    @classmethod
    def for_profile(cls, profile: Optional[PayProfile], *, fallback: Decimal = DEFAULT_HOURLY_RATE) -> "RateTable":
        if profile is None:
            return cls(fallback=fallback)
        return cls(
            default_hourly_rate=profile.default_hourly_rate,
            job_rates=dict(profile.job_rates),
            fallback=fallback,
        )

    def resolve(self, entry: TimeEntry) -> Decimal:
        if entry.hourly_rate is not None:
            return entry.hourly_rate
        if entry.location:
            job_rate = self.job_rates.get(entry.location)
            if job_rate is not None:
                return job_rate
        if self.default_hourly_rate is not None:
            return self.default_hourly_rate
        return self.fallback


@dataclass(frozen=True)
class HolidayPayPolicy:
    """Premium applied to hours of shifts that start on a holiday.

    ``additional`` pays rate * (1 + additional_rate); ``custom`` pays
    rate * custom_rate.
    """

    rate_type: HolidayRateType = HolidayRateType(DEFAULT_HOLIDAY_RATE_TYPE)
    additional_rate: Decimal = DEFAULT_HOLIDAY_ADDITIONAL_RATE
    custom_rate: Decimal = DEFAULT_HOLIDAY_CUSTOM_RATE

    @property
    def multiplier(self) -> Decimal:
        if self.rate_type is HolidayRateType.ADDITIONAL:
            return Decimal(1) + self.additional_rate
        return self.custom_rate

    def rate_for(self, rate: Decimal, *, on_holiday: bool) -> Decimal:
        return rate * self.multiplier if on_holiday else rate

    def pay(self, hours: Decimal, rate: Decimal, *, on_holiday: bool) -> Decimal:
        return line_pay(hours, self.rate_for(rate, on_holiday=on_holiday))
