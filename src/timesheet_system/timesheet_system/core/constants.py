"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

DEFAULT_HOURLY_RATE = Decimal("25.00")
DEFAULT_TIMEZONE = "America/New_York"
DEFAULT_WEEK_START = "monday"

HOURS_QUANTUM = Decimal("0.01")
MONEY_QUANTUM = Decimal("0.01")
SECONDS_PER_HOUR = Decimal(3600)

# A rolled-over clock-out may span at most one midnight.
MAX_SHIFT_HOURS = 24

NIGHT_START_HOUR = 18
MORNING_END_HOUR = 6

# Holiday hours are paid at rate * (1 + additional) or at rate * custom.
DEFAULT_HOLIDAY_RATE_TYPE = "additional"
DEFAULT_HOLIDAY_ADDITIONAL_RATE = Decimal("0.5")
DEFAULT_HOLIDAY_CUSTOM_RATE = Decimal("1.5")
