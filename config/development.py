import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "timesheet_db"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Calendar days and weeks are computed in this zone
TIMEZONE = os.getenv("TIMEZONE", "America/New_York")
WEEK_START = os.getenv("WEEK_START", "monday")

# Used when neither the entry, the job nor the user carries a rate
DEFAULT_HOURLY_RATE = os.getenv("DEFAULT_HOURLY_RATE", "25.00")

# Comma-separated ISO dates, e.g. "2024-12-25,2025-01-01"
HOLIDAYS = [d for d in os.getenv("HOLIDAYS", "").split(",") if d.strip()]

# Holiday hours: "additional" pays rate * (1 + HOLIDAY_ADDITIONAL_RATE),
# "custom" pays rate * HOLIDAY_CUSTOM_RATE
HOLIDAY_RATE_TYPE = os.getenv("HOLIDAY_RATE_TYPE", "additional")
HOLIDAY_ADDITIONAL_RATE = os.getenv("HOLIDAY_ADDITIONAL_RATE", "0.5")
HOLIDAY_CUSTOM_RATE = os.getenv("HOLIDAY_CUSTOM_RATE", "1.5")
