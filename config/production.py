import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "timesheet_db"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

TIMEZONE = os.getenv("TIMEZONE", "America/New_York")
WEEK_START = os.getenv("WEEK_START", "monday")
DEFAULT_HOURLY_RATE = os.getenv("DEFAULT_HOURLY_RATE", "25.00")
HOLIDAYS = [d for d in os.getenv("HOLIDAYS", "").split(",") if d.strip()]
HOLIDAY_RATE_TYPE = os.getenv("HOLIDAY_RATE_TYPE", "additional")
HOLIDAY_ADDITIONAL_RATE = os.getenv("HOLIDAY_ADDITIONAL_RATE", "0.5")
HOLIDAY_CUSTOM_RATE = os.getenv("HOLIDAY_CUSTOM_RATE", "1.5")
