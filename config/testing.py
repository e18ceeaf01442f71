import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "timesheet_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

TIMEZONE = "UTC"
WEEK_START = "monday"
DEFAULT_HOURLY_RATE = "25.00"
HOLIDAYS = []
HOLIDAY_RATE_TYPE = "additional"
HOLIDAY_ADDITIONAL_RATE = "0.5"
HOLIDAY_CUSTOM_RATE = "1.5"
