from __future__ import annotations

import importlib
import logging
from decimal import Decimal, InvalidOperation
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.datetime_utils import get_zone, parse_iso_date
from .common.validators import parse_rate
from .container import Container, build_container
from .core.constants import (
    DEFAULT_HOLIDAY_ADDITIONAL_RATE,
    DEFAULT_HOLIDAY_CUSTOM_RATE,
    DEFAULT_HOLIDAY_RATE_TYPE,
    DEFAULT_HOURLY_RATE,
    DEFAULT_TIMEZONE,
    DEFAULT_WEEK_START,
)
from .core.enums import HolidayRateType, Weekday
from .core.exceptions import ValidationError
from .payroll.controller import register as register_payroll
from .payroll.rates import HolidayPayPolicy

logger = logging.getLogger(__name__)


def _holidays_from(values) -> list:
    holidays = []
    for value in values or ():
        try:
            holidays.append(parse_iso_date(str(value).strip()))
        except ValueError:
            raise ValidationError(f"HOLIDAYS entry is not YYYY-MM-DD: {value!r}")
    return holidays


def _decimal_setting(settings, name: str, default: Decimal) -> Decimal:
    value = getattr(settings, name, None)
    if value is None or str(value).strip() == "":
        return default
    try:
        parsed = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValidationError(f"{name} is not a number: {value!r}")
    if not parsed.is_finite() or parsed < 0:
        raise ValidationError(f"{name} must be zero or positive: {value!r}")
    return parsed


def _holiday_policy_from(settings) -> HolidayPayPolicy:
    rate_type = getattr(settings, "HOLIDAY_RATE_TYPE", None) or DEFAULT_HOLIDAY_RATE_TYPE
    try:
        rate_type = HolidayRateType.parse(rate_type)
    except ValueError:
        raise ValidationError(f"HOLIDAY_RATE_TYPE must be 'additional' or 'custom': {rate_type!r}")
    return HolidayPayPolicy(
        rate_type=rate_type,
        additional_rate=_decimal_setting(settings, "HOLIDAY_ADDITIONAL_RATE", DEFAULT_HOLIDAY_ADDITIONAL_RATE),
        custom_rate=_decimal_setting(settings, "HOLIDAY_CUSTOM_RATE", DEFAULT_HOLIDAY_CUSTOM_RATE),
    )


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        tz = get_zone(getattr(settings, "TIMEZONE", DEFAULT_TIMEZONE))
        week_start = Weekday.parse(getattr(settings, "WEEK_START", DEFAULT_WEEK_START))
        holidays = _holidays_from(getattr(settings, "HOLIDAYS", ()))
        fallback_rate = parse_rate(getattr(settings, "DEFAULT_HOURLY_RATE", None)) or DEFAULT_HOURLY_RATE
        holiday_policy = _holiday_policy_from(settings)

        logger.info(
            "settings=%s db=%s@%s:%s/%s tz=%s week_start=%s holidays=%d holiday_multiplier=%s",
            settings_module,
            db_config.get("user"), db_config.get("host"), db_config.get("port", 3306), db_config.get("database"),
            tz.key, week_start.name.lower(), len(holidays), holiday_policy.multiplier,
        )

        container = build_container(
            db_config=db_config,
            tz=tz,
            week_start=week_start,
            holidays=holidays,
            fallback_rate=fallback_rate,
            holiday_policy=holiday_policy,
        )

    register_payroll(app, container)

    return app
