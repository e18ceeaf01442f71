from datetime import datetime, timezone

import pytest

from src.timesheet_system.timesheet_system.payroll.night_shift import is_night_shift

UTC = timezone.utc


def _at(day, hour, minute=0):
    return datetime(2024, 3, day, hour, minute, tzinfo=UTC)


@pytest.mark.parametrize(
    "clock_in, clock_out, expected",
    [
        (_at(5, 22), _at(6, 6), True),
        (_at(5, 19), _at(5, 23), True),
        (_at(5, 1), _at(5, 5), True),
        (_at(5, 9), _at(5, 17), False),
        (_at(5, 4), _at(5, 8), False),
        (_at(5, 23), _at(5, 7), True),
    ],
)
def test_night_shift_rule(clock_in, clock_out, expected):
    assert is_night_shift(clock_in, clock_out, UTC) is expected


def test_open_shift_is_not_classified():
    assert is_night_shift(_at(5, 22), None, UTC) is False
