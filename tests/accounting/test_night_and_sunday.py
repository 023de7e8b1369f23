import pytest

from src.timesheet_system.timesheet_system.accounting.calculator.night_calculator import (
    NightHoursCalculator,
    night_minutes_between,
)
from src.timesheet_system.timesheet_system.accounting.calculator.sunday_calculator import SundayHoursCalculator
from src.timesheet_system.timesheet_system.common.datetime_utils import IsoDate
from src.timesheet_system.timesheet_system.time_entries.model import TimeEntry


def _entry(date, start=None, end=None, **flags):
    return TimeEntry(id="e", user_id="u", date=IsoDate(date), start_time=start, end_time=end, **flags)


def _hm(value: str) -> int:
    h, m = value.split(":")
    return int(h) * 60 + int(m)


@pytest.mark.parametrize(
    "start,end,expected",
    [
        ("02:00", "05:00", 180),  # fully inside
        ("08:00", "12:00", 0),  # outside
        ("00:00", "08:00", 300),  # spans the window
        ("00:30", "03:00", 120),  # starts before, ends inside
        ("04:00", "09:00", 120),  # starts inside, ends after
        ("23:00", "01:00", 60),  # wraps past midnight
        ("20:00", "07:00", 300),  # long overnight, capped
        ("18:00", "22:00", 0),
    ],
)
def test_night_minutes(start, end, expected):
    assert night_minutes_between(_hm(start), _hm(end)) == expected


def test_night_never_exceeds_window():
    for start in range(0, 1440, 30):
        for end in range(0, 1440, 45):
            assert 0 <= night_minutes_between(start, end) <= 300


def test_night_calculator_skips_status_and_missing_times():
    calc = NightHoursCalculator()
    entries = [
        _entry("2024-03-12", "02:00", "05:00"),
        _entry("2024-03-13", "02:00", "05:00", ziek=True),
        _entry("2024-03-14", "02:00", None),
    ]
    assert calc.total(entries) == 180


def test_sunday_hours_only_on_sunday():
    calc = SundayHoursCalculator()
    assert calc.minutes(_entry("2024-03-10", "08:00", "12:00")) == 240
    assert calc.minutes(_entry("2024-03-09", "08:00", "12:00")) == 0
    assert calc.minutes(_entry("2024-03-11", "08:00", "12:00")) == 0


def test_sunday_hours_use_wraparound_and_skip_status():
    calc = SundayHoursCalculator()
    assert calc.minutes(_entry("2024-03-10", "22:00", "02:00")) == 240
    assert calc.minutes(_entry("2024-03-10", "08:00", "12:00", recup=True)) == 0
