"""Day, week and month aggregation over already-fetched entries.

All filtering compares ``IsoDate`` values (string order), never datetimes.
Inputs are not mutated; every function returns fresh values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import IsoDate
from ..time_entries.model import TimeEntry
from .calculator.base import HoursCalculator
from .calculator.duration_calculator import WorkedHoursCalculator
from .calculator.night_calculator import NightHoursCalculator
from .calculator.sunday_calculator import SundayHoursCalculator
from .windows import AggregationWindow

_WORKED = WorkedHoursCalculator()


@dataclass(frozen=True)
class WindowSummary:
    total_minutes: int
    net_minutes: int
    worked_days: int
    night_minutes: int
    sunday_minutes: int

    def to_dict(self) -> dict:
        return {
            "total_minutes": self.total_minutes,
            "net_minutes": self.net_minutes,
            "worked_days": self.worked_days,
            "night_minutes": self.night_minutes,
            "sunday_minutes": self.sunday_minutes,
        }


def entries_for_date(entries: Iterable[TimeEntry], date: IsoDate) -> list[TimeEntry]:
    return [e for e in entries if e.date == date]


def entries_in_window(entries: Iterable[TimeEntry], window: AggregationWindow) -> list[TimeEntry]:
    return [e for e in entries if window.start <= e.date <= window.end]


def group_by_date(entries: Iterable[TimeEntry]) -> dict[IsoDate, list[TimeEntry]]:
    groups: dict[IsoDate, list[TimeEntry]] = {}
    for e in entries:
        groups.setdefault(e.date, []).append(e)
    return groups


def total_minutes(entries: Iterable[TimeEntry]) -> int:
    """Worked minutes over the given entries, status entries counting zero."""
    return _WORKED.total(entries)


def total_for_date(entries: Iterable[TimeEntry], date: IsoDate, *, calculator: Optional[HoursCalculator] = None) -> int:
    return (calculator or _WORKED).total(entries_for_date(entries, date))


def total_for_window(
    entries: Iterable[TimeEntry], window: AggregationWindow, *, calculator: Optional[HoursCalculator] = None
) -> int:
    return (calculator or _WORKED).total(entries_in_window(entries, window))


def total_for_week(entries: Iterable[TimeEntry], week_start: IsoDate) -> int:
    return total_for_window(entries, AggregationWindow.week_of(week_start))


def total_for_month(entries: Iterable[TimeEntry], year: int, month: int) -> int:
    return total_for_window(entries, AggregationWindow.month_of(year, month))


def worked_dates(entries: Iterable[TimeEntry]) -> set[IsoDate]:
    """Distinct dates with at least one entry that carries no status flag."""
    return {e.date for e in entries if not e.has_status}


def worked_days(entries: Iterable[TimeEntry], window: AggregationWindow) -> int:
    return len(worked_dates(entries_in_window(entries, window)))


def worked_days_in_month(entries: Iterable[TimeEntry], year: int, month: int) -> int:
    return worked_days(entries, AggregationWindow.month_of(year, month))


def net_after_travel(entries: Sequence[TimeEntry], travel_time_minutes: int) -> int:
    """Subtract the daily travel deduction once per worked day, never below zero."""
    total = 0
    for date, day_entries in group_by_date(entries).items():
        if not any(not e.has_status for e in day_entries):
            continue
        total += max(_WORKED.total(day_entries) - travel_time_minutes, 0)
    return total


def summarize(
    entries: Iterable[TimeEntry],
    window: AggregationWindow,
    *,
    travel_time_minutes: int = 0,
    deduct_travel_time: bool = False,
) -> WindowSummary:
    in_window = entries_in_window(entries, window)
    total = _WORKED.total(in_window)
    net = net_after_travel(in_window, travel_time_minutes) if deduct_travel_time else total
    return WindowSummary(
        total_minutes=total,
        net_minutes=net,
        worked_days=len(worked_dates(in_window)),
        night_minutes=NightHoursCalculator().total(in_window),
        sunday_minutes=SundayHoursCalculator().total(in_window),
    )
