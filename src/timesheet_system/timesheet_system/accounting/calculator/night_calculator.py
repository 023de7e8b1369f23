from __future__ import annotations

from ...core.constants import MINUTES_PER_DAY, NIGHT_WINDOW_END, NIGHT_WINDOW_START
from ...time_entries.model import TimeEntry
from .base import HoursCalculator
from .duration_calculator import parse_minutes, span_minutes

NIGHT_WINDOW_MINUTES = NIGHT_WINDOW_END - NIGHT_WINDOW_START


def night_minutes_between(start: int, end: int) -> int:
    """Minutes of a shift inside the 01:00-06:00 night window.

    ``start``/``end`` are minutes since midnight; end <= start wraps to the
    next day. A shift that runs past midnight without touching the window on
    its first day contributes its after-midnight remainder, capped at the
    window width.
    """
    start, end = span_minutes(start, end)

    if start <= NIGHT_WINDOW_START and end >= NIGHT_WINDOW_END:
        return NIGHT_WINDOW_MINUTES
    if start < NIGHT_WINDOW_START < end:
        return end - NIGHT_WINDOW_START
    if NIGHT_WINDOW_START <= start < NIGHT_WINDOW_END:
        return min(end, NIGHT_WINDOW_END) - start
    if end > MINUTES_PER_DAY:
        return min(end - MINUTES_PER_DAY, NIGHT_WINDOW_MINUTES)
    return 0


class NightHoursCalculator(HoursCalculator):
    def minutes(self, entry: TimeEntry) -> int:
        if entry.has_status or not entry.has_times:
            return 0
        return night_minutes_between(parse_minutes(entry.start_time), parse_minutes(entry.end_time))
