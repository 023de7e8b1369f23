from __future__ import annotations

from typing import Optional

from ...core.constants import MINUTES_PER_DAY
from ...time_entries.model import TimeEntry
from .base import HoursCalculator


def parse_minutes(value: str) -> int:
    """``"HH:MM"`` or ``"HH:MM:SS"`` to minutes since midnight, seconds dropped."""
    parts = value.strip().split(":")
    return int(parts[0]) * 60 + int(parts[1])


def span_minutes(start: int, end: int) -> tuple[int, int]:
    """Return (start, end) with end moved to the next day when end <= start."""
    if end <= start:
        end += MINUTES_PER_DAY
    return start, end


def duration_minutes(start_time: Optional[str], end_time: Optional[str]) -> int:
    """Minutes between two times of day.

    An end at or before the start is an overnight shift, so equal times
    count as a full 24 hours.
    """
    if not start_time or not end_time:
        return 0
    start, end = span_minutes(parse_minutes(start_time), parse_minutes(end_time))
    return end - start


def format_duration(minutes: int) -> str:
    return f"{minutes // 60}u {minutes % 60}m"


class WorkedHoursCalculator(HoursCalculator):
    """Standard rule: wraparound duration, zero for any status entry."""

    def minutes(self, entry: TimeEntry) -> int:
        if entry.has_status:
            return 0
        return duration_minutes(entry.start_time, entry.end_time)
