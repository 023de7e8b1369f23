from __future__ import annotations

from ...time_entries.model import TimeEntry
from .base import HoursCalculator
from .duration_calculator import duration_minutes


class SundayHoursCalculator(HoursCalculator):
    """Full shift duration for entries dated on a Sunday."""

    def minutes(self, entry: TimeEntry) -> int:
        if entry.has_status or not entry.has_times:
            return 0
        if not entry.date.is_sunday():
            return 0
        return duration_minutes(entry.start_time, entry.end_time)
