from __future__ import annotations

from typing import Optional

from ..core.constants import EMPTY_DAY_LABEL, WORKED_PLACEHOLDER_LABEL
from ..core.enums import DayStatus
from ..time_entries.model import TimeEntry

STATUS_LABELS = {
    DayStatus.COMP_LEAVE: "Recup",
    DayStatus.LEAVE: "Verlof",
    DayStatus.SICK: "Ziek",
    DayStatus.NOT_WORKED: "Niet gewerkt",
}

STATUS_CSS = {
    DayStatus.COMP_LEAVE: "status-recup",
    DayStatus.LEAVE: "status-verlof",
    DayStatus.SICK: "status-ziek",
    DayStatus.NOT_WORKED: "status-niet-gewerkt",
    DayStatus.WORKED: "status-gewerkt",
}


def representative_entry(day_entries: list[TimeEntry]) -> Optional[TimeEntry]:
    """First entry of the day labels the whole day; totals still use every entry."""
    return day_entries[0] if day_entries else None


def time_range_label(entry: TimeEntry) -> str:
    return f"{entry.start_time[:5]} - {entry.end_time[:5]}"


def display_label(entry: Optional[TimeEntry]) -> str:
    if entry is None:
        return EMPTY_DAY_LABEL
    status = entry.status
    if status.is_absence:
        return STATUS_LABELS[status]
    if entry.has_times:
        return time_range_label(entry)
    return WORKED_PLACEHOLDER_LABEL


def css_class(entry: Optional[TimeEntry]) -> str:
    if entry is None:
        return ""
    return STATUS_CSS[entry.status]
