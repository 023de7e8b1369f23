from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from ..common.datetime_utils import IsoDate, dutch_weekday_short
from ..core.enums import DayStatus
from ..time_entries.model import TimeEntry
from .aggregator import entries_in_window, group_by_date, total_minutes
from .calculator.duration_calculator import format_duration
from .status_resolver import css_class, display_label, representative_entry
from .windows import AggregationWindow


@dataclass(frozen=True)
class CalendarCell:
    date: IsoDate
    weekday: str
    day: int
    entry_count: int
    status: Optional[DayStatus]
    label: str
    css_class: str
    total_minutes: int
    total_label: str
    rechtstreeks: bool
    is_today: bool

    def to_dict(self) -> dict:
        return {
            "date": str(self.date),
            "weekday": self.weekday,
            "day": self.day,
            "entry_count": self.entry_count,
            "status": self.status.value if self.status else None,
            "label": self.label,
            "css_class": self.css_class,
            "total_minutes": self.total_minutes,
            "total_label": self.total_label,
            "rechtstreeks": self.rechtstreeks,
            "is_today": self.is_today,
        }


def build_calendar(
    entries: Iterable[TimeEntry],
    window: AggregationWindow,
    *,
    today: Optional[IsoDate] = None,
) -> list[CalendarCell]:
    """One cell per date of the window, empty dates included."""
    today = today or IsoDate.today()
    by_date = group_by_date(entries_in_window(entries, window))

    cells = []
    for d in window.dates():
        day_entries = by_date.get(d, [])
        first = representative_entry(day_entries)
        status = first.status if first else None
        total = total_minutes(day_entries)
        show_total = total > 0 and status is DayStatus.WORKED
        cells.append(
            CalendarCell(
                date=d,
                weekday=dutch_weekday_short(d),
                day=d.day,
                entry_count=len(day_entries),
                status=status,
                label=display_label(first),
                css_class=css_class(first),
                total_minutes=total,
                total_label=format_duration(total) if show_total else "",
                rechtstreeks=any(e.rechtstreeks for e in day_entries),
                is_today=d == today,
            )
        )
    return cells
