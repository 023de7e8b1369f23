"""Export contract: one row per window date plus a summary block.

Renderers (CSV today) only format what is built here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..core.constants import EMPTY_DAY_LABEL
from ..common.datetime_utils import IsoDate, dutch_weekday_short
from ..time_entries.model import TimeEntry
from .aggregator import WindowSummary, entries_in_window, group_by_date, summarize, total_minutes
from .calculator.duration_calculator import format_duration
from .status_resolver import display_label, representative_entry
from .windows import AggregationWindow


@dataclass(frozen=True)
class ExportRow:
    date_label: str
    time_or_status_label: str
    duration_label: str
    comment: str
    bonnummer: str
    rechtstreeks: str

    def to_dict(self) -> dict:
        return {
            "date_label": self.date_label,
            "time_or_status_label": self.time_or_status_label,
            "duration_label": self.duration_label,
            "comment": self.comment,
            "bonnummer": self.bonnummer,
            "rechtstreeks": self.rechtstreeks,
        }


@dataclass(frozen=True)
class ExportData:
    title: str
    rows: list[ExportRow]
    summary: WindowSummary

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "rows": [r.to_dict() for r in self.rows],
            "summary": self.summary.to_dict(),
        }


def date_label(value: IsoDate) -> str:
    return f"{dutch_weekday_short(value)} {value.day:02d}-{value.month:02d}-{value.year}"


def yes_no(value: bool) -> str:
    return "Ja" if value else "Nee"


def build_export(
    entries: Iterable[TimeEntry],
    window: AggregationWindow,
    *,
    travel_time_minutes: int = 0,
    deduct_travel_time: bool = False,
) -> ExportData:
    in_window = entries_in_window(entries, window)
    by_date = group_by_date(in_window)

    rows = []
    for d in window.dates():
        day_entries = by_date.get(d, [])
        first = representative_entry(day_entries)
        if first is None:
            rows.append(ExportRow(date_label(d), EMPTY_DAY_LABEL, EMPTY_DAY_LABEL, "", "", yes_no(False)))
            continue

        total = total_minutes(day_entries)
        rows.append(
            ExportRow(
                date_label=date_label(d),
                time_or_status_label=display_label(first),
                duration_label=format_duration(total) if total and not first.has_status else EMPTY_DAY_LABEL,
                comment=first.comment or "",
                bonnummer=first.bonnummer or "",
                rechtstreeks=yes_no(first.rechtstreeks),
            )
        )

    summary = summarize(
        in_window,
        window,
        travel_time_minutes=travel_time_minutes,
        deduct_travel_time=deduct_travel_time,
    )
    return ExportData(title=window.title(), rows=rows, summary=summary)
