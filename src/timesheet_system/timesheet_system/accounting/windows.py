from __future__ import annotations

from dataclasses import dataclass

from ..common.datetime_utils import (
    DUTCH_MONTHS_LONG,
    DUTCH_MONTHS_SHORT,
    IsoDate,
    iso_week_number,
    monday_of,
    month_bounds,
    shift_month,
)
from ..core.enums import WindowKind


@dataclass(frozen=True)
class AggregationWindow:
    """A Monday-anchored week or a calendar month, inclusive on both ends."""

    kind: WindowKind
    start: IsoDate
    end: IsoDate

    @classmethod
    def week_of(cls, reference: IsoDate) -> "AggregationWindow":
        monday = monday_of(reference)
        return cls(kind=WindowKind.WEEK, start=monday, end=monday.add_days(6))

    @classmethod
    def month_of(cls, year: int, month: int) -> "AggregationWindow":
        first, last = month_bounds(year, month)
        return cls(kind=WindowKind.MONTH, start=first, end=last)

    def contains(self, value: IsoDate) -> bool:
        return self.start <= value <= self.end

    def dates(self) -> list[IsoDate]:
        out = []
        current = self.start
        while current <= self.end:
            out.append(current)
            current = current.add_days(1)
        return out

    def next(self) -> "AggregationWindow":
        return self._shift(1)

    def previous(self) -> "AggregationWindow":
        return self._shift(-1)

    def _shift(self, step: int) -> "AggregationWindow":
        if self.kind is WindowKind.WEEK:
            return AggregationWindow.week_of(self.start.add_days(7 * step))
        year, month = shift_month(self.start.year, self.start.month, step)
        return AggregationWindow.month_of(year, month)

    @property
    def week_number(self) -> int:
        """ISO week number of the window start, used for labels only."""
        return iso_week_number(self.start)

    def title(self) -> str:
        if self.kind is WindowKind.MONTH:
            return f"{DUTCH_MONTHS_LONG[self.start.month - 1]} {self.start.year}"

        s, e = self.start, self.end
        s_month = DUTCH_MONTHS_SHORT[s.month - 1]
        e_month = DUTCH_MONTHS_SHORT[e.month - 1]
        if s.month == e.month and s.year == e.year:
            date_range = f"{s_month} {s.day} - {e.day}, {s.year}"
        elif s.year == e.year:
            date_range = f"{s_month} {s.day} - {e_month} {e.day}, {s.year}"
        else:
            date_range = f"{s_month} {s.day}, {s.year} - {e_month} {e.day}, {e.year}"
        return f"Week {self.week_number} • {date_range}"
