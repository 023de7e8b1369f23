from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

DUTCH_WEEKDAYS_SHORT = ("ma", "di", "wo", "do", "vr", "za", "zo")
DUTCH_MONTHS_SHORT = ("jan", "feb", "mrt", "apr", "mei", "jun", "jul", "aug", "sep", "okt", "nov", "dec")
DUTCH_MONTHS_LONG = (
    "januari",
    "februari",
    "maart",
    "april",
    "mei",
    "juni",
    "juli",
    "augustus",
    "september",
    "oktober",
    "november",
    "december",
)


@dataclass(frozen=True, order=True)
class IsoDate:
    """Calendar date kept as its zero-padded ``YYYY-MM-DD`` string.

    Equality and ordering are plain string comparison, so bucketing never
    goes through a timezone-bearing value. ``to_date`` gives a naive
    ``datetime.date`` (local midnight) for weekday questions only.
    """

    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or not _ISO_DATE_RE.match(self.value):
            raise ValueError(f"Invalid ISO date: {self.value!r}")
        # Rejects 2024-02-30 and friends.
        datetime.strptime(self.value, "%Y-%m-%d")

    @classmethod
    def from_date(cls, value: date) -> "IsoDate":
        return cls(f"{value.year:04d}-{value.month:02d}-{value.day:02d}")

    @classmethod
    def parse(cls, value: "str | date | IsoDate") -> "IsoDate":
        if isinstance(value, IsoDate):
            return value
        if isinstance(value, datetime):
            return cls.from_date(value.date())
        if isinstance(value, date):
            return cls.from_date(value)
        return cls(str(value).strip()[:10])

    @classmethod
    def today(cls) -> "IsoDate":
        return cls.from_date(now_local().date())

    def to_date(self) -> date:
        return datetime.strptime(self.value, "%Y-%m-%d").date()

    @property
    def year(self) -> int:
        return int(self.value[0:4])

    @property
    def month(self) -> int:
        return int(self.value[5:7])

    @property
    def day(self) -> int:
        return int(self.value[8:10])

    def weekday(self) -> int:
        """Monday is 0 and Sunday is 6."""
        return self.to_date().weekday()

    def is_sunday(self) -> bool:
        return self.weekday() == 6

    def add_days(self, days: int) -> "IsoDate":
        return IsoDate.from_date(self.to_date() + timedelta(days=days))

    def __str__(self) -> str:
        return self.value


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def month_bounds(year: int, month: int) -> tuple[IsoDate, IsoDate]:
    first = date(year, month, 1)
    next_year, next_month = shift_month(year, month, 1)
    last = date(next_year, next_month, 1) - timedelta(days=1)
    return IsoDate.from_date(first), IsoDate.from_date(last)


def shift_month(year: int, month: int, step: int) -> tuple[int, int]:
    """Move ``step`` months, wrapping December/January across years."""
    index = year * 12 + (month - 1) + step
    return index // 12, index % 12 + 1


def monday_of(value: IsoDate) -> IsoDate:
    # Sunday belongs to the week that started six days earlier.
    return value.add_days(-value.weekday())


def iso_week_number(value: IsoDate) -> int:
    return value.to_date().isocalendar()[1]


def dutch_weekday_short(value: IsoDate) -> str:
    return DUTCH_WEEKDAYS_SHORT[value.weekday()]
