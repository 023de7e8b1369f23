from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from ...time_entries.model import TimeEntry


class HoursCalculator(ABC):
    """Calculator interface (Strategy Pattern for hour buckets)."""

    @abstractmethod
    def minutes(self, entry: TimeEntry) -> int:
        raise NotImplementedError

    def total(self, entries: Iterable[TimeEntry]) -> int:
        return sum(self.minutes(e) for e in entries)
