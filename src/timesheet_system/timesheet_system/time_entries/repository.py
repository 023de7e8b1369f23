from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..common.datetime_utils import IsoDate
from .model import TimeEntry, TimeEntryDraft


class TimeEntryRepository(Protocol):
    """Record store for time entries.

    Every call is scoped by owner id; the service never touches another
    employee's rows except through the admin read ``list_for_user``.
    """

    def get_by_id(self, entry_id: str, *, user_id: str) -> Optional[TimeEntry]:
        raise NotImplementedError

    def list_for_user(
        self,
        user_id: str,
        *,
        start: Optional[IsoDate] = None,
        end: Optional[IsoDate] = None,
        limit: Optional[int] = None,
    ) -> Sequence[TimeEntry]:
        """Newest first: date descending, then start time descending."""
        raise NotImplementedError

    def create(self, *, user_id: str, draft: TimeEntryDraft) -> TimeEntry:
        raise NotImplementedError

    def update(self, entry_id: str, *, user_id: str, draft: TimeEntryDraft) -> Optional[TimeEntry]:
        raise NotImplementedError

    def delete(self, entry_id: str, *, user_id: str) -> bool:
        raise NotImplementedError
