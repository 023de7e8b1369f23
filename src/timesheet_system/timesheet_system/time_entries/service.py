from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import IsoDate
from ..common.validators import as_bool, optional_text, require_time_string
from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..core.exceptions import NotFoundError, ValidationError
from .model import TimeEntry, TimeEntryDraft
from .repository import TimeEntryRepository

logger = logging.getLogger(__name__)

STATUS_FIELDS = ("niet_gewerkt", "verlof", "ziek", "recup")


def parse_date(value: Any, field_name: str = "date") -> IsoDate:
    if not value:
        raise ValidationError(f"{field_name} is required")
    try:
        return IsoDate.parse(value)
    except ValueError:
        raise ValidationError(f"{field_name} must be a date in YYYY-MM-DD format")


def build_draft(payload: Mapping[str, Any]) -> TimeEntryDraft:
    """Validate an entry form submission.

    A status entry (one flag set) never keeps times. A worked entry needs
    both times; an end before the start is an overnight shift.
    """
    entry_date = parse_date(payload.get("date"))
    flags = {name: as_bool(payload.get(name, False)) for name in STATUS_FIELDS}
    if sum(flags.values()) > 1:
        raise ValidationError("Only one status can be set per entry")

    if any(flags.values()):
        start_time = end_time = None
    else:
        start_time = require_time_string(payload.get("start_time"), "start_time")
        end_time = require_time_string(payload.get("end_time"), "end_time")

    return TimeEntryDraft(
        date=entry_date,
        start_time=start_time,
        end_time=end_time,
        rechtstreeks=as_bool(payload.get("rechtstreeks", False)),
        bonnummer=optional_text(payload.get("bonnummer")),
        comment=optional_text(payload.get("comment")),
        **flags,
    )


class TimeEntryService:
    """Use case: an employee manages their own time entries."""

    def __init__(self, entries: TimeEntryRepository, *, history_limit: int = DEFAULT_HISTORY_LIMIT):
        self._entries = entries
        self._history_limit = int(history_limit)

    def list_entries(
        self,
        user_id: str,
        *,
        on: Optional[IsoDate] = None,
        start: Optional[IsoDate] = None,
        end: Optional[IsoDate] = None,
    ) -> Sequence[TimeEntry]:
        if on is not None:
            return self._entries.list_for_user(user_id, start=on, end=on)
        if start is not None or end is not None:
            if start is not None and end is not None and end < start:
                raise ValidationError("end must not be before start")
            return self._entries.list_for_user(user_id, start=start, end=end)
        return self._entries.list_for_user(user_id, limit=self._history_limit)

    def create_entry(self, user_id: str, payload: Mapping[str, Any]) -> TimeEntry:
        draft = build_draft(payload)
        entry = self._entries.create(user_id=user_id, draft=draft)
        logger.info("Created time entry %s for %s on %s", entry.id, user_id, entry.date)
        return entry

    def update_entry(self, user_id: str, entry_id: str, payload: Mapping[str, Any]) -> TimeEntry:
        draft = build_draft(payload)
        entry = self._entries.update(entry_id, user_id=user_id, draft=draft)
        if entry is None:
            raise NotFoundError("Time entry not found")
        return entry

    def delete_entry(self, user_id: str, entry_id: str) -> None:
        if not self._entries.delete(entry_id, user_id=user_id):
            raise NotFoundError("Time entry not found")
        logger.info("Deleted time entry %s for %s", entry_id, user_id)

    def list_for_employee(
        self,
        employee_id: Optional[str],
        *,
        start: Optional[IsoDate] = None,
        end: Optional[IsoDate] = None,
    ) -> Sequence[TimeEntry]:
        """Admin read of every entry of one employee, no history limit."""
        if not employee_id:
            raise ValidationError("Employee ID is required")
        return self._entries.list_for_user(employee_id, start=start, end=end)
