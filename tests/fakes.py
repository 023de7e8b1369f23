"""In-memory record store and identity fakes shared by service and API tests."""

from __future__ import annotations

from dataclasses import replace
from typing import Optional

from src.timesheet_system.timesheet_system.core.enums import Role
from src.timesheet_system.timesheet_system.time_entries.model import TimeEntry, TimeEntryDraft
from src.timesheet_system.timesheet_system.users.model import EmployeeProfile


class InMemoryEntries:
    def __init__(self):
        self._rows: dict[str, TimeEntry] = {}
        self._id = 0
        self.last_list_args = None

    def get_by_id(self, entry_id, *, user_id):
        e = self._rows.get(entry_id)
        return e if e and e.user_id == user_id else None

    def list_for_user(self, user_id, *, start=None, end=None, limit=None):
        self.last_list_args = {"start": start, "end": end, "limit": limit}
        items = [e for e in self._rows.values() if e.user_id == user_id]
        if start:
            items = [e for e in items if e.date >= start]
        if end:
            items = [e for e in items if e.date <= end]
        items.sort(key=lambda e: (e.date, e.start_time or ""), reverse=True)
        return items[:limit] if limit else items

    def create(self, *, user_id, draft: TimeEntryDraft) -> TimeEntry:
        self._id += 1
        entry = TimeEntry(id=str(self._id), user_id=user_id, **vars(draft))
        self._rows[entry.id] = entry
        return entry

    def update(self, entry_id, *, user_id, draft) -> Optional[TimeEntry]:
        if not self.get_by_id(entry_id, user_id=user_id):
            return None
        self._rows[entry_id] = replace(self._rows[entry_id], **vars(draft))
        return self._rows[entry_id]

    def delete(self, entry_id, *, user_id) -> bool:
        if not self.get_by_id(entry_id, user_id=user_id):
            return False
        del self._rows[entry_id]
        return True


class InMemoryUsers:
    def __init__(self, *profiles: EmployeeProfile):
        self._by_id = {p.id: p for p in profiles}

    def get_by_id(self, user_id):
        return self._by_id.get(user_id)

    def list_employees(self):
        return [p for p in self._by_id.values() if p.role == Role.EMPLOYEE]

    def update_travel_time(self, user_id, minutes):
        if user_id not in self._by_id:
            return None
        self._by_id[user_id] = replace(self._by_id[user_id], travel_time_minutes=minutes)
        return self._by_id[user_id]

    def update_full_name(self, user_id, full_name):
        if user_id not in self._by_id:
            return None
        self._by_id[user_id] = replace(self._by_id[user_id], full_name=full_name)
        return self._by_id[user_id]


class FakeIdentity:
    def __init__(self, tokens: dict):
        self._tokens = tokens

    def get_user(self, access_token):
        return self._tokens.get(access_token)
