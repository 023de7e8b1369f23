from __future__ import annotations

from typing import Any, Optional, Sequence

from ..backend.connection import BackendConnection
from ..backend.rest_base import delete_rows, eq, gte, insert_row, lte, select_rows, update_rows
from ..common.datetime_utils import IsoDate
from .model import TimeEntry, TimeEntryDraft
from .repository import TimeEntryRepository

TABLE = "time_entries"


def entry_from_row(row: dict[str, Any]) -> TimeEntry:
    return TimeEntry(
        id=str(row["id"]),
        user_id=str(row["user_id"]),
        date=IsoDate.parse(row["date"]),
        start_time=row.get("start_time") or None,
        end_time=row.get("end_time") or None,
        niet_gewerkt=bool(row.get("niet_gewerkt")),
        verlof=bool(row.get("verlof")),
        ziek=bool(row.get("ziek")),
        recup=bool(row.get("recup")),
        rechtstreeks=bool(row.get("rechtstreeks")),
        bonnummer=row.get("bonnummer"),
        comment=row.get("comment"),
        created_at=row.get("created_at"),
        updated_at=row.get("updated_at"),
    )


class BaasTimeEntryRepository(TimeEntryRepository):
    def __init__(self, conn: BackendConnection):
        self._conn = conn

    def get_by_id(self, entry_id: str, *, user_id: str) -> Optional[TimeEntry]:
        rows = select_rows(self._conn, TABLE, filters={"id": eq(entry_id), "user_id": eq(user_id)}, limit=1)
        if not rows:
            return None
        return entry_from_row(rows[0])

    def list_for_user(
        self,
        user_id: str,
        *,
        start: Optional[IsoDate] = None,
        end: Optional[IsoDate] = None,
        limit: Optional[int] = None,
    ) -> Sequence[TimeEntry]:
        filters = {"user_id": eq(user_id)}
        # PostgREST takes one condition per key; "and" combines both bounds.
        if start and end:
            filters["and"] = f"(date.gte.{start},date.lte.{end})"
        elif start:
            filters["date"] = gte(start)
        elif end:
            filters["date"] = lte(end)
        rows = select_rows(
            self._conn,
            TABLE,
            filters=filters,
            order=("date.desc", "start_time.desc"),
            limit=limit,
        )
        return [entry_from_row(r) for r in rows]

    def create(self, *, user_id: str, draft: TimeEntryDraft) -> TimeEntry:
        payload = draft.to_payload()
        payload["user_id"] = user_id
        return entry_from_row(insert_row(self._conn, TABLE, payload))

    def update(self, entry_id: str, *, user_id: str, draft: TimeEntryDraft) -> Optional[TimeEntry]:
        rows = update_rows(
            self._conn, TABLE, draft.to_payload(), filters={"id": eq(entry_id), "user_id": eq(user_id)}
        )
        if not rows:
            return None
        return entry_from_row(rows[0])

    def delete(self, entry_id: str, *, user_id: str) -> bool:
        return delete_rows(self._conn, TABLE, filters={"id": eq(entry_id), "user_id": eq(user_id)}) > 0
