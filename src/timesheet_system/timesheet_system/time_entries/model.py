from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.datetime_utils import IsoDate
from ..core.enums import DayStatus


@dataclass(frozen=True)
class TimeEntry:
    """Domain entity: one work or absence row for one employee on one date.

    Legacy rows may carry stale times next to a status flag; the status wins
    for every hour calculation.
    """

    id: str
    user_id: str
    date: IsoDate
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    niet_gewerkt: bool = False
    verlof: bool = False
    ziek: bool = False
    recup: bool = False
    rechtstreeks: bool = False
    bonnummer: Optional[str] = None
    comment: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @property
    def status(self) -> DayStatus:
        return DayStatus.from_flags(
            niet_gewerkt=self.niet_gewerkt,
            verlof=self.verlof,
            ziek=self.ziek,
            recup=self.recup,
        )

    @property
    def has_status(self) -> bool:
        return self.niet_gewerkt or self.verlof or self.ziek or self.recup

    @property
    def has_times(self) -> bool:
        return bool(self.start_time) and bool(self.end_time)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "date": str(self.date),
            "start_time": self.start_time,
            "end_time": self.end_time,
            "niet_gewerkt": self.niet_gewerkt,
            "verlof": self.verlof,
            "ziek": self.ziek,
            "recup": self.recup,
            "rechtstreeks": self.rechtstreeks,
            "bonnummer": self.bonnummer,
            "comment": self.comment,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }


@dataclass(frozen=True)
class TimeEntryDraft:
    """Validated write model handed to the repository (no id, no owner)."""

    date: IsoDate
    start_time: Optional[str]
    end_time: Optional[str]
    niet_gewerkt: bool = False
    verlof: bool = False
    ziek: bool = False
    recup: bool = False
    rechtstreeks: bool = False
    bonnummer: Optional[str] = None
    comment: Optional[str] = None

    @property
    def has_status(self) -> bool:
        return self.niet_gewerkt or self.verlof or self.ziek or self.recup

    def to_payload(self) -> dict:
        return {
            "date": str(self.date),
            "start_time": self.start_time,
            "end_time": self.end_time,
            "niet_gewerkt": self.niet_gewerkt,
            "verlof": self.verlof,
            "ziek": self.ziek,
            "recup": self.recup,
            "rechtstreeks": self.rechtstreeks,
            "bonnummer": self.bonnummer,
            "comment": self.comment,
        }
