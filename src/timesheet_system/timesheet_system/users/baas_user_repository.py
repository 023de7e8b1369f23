from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from ..backend.connection import BackendConnection
from ..backend.rest_base import eq, fetch_auth_user, select_rows, update_rows
from ..core.enums import Role
from ..core.exceptions import BackendError
from .model import EmployeeProfile
from .repository import IdentityProvider, UserRepository

logger = logging.getLogger(__name__)

TABLE = "user_profiles"
EMPLOYEE_COLUMNS = "id, email, full_name, role, travel_time_minutes, created_at"
EMPLOYEE_COLUMNS_BASIC = "id, email, full_name, role, created_at"


def profile_from_row(row: dict[str, Any]) -> EmployeeProfile:
    return EmployeeProfile(
        id=str(row["id"]),
        email=row.get("email") or "",
        full_name=row.get("full_name"),
        role=Role(row.get("role") or Role.EMPLOYEE.value),
        travel_time_minutes=int(row.get("travel_time_minutes") or 0),
        created_at=row.get("created_at"),
    )


class BaasUserRepository(UserRepository):
    def __init__(self, conn: BackendConnection):
        self._conn = conn

    def get_by_id(self, user_id: str) -> Optional[EmployeeProfile]:
        rows = select_rows(self._conn, TABLE, filters={"id": eq(user_id)}, limit=1)
        if not rows:
            return None
        return profile_from_row(rows[0])

    def list_employees(self) -> Sequence[EmployeeProfile]:
        filters = {"role": eq(Role.EMPLOYEE.value)}
        order = ("created_at.desc",)
        try:
            rows = select_rows(self._conn, TABLE, columns=EMPLOYEE_COLUMNS, filters=filters, order=order)
        except BackendError as e:
            # Older databases predate the travel time column.
            if "travel_time_minutes" not in (e.details or ""):
                raise
            logger.warning("user_profiles.travel_time_minutes missing, defaulting to 0")
            rows = select_rows(self._conn, TABLE, columns=EMPLOYEE_COLUMNS_BASIC, filters=filters, order=order)
        return [profile_from_row(r) for r in rows]

    def update_travel_time(self, user_id: str, minutes: int) -> Optional[EmployeeProfile]:
        rows = update_rows(self._conn, TABLE, {"travel_time_minutes": int(minutes)}, filters={"id": eq(user_id)})
        return profile_from_row(rows[0]) if rows else None

    def update_full_name(self, user_id: str, full_name: str) -> Optional[EmployeeProfile]:
        rows = update_rows(self._conn, TABLE, {"full_name": full_name}, filters={"id": eq(user_id)})
        return profile_from_row(rows[0]) if rows else None


class BaasIdentityProvider(IdentityProvider):
    def __init__(self, conn: BackendConnection):
        self._conn = conn

    def get_user(self, access_token: str) -> Optional[dict[str, Any]]:
        return fetch_auth_user(self._conn, access_token)
