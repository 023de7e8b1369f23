from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class EmployeeProfile:
    """Domain entity: identity, role and per-employee configuration.

    Note: plain data object, the profile table lives in the hosted backend.
    """

    id: str
    email: str
    full_name: Optional[str]
    role: Role
    travel_time_minutes: int = 0
    created_at: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.full_name or self.email

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "email": self.email,
            "full_name": self.full_name,
            "role": self.role.value,
            "travel_time_minutes": self.travel_time_minutes,
            "created_at": self.created_at,
        }
