from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from .model import EmployeeProfile


class UserRepository(Protocol):
    """Record store for employee profiles (the ``user_profiles`` table)."""

    def get_by_id(self, user_id: str) -> Optional[EmployeeProfile]:
        raise NotImplementedError

    def list_employees(self) -> Sequence[EmployeeProfile]:
        """Profiles with role ``employee``, newest first."""
        raise NotImplementedError

    def update_travel_time(self, user_id: str, minutes: int) -> Optional[EmployeeProfile]:
        raise NotImplementedError

    def update_full_name(self, user_id: str, full_name: str) -> Optional[EmployeeProfile]:
        raise NotImplementedError


class IdentityProvider(Protocol):
    """Resolves a bearer token to the auth user it was issued for."""

    def get_user(self, access_token: str) -> Optional[dict[str, Any]]:
        raise NotImplementedError
