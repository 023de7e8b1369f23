from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from ..common.validators import require_non_empty, require_non_negative_int
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, NotFoundError
from .model import EmployeeProfile
from .repository import IdentityProvider, UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """The caller of a request, resolved from its bearer token."""

    user_id: str
    email: str
    role: Role
    travel_time_minutes: int = 0

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


def bearer_token(authorization: Optional[str]) -> str:
    if not authorization:
        raise AuthenticationError("No authorization header")
    token = authorization.replace("Bearer ", "", 1).strip()
    if not token:
        raise AuthenticationError("Invalid token")
    return token


class AuthService:
    """Use case: verify a bearer token and load the caller's profile."""

    def __init__(self, identity: IdentityProvider, users: UserRepository):
        self._identity = identity
        self._users = users

    def authenticate(self, authorization: Optional[str]) -> SessionUser:
        token = bearer_token(authorization)
        auth_user = self._identity.get_user(token)
        if not auth_user or not auth_user.get("id"):
            raise AuthenticationError("Invalid token")

        user_id = str(auth_user["id"])
        profile = self._users.get_by_id(user_id)
        if profile is None:
            # Profile row not created yet: treat as a plain employee.
            return SessionUser(user_id=user_id, email=auth_user.get("email") or "", role=Role.EMPLOYEE)

        return SessionUser(
            user_id=user_id,
            email=profile.email,
            role=profile.role,
            travel_time_minutes=profile.travel_time_minutes,
        )

    def require_admin(self, user: SessionUser) -> None:
        if not user.is_admin:
            raise AuthorizationError("Forbidden: Admin access required")


class ProfileService:
    """Use case: a user reads and renames their own profile."""

    def __init__(self, users: UserRepository):
        self._users = users

    def get_profile(self, user_id: str) -> EmployeeProfile:
        profile = self._users.get_by_id(user_id)
        if profile is None:
            raise NotFoundError("Profile not found")
        return profile

    def update_full_name(self, user_id: str, full_name: Any) -> EmployeeProfile:
        name = require_non_empty(full_name if isinstance(full_name, str) else "", "full_name")
        profile = self._users.update_full_name(user_id, name)
        if profile is None:
            raise NotFoundError("Profile not found")
        return profile


class EmployeeService:
    """Use case: admins manage employees (service-role reads)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def list_employees(self, *, current: SessionUser) -> Sequence[EmployeeProfile]:
        if not current.is_admin:
            raise AuthorizationError("Forbidden: Admin access required")
        return self._users.list_employees()

    def get_employee(self, *, current: SessionUser, employee_id: Optional[str]) -> EmployeeProfile:
        if not current.is_admin:
            raise AuthorizationError("Forbidden: Admin access required")
        employee_id = require_non_empty(employee_id or "", "Employee ID")
        profile = self._users.get_by_id(employee_id)
        if profile is None:
            raise NotFoundError("Employee not found")
        return profile

    def update_travel_time(self, *, current: SessionUser, employee_id: Optional[str], minutes: Any) -> EmployeeProfile:
        if not current.is_admin:
            raise AuthorizationError("Forbidden: Admin access required")
        employee_id = require_non_empty(employee_id or "", "Employee ID")
        value = require_non_negative_int(minutes, "travel_time_minutes")

        profile = self._users.update_travel_time(employee_id, value)
        if profile is None:
            raise NotFoundError("Employee not found")
        logger.info("Travel time for %s set to %s minutes by %s", employee_id, value, current.user_id)
        return profile
