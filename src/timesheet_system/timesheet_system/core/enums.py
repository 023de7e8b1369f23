from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for access control."""

    ADMIN = "admin"
    EMPLOYEE = "employee"


class DayStatus(str, Enum):
    """Representative state of a time entry.

    Stored rows carry four independent booleans; ``from_flags`` is the one
    place where their precedence is decided.
    """

    WORKED = "WORKED"
    NOT_WORKED = "NOT_WORKED"
    LEAVE = "LEAVE"
    SICK = "SICK"
    COMP_LEAVE = "COMP_LEAVE"

    @classmethod
    def from_flags(
        cls,
        *,
        niet_gewerkt: bool = False,
        verlof: bool = False,
        ziek: bool = False,
        recup: bool = False,
    ) -> "DayStatus":
        if recup:
            return cls.COMP_LEAVE
        if verlof:
            return cls.LEAVE
        if ziek:
            return cls.SICK
        if niet_gewerkt:
            return cls.NOT_WORKED
        return cls.WORKED

    @property
    def is_absence(self) -> bool:
        return self is not DayStatus.WORKED


class WindowKind(str, Enum):
    WEEK = "week"
    MONTH = "month"
