from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..accounting.calendar import CalendarCell, build_calendar
from ..accounting.export import ExportData, build_export
from ..accounting.windows import AggregationWindow
from ..common.datetime_utils import IsoDate
from ..core.exceptions import NotFoundError, ValidationError
from ..time_entries.repository import TimeEntryRepository
from ..time_entries.service import parse_date
from ..users.model import EmployeeProfile
from ..users.repository import UserRepository


@dataclass(frozen=True)
class ReportData:
    employee: EmployeeProfile
    window: AggregationWindow
    calendar: list[CalendarCell]
    export: ExportData

    def to_dict(self) -> dict:
        return {
            "employee": self.employee.to_dict(),
            "window": {
                "kind": self.window.kind.value,
                "start": str(self.window.start),
                "end": str(self.window.end),
                "title": self.window.title(),
                "week_number": self.window.week_number,
            },
            "calendar": [c.to_dict() for c in self.calendar],
            "export": self.export.to_dict(),
        }


def window_from_args(args: Mapping[str, Any], *, today: Optional[IsoDate] = None) -> AggregationWindow:
    """``view=week&date=`` or ``view=month&year=&month=``; defaults to this week."""
    today = today or IsoDate.today()
    view = (args.get("view") or "week").lower()

    if view == "week":
        reference = parse_date(args.get("date")) if args.get("date") else today
        return AggregationWindow.week_of(reference)

    if view == "month":
        try:
            year = int(args.get("year") or today.year)
            month = int(args.get("month") or today.month)
        except (TypeError, ValueError):
            raise ValidationError("year and month must be numbers")
        if not 1 <= month <= 12 or not 1 <= year <= 9999:
            raise ValidationError("Invalid year/month")
        return AggregationWindow.month_of(year, month)

    raise ValidationError("view must be 'week' or 'month'")


class ReportService:
    """Use case: build the week/month report of one employee."""

    def __init__(
        self,
        entries: TimeEntryRepository,
        users: UserRepository,
        *,
        deduct_travel_time: bool = False,
    ):
        self._entries = entries
        self._users = users
        self._deduct_travel_time = bool(deduct_travel_time)

    def build_report(
        self,
        *,
        user_id: str,
        window: AggregationWindow,
        today: Optional[IsoDate] = None,
    ) -> ReportData:
        employee = self._users.get_by_id(user_id)
        if employee is None:
            raise NotFoundError("Employee not found")

        entries = self._entries.list_for_user(user_id, start=window.start, end=window.end)
        return ReportData(
            employee=employee,
            window=window,
            calendar=build_calendar(entries, window, today=today),
            export=build_export(
                entries,
                window,
                travel_time_minutes=employee.travel_time_minutes,
                deduct_travel_time=self._deduct_travel_time,
            ),
        )
