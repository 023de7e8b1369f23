from __future__ import annotations

import pytest

from src.timesheet_system.timesheet_system.common.datetime_utils import IsoDate
from src.timesheet_system.timesheet_system.core.enums import Role, WindowKind
from src.timesheet_system.timesheet_system.core.exceptions import NotFoundError, ValidationError
from src.timesheet_system.timesheet_system.reports.csv_renderer import render_csv
from src.timesheet_system.timesheet_system.reports.service import ReportService, window_from_args
from src.timesheet_system.timesheet_system.time_entries.model import TimeEntry
from src.timesheet_system.timesheet_system.users.model import EmployeeProfile


class FakeEntriesRepo:
    def __init__(self, rows):
        self._rows = rows
        self.last_args = None

    def list_for_user(self, user_id, *, start=None, end=None, limit=None):
        self.last_args = {"user_id": user_id, "start": start, "end": end}
        return [r for r in self._rows if r.user_id == user_id]


class FakeUsersRepo:
    def __init__(self, *profiles):
        self._by_id = {p.id: p for p in profiles}

    def get_by_id(self, user_id):
        return self._by_id.get(user_id)


EMPLOYEE = EmployeeProfile(id="e1", email="jan@firma.be", full_name="Jan", role=Role.EMPLOYEE, travel_time_minutes=30)
ROWS = [
    TimeEntry(id="1", user_id="e1", date=IsoDate("2024-03-11"), start_time="08:00", end_time="16:00"),
    TimeEntry(id="2", user_id="e1", date=IsoDate("2024-03-12"), ziek=True),
]


def test_window_from_args():
    today = IsoDate("2024-03-13")
    week = window_from_args({}, today=today)
    assert week.kind is WindowKind.WEEK and str(week.start) == "2024-03-11"

    month = window_from_args({"view": "month", "year": "2023", "month": "12"}, today=today)
    assert (str(month.start), str(month.end)) == ("2023-12-01", "2023-12-31")

    assert str(window_from_args({"view": "week", "date": "2024-01-07"}, today=today).start) == "2024-01-01"


@pytest.mark.parametrize(
    "args",
    [
        {"view": "year"},
        {"view": "month", "year": "2024", "month": "13"},
        {"view": "month", "year": "abc", "month": "1"},
        {"view": "week", "date": "07-01-2024"},
    ],
)
def test_window_from_args_rejects_bad_input(args):
    with pytest.raises(ValidationError):
        window_from_args(args, today=IsoDate("2024-03-13"))


def test_report_forwards_window_bounds():
    repo = FakeEntriesRepo(ROWS)
    svc = ReportService(repo, FakeUsersRepo(EMPLOYEE))
    window = window_from_args({"view": "month", "year": "2024", "month": "3"})

    report = svc.build_report(user_id="e1", window=window, today=IsoDate("2024-03-13"))

    assert repo.last_args == {"user_id": "e1", "start": IsoDate("2024-03-01"), "end": IsoDate("2024-03-31")}
    assert len(report.calendar) == 31
    assert report.export.summary.total_minutes == 480
    assert report.export.summary.net_minutes == 480
    assert report.to_dict()["window"]["title"] == "maart 2024"


def test_report_applies_travel_time_when_enabled():
    svc = ReportService(FakeEntriesRepo(ROWS), FakeUsersRepo(EMPLOYEE), deduct_travel_time=True)
    window = window_from_args({"view": "week", "date": "2024-03-11"})
    report = svc.build_report(user_id="e1", window=window)
    assert report.export.summary.net_minutes == 450


def test_report_for_unknown_employee():
    svc = ReportService(FakeEntriesRepo([]), FakeUsersRepo())
    with pytest.raises(NotFoundError):
        svc.build_report(user_id="ghost", window=window_from_args({}))


def test_csv_rendering():
    svc = ReportService(FakeEntriesRepo(ROWS), FakeUsersRepo(EMPLOYEE), deduct_travel_time=True)
    report = svc.build_report(user_id="e1", window=window_from_args({"view": "week", "date": "2024-03-11"}))

    lines = render_csv(report.export, employee_name="Jan").splitlines()

    assert lines[0] == "Jan;Week 11 • mrt 11 - 17, 2024"
    assert lines[1] == "Datum;Tijd / status;Duur;Opmerking;Bonnummer;Rechtstreeks"
    assert lines[2] == "ma 11-03-2024;08:00 - 16:00;8u 0m;;;Nee"
    assert lines[3] == "di 12-03-2024;Ziek;-;;;Nee"
    assert "Totaal;8u 0m" in lines
    assert "Totaal na reistijd;7u 30m" in lines
    assert "Gewerkte dagen;1" in lines
