from __future__ import annotations

import pytest

from src.timesheet_system.timesheet_system.container import wire_container
from src.timesheet_system.timesheet_system.core.enums import Role
from src.timesheet_system.timesheet_system.core.exceptions import BackendError
from src.timesheet_system.timesheet_system.main import create_app
from src.timesheet_system.timesheet_system.users.model import EmployeeProfile

from tests.fakes import FakeIdentity, InMemoryEntries, InMemoryUsers

ADMIN = EmployeeProfile(id="a1", email="baas@firma.be", full_name="Baas", role=Role.ADMIN)
EMPLOYEE = EmployeeProfile(id="e1", email="jan@firma.be", full_name="Jan", role=Role.EMPLOYEE)

TOKENS = {
    "admin-token": {"id": "a1", "email": "baas@firma.be"},
    "employee-token": {"id": "e1", "email": "jan@firma.be"},
}


class BrokenUsers(InMemoryUsers):
    def list_employees(self):
        raise BackendError("Backend request failed", status_code=503, details="upstream down")


def _client(users=None):
    container = wire_container(
        users_repo=users or InMemoryUsers(ADMIN, EMPLOYEE),
        entries_repo=InMemoryEntries(),
        identity=FakeIdentity(TOKENS),
    )
    app = create_app(container)
    return app.test_client()


@pytest.fixture(autouse=True)
def _testing_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")


EMPLOYEE_AUTH = {"Authorization": "Bearer employee-token"}
ADMIN_AUTH = {"Authorization": "Bearer admin-token"}


def test_health_and_cors():
    resp = _client().get("/api/health")
    assert resp.status_code == 200
    assert resp.get_json() == {"status": "ok"}
    assert resp.headers["Access-Control-Allow-Origin"] == "*"


def test_options_preflight():
    resp = _client().options("/api/time-entries")
    assert resp.status_code == 200
    assert "Authorization" in resp.headers["Access-Control-Allow-Headers"]


def test_missing_and_invalid_token():
    client = _client()
    assert client.get("/api/time-entries").get_json() == {"error": "No authorization header"}
    assert client.get("/api/time-entries").status_code == 401
    assert client.get("/api/time-entries", headers={"Authorization": "Bearer nope"}).status_code == 401


def test_entry_lifecycle():
    client = _client()
    resp = client.post(
        "/api/time-entries",
        json={"date": "2024-03-10", "start_time": "23:00", "end_time": "01:00", "rechtstreeks": True},
        headers=EMPLOYEE_AUTH,
    )
    assert resp.status_code == 201
    entry_id = resp.get_json()["id"]

    listed = client.get("/api/time-entries?date=2024-03-10", headers=EMPLOYEE_AUTH).get_json()
    assert [e["id"] for e in listed] == [entry_id]

    resp = client.put(f"/api/time-entries/{entry_id}", json={"date": "2024-03-10", "verlof": True}, headers=EMPLOYEE_AUTH)
    assert resp.get_json()["verlof"] is True
    assert resp.get_json()["start_time"] is None

    assert client.delete(f"/api/time-entries/{entry_id}", headers=EMPLOYEE_AUTH).status_code == 200
    assert client.delete(f"/api/time-entries/{entry_id}", headers=EMPLOYEE_AUTH).status_code == 404


def test_validation_errors_are_400():
    client = _client()
    resp = client.post("/api/time-entries", json={"date": "2024-03-10"}, headers=EMPLOYEE_AUTH)
    assert resp.status_code == 400
    assert "start_time" in resp.get_json()["error"]
    assert client.post("/api/time-entries", data="nope", headers=EMPLOYEE_AUTH).status_code == 400


def test_admin_routes_reject_employees():
    client = _client()
    assert client.get("/api/admin/employees", headers=EMPLOYEE_AUTH).status_code == 403
    assert client.get("/api/admin/employees", headers=ADMIN_AUTH).get_json()[0]["id"] == "e1"


def test_admin_travel_time_both_routes():
    client = _client()
    resp = client.put("/api/admin/employees/e1/travel-time", json={"travel_time_minutes": 25}, headers=ADMIN_AUTH)
    assert resp.get_json()["travel_time_minutes"] == 25

    resp = client.put(
        "/api/admin/employees/travel-time?employeeId=e1", json={"travel_time_minutes": 10}, headers=ADMIN_AUTH
    )
    assert resp.get_json()["travel_time_minutes"] == 10

    resp = client.put("/api/admin/employees/travel-time", json={"travel_time_minutes": 10}, headers=ADMIN_AUTH)
    assert resp.status_code == 400
    resp = client.put("/api/admin/employees/e1/travel-time", json={"travel_time_minutes": -1}, headers=ADMIN_AUTH)
    assert resp.status_code == 400


def test_admin_reads_employee_entries_and_report():
    client = _client()
    client.post(
        "/api/time-entries", json={"date": "2024-03-11", "start_time": "08:00", "end_time": "16:00"}, headers=EMPLOYEE_AUTH
    )

    entries = client.get("/api/admin/employees/time-entries?employeeId=e1", headers=ADMIN_AUTH).get_json()
    assert len(entries) == 1

    report = client.get("/api/admin/employees/e1/report?view=week&date=2024-03-11", headers=ADMIN_AUTH).get_json()
    assert report["export"]["summary"]["total_minutes"] == 480
    assert len(report["calendar"]) == 7

    csv_resp = client.get("/api/admin/employees/e1/report.csv?view=month&year=2024&month=3", headers=ADMIN_AUTH)
    assert csv_resp.mimetype == "text/csv"
    assert "ma 11-03-2024;08:00 - 16:00;8u 0m" in csv_resp.get_data(as_text=True)


def test_own_report_and_profile():
    client = _client()
    assert client.get("/api/me/report?view=month&year=2024&month=2", headers=EMPLOYEE_AUTH).status_code == 200
    assert client.get("/api/me/report?view=day", headers=EMPLOYEE_AUTH).status_code == 400

    resp = client.put("/api/user/profile", json={"full_name": "Jan Peeters"}, headers=EMPLOYEE_AUTH)
    assert resp.get_json()["full_name"] == "Jan Peeters"
    assert client.get("/api/user/profile", headers=EMPLOYEE_AUTH).get_json()["email"] == "jan@firma.be"


def test_wrong_method_and_backend_failure():
    assert _client().patch("/api/time-entries", headers=EMPLOYEE_AUTH).status_code == 405

    resp = _client(BrokenUsers(ADMIN, EMPLOYEE)).get("/api/admin/employees", headers=ADMIN_AUTH)
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Backend request failed", "details": "upstream down"}
