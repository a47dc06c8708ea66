from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from src.hr_analytics.hr_analytics.container import build_container_from_repository
from src.hr_analytics.hr_analytics.core.enums import AttendanceStatus, EmployeeStatus
from src.hr_analytics.hr_analytics.employees.model import AttendanceRecord, EmployeeSnapshot
from src.hr_analytics.hr_analytics.main import create_app


class FakeEmployeesRepo:
    def __init__(self, employees=()):
        self._employees = list(employees)
        self.window_starts: list[datetime] = []

    def fetch_active_employees_with_window_data(self, *, window_start: datetime):
        self.window_starts.append(window_start)
        return self._employees


class BrokenEmployeesRepo:
    def fetch_active_employees_with_window_data(self, *, window_start: datetime):
        raise TimeoutError("query timed out")


def _late_employee(emp_id: str, late: int) -> EmployeeSnapshot:
    now = datetime.now()
    return EmployeeSnapshot(
        employee_id=emp_id,
        first_name="Lan",
        last_name=emp_id,
        department="Ops",
        status=EmployeeStatus.ACTIVE,
        attendance=tuple(
            AttendanceRecord(check_in=now - timedelta(days=i + 1), status=AttendanceStatus.LATE, work_hours=8)
            for i in range(late)
        ),
    )


@pytest.fixture
def make_client(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")

    def _make(repo, *, role="admin", logged_in=True):
        app = create_app(container=build_container_from_repository(repo))
        client = app.test_client()
        if logged_in:
            with client.session_transaction() as sess:
                sess["user_id"] = 1
                sess["role"] = role
        return client

    return _make


def test_requires_login(make_client):
    resp = make_client(FakeEmployeesRepo(), logged_in=False).get("/api/analytics/burnout")

    assert resp.status_code == 401


def test_staff_is_forbidden(make_client):
    resp = make_client(FakeEmployeesRepo(), role="staff").get("/api/analytics/burnout")

    assert resp.status_code == 403


@pytest.mark.parametrize("role", ["admin", "hr"])
def test_privileged_roles_get_report(make_client, role):
    repo = FakeEmployeesRepo([_late_employee("a", 3), _late_employee("b", 11)])

    resp = make_client(repo, role=role).get("/api/analytics/burnout?period=14")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["period"] == 14
    assert [e["employeeId"] for e in body["employees"]] == ["b", "a"]
    assert body["employees"][0]["flags"] == ["No leave in 33 months", "11 late arrivals"]
    assert body["employees"][0]["riskScore"] == 60
    assert body["employees"][0]["riskLevel"] == "High"
    assert body["summary"]["totalEmployees"] == 2
    assert body["summary"]["highRisk"] == 1
    assert body["summary"]["mediumRisk"] == 1


def test_missing_period_defaults_to_30_days(make_client):
    repo = FakeEmployeesRepo()

    resp = make_client(repo).get("/api/analytics/burnout")

    assert resp.status_code == 200
    assert resp.get_json() == {
        "summary": {
            "totalEmployees": 0,
            "criticalRisk": 0,
            "highRisk": 0,
            "mediumRisk": 0,
            "lowRisk": 0,
            "avgRiskScore": 0,
        },
        "employees": [],
        "period": 30,
    }
    elapsed = datetime.now() - repo.window_starts[0]
    assert timedelta(days=30) <= elapsed < timedelta(days=30, minutes=5)


@pytest.mark.parametrize("period", ["abc", "0", "-3", "99999"])
def test_bad_period_is_400(make_client, period):
    resp = make_client(FakeEmployeesRepo()).get(f"/api/analytics/burnout?period={period}")

    assert resp.status_code == 400
    assert "period" in resp.get_json()["error"]


def test_data_access_failure_is_500(make_client):
    resp = make_client(BrokenEmployeesRepo()).get("/api/analytics/burnout")

    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Failed to calculate burnout analytics"}
