from __future__ import annotations

from datetime import datetime
from typing import Sequence

from ..core.enums import AttendanceStatus, EmployeeStatus, LeaveStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, optional_str, placeholders
from .model import AttendanceRecord, EmployeeSnapshot, LeaveRequest
from .repository import EmployeeWindowRepository


class MySQLEmployeeRepository(EmployeeWindowRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def fetch_active_employees_with_window_data(self, *, window_start: datetime) -> Sequence[EmployeeSnapshot]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT e.id, e.first_name, e.last_name, e.status, d.name AS department_name
                FROM employees e
                LEFT JOIN departments d ON d.id = e.department_id
                WHERE e.status=%s
                ORDER BY e.id ASC
                """,
                (EmployeeStatus.ACTIVE.value,),
            )
            employee_rows = fetchall(cur)
            if not employee_rows:
                return []

            ids = [str(r["id"]) for r in employee_rows]
            in_clause = placeholders(len(ids))

            cur.execute(
                f"""
                SELECT employee_id, check_in, overtime_hours, work_hours, status
                FROM attendance
                WHERE check_in >= %s AND employee_id IN ({in_clause})
                ORDER BY check_in ASC
                """,
                (window_start, *ids),
            )
            attendance_rows = fetchall(cur)

            cur.execute(
                f"""
                SELECT employee_id, status, end_date
                FROM leave_requests
                WHERE status=%s AND end_date >= %s AND employee_id IN ({in_clause})
                ORDER BY end_date DESC
                """,
                (LeaveStatus.APPROVED.value, window_start, *ids),
            )
            leave_rows = fetchall(cur)

        attendance_by_employee: dict[str, list[AttendanceRecord]] = {emp_id: [] for emp_id in ids}
        for r in attendance_rows:
            attendance_by_employee.setdefault(str(r["employee_id"]), []).append(
                AttendanceRecord(
                    check_in=r["check_in"],
                    status=AttendanceStatus.parse(r.get("status")),
                    overtime_hours=r.get("overtime_hours"),
                    work_hours=r.get("work_hours"),
                )
            )

        leave_by_employee: dict[str, list[LeaveRequest]] = {emp_id: [] for emp_id in ids}
        for r in leave_rows:
            leave_by_employee.setdefault(str(r["employee_id"]), []).append(
                LeaveRequest(status=LeaveStatus(r["status"]), end_date=r["end_date"])
            )

        return [
            EmployeeSnapshot(
                employee_id=str(r["id"]),
                first_name=r["first_name"],
                last_name=r["last_name"],
                department=optional_str(r.get("department_name")),
                status=EmployeeStatus(r["status"]),
                attendance=tuple(attendance_by_employee[str(r["id"])]),
                leave_requests=tuple(leave_by_employee[str(r["id"])]),
            )
            for r in employee_rows
        ]
