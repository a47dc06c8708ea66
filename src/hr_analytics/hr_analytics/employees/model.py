from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Optional, Union

from ..core.constants import UNASSIGNED_DEPARTMENT
from ..core.enums import AttendanceStatus, EmployeeStatus, LeaveStatus

Hours = Union[Decimal, float, int]


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance day inside the report window.

    Hour columns are nullable upstream; ``None`` means 0.
    """

    check_in: datetime
    status: AttendanceStatus
    overtime_hours: Optional[Hours] = None
    work_hours: Optional[Hours] = None


@dataclass(frozen=True)
class LeaveRequest:
    status: LeaveStatus
    end_date: date


@dataclass(frozen=True)
class EmployeeSnapshot:
    """An employee together with the attendance and leave data of one window.

    ``leave_requests`` is ordered by ``end_date`` descending (most recent first).
    """

    employee_id: str
    first_name: str
    last_name: str
    department: Optional[str]
    status: EmployeeStatus
    attendance: tuple[AttendanceRecord, ...] = field(default_factory=tuple)
    leave_requests: tuple[LeaveRequest, ...] = field(default_factory=tuple)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def department_name(self) -> str:
        return self.department or UNASSIGNED_DEPARTMENT
