"""Reduce one employee's window of attendance and leave into scoring metrics."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import whole_days_between
from ..core.constants import NO_QUALIFYING_LEAVE_SENTINEL_DAYS
from ..core.enums import AttendanceStatus, LeaveStatus
from ..employees.model import AttendanceRecord, Hours, LeaveRequest


@dataclass(frozen=True)
class Metrics:
    """Per-employee metrics for one window.

    ``days_since_last_leave`` equals ``NO_QUALIFYING_LEAVE_SENTINEL_DAYS`` when no
    approved leave ended inside the window; treat it as "exceeds every threshold",
    not as a real day count.
    """

    avg_overtime_hours: float
    total_work_hours: float
    late_arrivals: int
    days_since_last_leave: int

    def to_dict(self) -> dict:
        return {
            "avgOvertimeHours": self.avg_overtime_hours,
            "daysSinceLastLeave": self.days_since_last_leave,
            "lateArrivals": self.late_arrivals,
            "totalWorkHours": self.total_work_hours,
        }


def _hours(value: Optional[Hours]) -> float:
    return float(value) if value else 0.0


def _sum_hours(values: Iterable[Optional[Hours]]) -> float:
    return sum((_hours(v) for v in values), 0.0)


def days_since_last_leave(leave_requests: Sequence[LeaveRequest], *, now: datetime) -> int:
    # Requests arrive most recent first.
    approved = [r for r in leave_requests if r.status == LeaveStatus.APPROVED]
    if not approved:
        return NO_QUALIFYING_LEAVE_SENTINEL_DAYS
    return max(0, whole_days_between(approved[0].end_date, now))


def aggregate_metrics(
    attendance: Sequence[AttendanceRecord],
    leave_requests: Sequence[LeaveRequest],
    *,
    now: datetime,
) -> Metrics:
    """Aggregate one employee's window into ``Metrics``.

    Overtime is averaged per attendance record, not per calendar day of the window.
    """
    total_overtime = _sum_hours(r.overtime_hours for r in attendance)
    avg_overtime = total_overtime / len(attendance) if attendance else 0.0

    return Metrics(
        avg_overtime_hours=avg_overtime,
        total_work_hours=_sum_hours(r.work_hours for r in attendance),
        late_arrivals=sum(1 for r in attendance if r.status == AttendanceStatus.LATE),
        days_since_last_leave=days_since_last_leave(leave_requests, now=now),
    )
