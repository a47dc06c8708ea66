from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from src.hr_analytics.hr_analytics.burnout.metrics import Metrics, aggregate_metrics
from src.hr_analytics.hr_analytics.core.constants import NO_QUALIFYING_LEAVE_SENTINEL_DAYS
from src.hr_analytics.hr_analytics.core.enums import AttendanceStatus, LeaveStatus
from src.hr_analytics.hr_analytics.employees.model import AttendanceRecord, LeaveRequest

NOW = datetime(2026, 3, 1, 12, 0)


def _att(day: int, *, status=AttendanceStatus.PRESENT, overtime=None, work=None) -> AttendanceRecord:
    return AttendanceRecord(
        check_in=datetime(2026, 2, day, 8, 30),
        status=status,
        overtime_hours=overtime,
        work_hours=work,
    )


def test_no_data_means_sentinel_not_healthy():
    metrics = aggregate_metrics([], [], now=NOW)

    assert metrics == Metrics(
        avg_overtime_hours=0,
        total_work_hours=0,
        late_arrivals=0,
        days_since_last_leave=NO_QUALIFYING_LEAVE_SENTINEL_DAYS,
    )
    assert metrics.days_since_last_leave == 999


def test_overtime_is_averaged_per_attendance_record():
    attendance = [
        _att(2, overtime=Decimal("6.00"), work=Decimal("14.00")),
        _att(3, overtime=None, work=8),
        _att(4, overtime=3.0, work=None),
    ]

    metrics = aggregate_metrics(attendance, [], now=NOW)

    assert metrics.avg_overtime_hours == 3.0
    assert metrics.total_work_hours == 22.0
    assert isinstance(metrics.total_work_hours, float)


def test_counts_only_late_status():
    attendance = [
        _att(2, status=AttendanceStatus.LATE),
        _att(3, status=AttendanceStatus.LATE),
        _att(4, status=AttendanceStatus.PRESENT),
        _att(5, status=AttendanceStatus.UNKNOWN),
    ]

    assert aggregate_metrics(attendance, [], now=NOW).late_arrivals == 2


def test_days_since_last_leave_uses_first_request_and_floors():
    leave = [
        LeaveRequest(status=LeaveStatus.APPROVED, end_date=date(2026, 2, 19)),
        LeaveRequest(status=LeaveStatus.APPROVED, end_date=date(2026, 2, 5)),
    ]

    # 2026-02-19 00:00 -> 2026-03-01 12:00 is 10.5 days
    assert aggregate_metrics([], leave, now=NOW).days_since_last_leave == 10


def test_leave_ending_in_future_clamps_to_zero():
    leave = [LeaveRequest(status=LeaveStatus.APPROVED, end_date=date(2026, 3, 4))]

    assert aggregate_metrics([], leave, now=NOW).days_since_last_leave == 0


def test_unapproved_leave_does_not_count():
    leave = [LeaveRequest(status=LeaveStatus.PENDING, end_date=date(2026, 2, 27))]

    assert aggregate_metrics([], leave, now=NOW).days_since_last_leave == NO_QUALIFYING_LEAVE_SENTINEL_DAYS


def test_metrics_to_dict_uses_report_keys():
    metrics = Metrics(avg_overtime_hours=1.5, total_work_hours=40.0, late_arrivals=1, days_since_last_leave=12)

    assert metrics.to_dict() == {
        "avgOvertimeHours": 1.5,
        "daysSinceLastLeave": 12,
        "lateArrivals": 1,
        "totalWorkHours": 40.0,
    }
