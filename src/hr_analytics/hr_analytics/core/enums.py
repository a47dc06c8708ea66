from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles used for access control."""

    ADMIN = "admin"
    HR = "hr"
    STAFF = "staff"


PRIVILEGED_ROLES = frozenset({Role.ADMIN, Role.HR})


class EmployeeStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    TERMINATED = "terminated"


class AttendanceStatus(str, Enum):
    """Attendance status as stored by the attendance subsystem."""

    PRESENT = "present"
    LATE = "late"
    ABSENT = "absent"
    HALF_DAY = "half_day"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: object) -> "AttendanceStatus":
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.UNKNOWN


class LeaveStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    CANCELLED = "cancelled"


class RiskLevel(str, Enum):
    """Ordered burnout risk tiers."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"
