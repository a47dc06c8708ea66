from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import RiskLevel
from .metrics import Metrics


@dataclass(frozen=True)
class RiskProfile:
    """Report row for one employee (computed, returned, discarded)."""

    employee_id: str
    employee_name: str
    department: str
    risk_score: int
    risk_level: RiskLevel
    flags: tuple[str, ...]
    metrics: Metrics

    def to_dict(self) -> dict:
        return {
            "employeeId": self.employee_id,
            "employeeName": self.employee_name,
            "department": self.department,
            "riskScore": self.risk_score,
            "riskLevel": self.risk_level.value,
            "flags": list(self.flags),
            "metrics": self.metrics.to_dict(),
        }


@dataclass(frozen=True)
class CohortSummary:
    total_employees: int
    critical_risk: int
    high_risk: int
    medium_risk: int
    low_risk: int
    avg_risk_score: float

    def to_dict(self) -> dict:
        return {
            "totalEmployees": self.total_employees,
            "criticalRisk": self.critical_risk,
            "highRisk": self.high_risk,
            "mediumRisk": self.medium_risk,
            "lowRisk": self.low_risk,
            "avgRiskScore": self.avg_risk_score,
        }


@dataclass(frozen=True)
class BurnoutReport:
    summary: CohortSummary
    employees: tuple[RiskProfile, ...]
    period: int

    @property
    def at_risk_employees(self) -> tuple[RiskProfile, ...]:
        """High and Critical profiles, in report order."""
        return tuple(p for p in self.employees if p.risk_level in (RiskLevel.CRITICAL, RiskLevel.HIGH))

    def to_dict(self) -> dict:
        return {
            "summary": self.summary.to_dict(),
            "employees": [p.to_dict() for p in self.employees],
            "period": self.period,
        }
