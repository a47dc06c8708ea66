from __future__ import annotations

import logging
import time
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import now_local, window_start
from ..common.validators import require_period_days
from ..core.constants import DEFAULT_REPORT_PERIOD_DAYS, MAX_REPORT_PERIOD_DAYS
from ..core.enums import RiskLevel
from ..core.exceptions import ReportComputationError
from ..employees.model import EmployeeSnapshot
from ..employees.repository import EmployeeWindowRepository
from .metrics import aggregate_metrics
from .model import BurnoutReport, CohortSummary, RiskProfile
from .scorer.base import RiskScorer
from .scorer.standard_scorer import StandardRiskScorer

logger = logging.getLogger(__name__)


def build_risk_profile(employee: EmployeeSnapshot, *, scorer: RiskScorer, now: datetime) -> RiskProfile:
    metrics = aggregate_metrics(employee.attendance, employee.leave_requests, now=now)
    assessment = scorer.score(metrics)
    return RiskProfile(
        employee_id=employee.employee_id,
        employee_name=employee.full_name,
        department=employee.department_name,
        risk_score=assessment.risk_score,
        risk_level=assessment.risk_level,
        flags=assessment.flags,
        metrics=metrics,
    )


def rank_profiles(profiles: Sequence[RiskProfile]) -> list[RiskProfile]:
    """Highest score first; equal scores keep their input order."""
    return sorted(profiles, key=lambda p: p.risk_score, reverse=True)


def summarize_cohort(profiles: Sequence[RiskProfile]) -> CohortSummary:
    counts = Counter(p.risk_level for p in profiles)
    total = len(profiles)
    avg = sum(p.risk_score for p in profiles) / total if total else 0.0
    return CohortSummary(
        total_employees=total,
        critical_risk=counts[RiskLevel.CRITICAL],
        high_risk=counts[RiskLevel.HIGH],
        medium_risk=counts[RiskLevel.MEDIUM],
        low_risk=counts[RiskLevel.LOW],
        avg_risk_score=avg,
    )


class BurnoutReportService:
    def __init__(
        self,
        employees: EmployeeWindowRepository,
        *,
        scorer: Optional[RiskScorer] = None,
        max_workers: int = 1,
        max_period_days: int = MAX_REPORT_PERIOD_DAYS,
        clock: Callable[[], datetime] = now_local,
    ):
        self._employees = employees
        self._scorer = scorer or StandardRiskScorer()
        self._max_workers = max(1, int(max_workers))
        self._max_period_days = int(max_period_days)
        self._clock = clock

    def _score_all(self, employees: Sequence[EmployeeSnapshot], *, now: datetime) -> list[RiskProfile]:
        def build(employee: EmployeeSnapshot) -> RiskProfile:
            return build_risk_profile(employee, scorer=self._scorer, now=now)

        if self._max_workers == 1 or len(employees) < 2:
            return [build(e) for e in employees]

        # map() yields in submission order, so the stable sort sees the same sequence.
        with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
            return list(pool.map(build, employees))

    def compute_burnout_report(self, period_days: int = DEFAULT_REPORT_PERIOD_DAYS) -> BurnoutReport:
        period_days = require_period_days(period_days, max_days=self._max_period_days)

        started = time.perf_counter()
        try:
            now = self._clock()
            employees = self._employees.fetch_active_employees_with_window_data(
                window_start=window_start(now, period_days)
            )
            profiles = rank_profiles(self._score_all(employees, now=now))
            summary = summarize_cohort(profiles)
        except Exception as e:
            logger.exception("Error calculating burnout analytics", extra={"period_days": period_days})
            raise ReportComputationError() from e

        for p in profiles:
            logger.debug(
                "burnout score %s=%d (%s)",
                p.employee_id,
                p.risk_score,
                p.risk_level.value,
                extra={"employee_id": p.employee_id},
            )

        duration_ms = round((time.perf_counter() - started) * 1000, 1)
        logger.info(
            "Burnout report: period=%dd employees=%d critical=%d high=%d avg=%.1f",
            period_days,
            summary.total_employees,
            summary.critical_risk,
            summary.high_risk,
            summary.avg_risk_score,
            extra={"period_days": period_days, "duration_ms": duration_ms},
        )
        return BurnoutReport(summary=summary, employees=tuple(profiles), period=period_days)
