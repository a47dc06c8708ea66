from __future__ import annotations

from dataclasses import dataclass

from .burnout.service import BurnoutReportService
from .core.constants import MAX_REPORT_PERIOD_DAYS
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeWindowRepository


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeWindowRepository

    burnout_report_service: BurnoutReportService


def build_container_from_repository(
    employees_repo: EmployeeWindowRepository,
    *,
    max_workers: int = 1,
    max_period_days: int = MAX_REPORT_PERIOD_DAYS,
) -> Container:
    burnout_report_service = BurnoutReportService(
        employees_repo,
        max_workers=max_workers,
        max_period_days=max_period_days,
    )
    return Container(employees_repo=employees_repo, burnout_report_service=burnout_report_service)


def build_container(
    *,
    db_config: dict,
    max_workers: int = 1,
    max_period_days: int = MAX_REPORT_PERIOD_DAYS,
) -> Container:
    conn = DatabaseConnection(DBConfig.from_mapping(db_config))
    employees_repo = MySQLEmployeeRepository(conn)

    return build_container_from_repository(
        employees_repo,
        max_workers=max_workers,
        max_period_days=max_period_days,
    )
