from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .database.connection import DBConfig, DatabaseConnection
from .evaluation.service import EvaluationService
from .kpi.mysql_kpi_repository import MySQLKpiRepository
from .kpi.repository import KpiRepository
from .kpi.service import KpiService
from .tasks.mysql_task_repository import MySQLTaskRepository
from .tasks.repository import TaskRepository
from .tasks.service import QualityMarkService
from .users.mysql_employee_repository import MySQLEmployeeRepository
from .users.repository import EmployeeRepository


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeRepository
    tasks_repo: TaskRepository
    attendance_repo: AttendanceRepository
    kpi_repo: KpiRepository

    evaluation_service: EvaluationService
    quality_mark_service: QualityMarkService
    kpi_service: KpiService


def build_services(
    *,
    employees_repo: EmployeeRepository,
    tasks_repo: TaskRepository,
    attendance_repo: AttendanceRepository,
    kpi_repo: KpiRepository,
) -> Container:
    return Container(
        employees_repo=employees_repo,
        tasks_repo=tasks_repo,
        attendance_repo=attendance_repo,
        kpi_repo=kpi_repo,
        evaluation_service=EvaluationService(employees_repo, tasks_repo, attendance_repo, kpi_repo),
        quality_mark_service=QualityMarkService(tasks_repo),
        kpi_service=KpiService(kpi_repo),
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return build_services(
        employees_repo=MySQLEmployeeRepository(conn),
        tasks_repo=MySQLTaskRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        kpi_repo=MySQLKpiRepository(conn),
    )
