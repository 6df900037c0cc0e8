from __future__ import annotations

import calendar
import logging
from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from ..attendance.model import AttendanceMetrics
from ..attendance.normalizer import build_attendance_map
from ..attendance.repository import AttendanceRepository
from ..attendance.resolver import resolve_metrics
from ..common.validators import require_year
from ..core.enums import Role
from ..core.exceptions import NotFoundError, ValidationError
from ..kpi.repository import KpiRepository
from ..tasks.repository import TaskRepository
from ..users.repository import EmployeeRepository
from .aggregator import evaluate_all, evaluate_self
from .model import DateRange, EvaluationResult, SelfEvaluation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttendanceSummaryRow:
    employee_id: str
    name: str
    metrics: AttendanceMetrics

    def to_dict(self) -> dict:
        return {"uid": self.employee_id, "name": self.name, **self.metrics.to_dict()}


def month_bounds(month: int, year: int) -> tuple[date, date]:
    if not 1 <= int(month) <= 12:
        raise ValidationError("Month must be between 1 and 12")
    year = require_year(year)
    _, last = calendar.monthrange(year, int(month))
    return date(year, int(month), 1), date(year, int(month), last)


class EvaluationService:
    """Loads a fresh snapshot from the repositories and runs the evaluation on it."""

    def __init__(
        self,
        employees: EmployeeRepository,
        tasks: TaskRepository,
        attendance: AttendanceRepository,
        kpis: KpiRepository,
    ):
        self._employees = employees
        self._tasks = tasks
        self._attendance = attendance
        self._kpis = kpis

    def _attendance_map(self, month: int, year: int):
        start, end = month_bounds(month, year)
        return build_attendance_map(self._attendance.list_between(start_date=start, end_date=end))

    def evaluate_month(
        self,
        *,
        month: int,
        year: int,
        date_range: Optional[DateRange] = None,
    ) -> List[EvaluationResult]:
        employees = self._employees.list_all()
        results = evaluate_all(
            employees,
            self._tasks.list_all(),
            self._attendance_map(month, year),
            self._kpis.list_all(),
            month=month,
            year=year,
            date_range=date_range,
        )
        logger.debug("Evaluated %d of %d users for %02d/%d", len(results), len(employees), month, year)
        return results

    def evaluate_self(self, employee_id: str, *, date_range: Optional[DateRange] = None) -> SelfEvaluation:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")

        entries = self._attendance.list_for_user(
            user_id=employee.employee_id,
            user_email=employee.email,
            start_date=date_range.start if date_range else None,
            end_date=date_range.end if date_range else None,
        )
        return evaluate_self(
            employee,
            self._tasks.list_all(),
            entries,
            self._kpis.list_for_user(user_id=employee.employee_id, user_email=employee.email),
            date_range=date_range,
        )

    def attendance_summary(self, *, month: int, year: int) -> List[AttendanceSummaryRow]:
        attendance_map = self._attendance_map(month, year)
        rows = []
        for employee in self._employees.list_all():
            if employee.role != Role.EMPLOYEE or not employee.has_identity:
                continue
            metrics = resolve_metrics(employee.employee_id, employee.email, month, year, attendance_map)
            rows.append(AttendanceSummaryRow(employee_id=employee.employee_id, name=employee.display_name, metrics=metrics))
        return rows
