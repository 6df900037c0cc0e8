"""Employee performance evaluation.

Pure functions over an already-fetched snapshot of tasks, attendance marks
and KPI entries. Nothing here does I/O or keeps state between calls, and no
input shape makes these functions raise: every ratio falls back to 0 when its
denominator is empty.

Weights: task closing 50, attendance 15, quality 20, KPI 15. The KPI average
is uncapped, so totals may exceed 100.
"""

from __future__ import annotations

import calendar
import logging
from datetime import date
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple

from ..attendance.model import AttendanceEntry
from ..attendance.resolver import resolve_metrics, summarize_entries
from ..common.numbers import average, coerce_number, round1
from ..core.constants import ATTENDANCE_WEIGHT, KPI_WEIGHT, QUALITY_WEIGHT, TASK_CLOSING_WEIGHT
from ..core.enums import CanonicalStatus, Role
from ..kpi.model import KpiEntry, month_index
from ..tasks.model import Task
from ..tasks.status import canonicalize
from ..users.model import Employee
from .grading import admin_grade, employee_grade, employee_remarks
from .model import ComponentScore, DateRange, EvaluationResult, SelfEvaluation

logger = logging.getLogger(__name__)


def weighted(raw: float, cap: float) -> float:
    return raw / 100 * cap


def tasks_for_employee(
    employee: Employee,
    tasks: Iterable[Task],
    date_range: Optional[DateRange] = None,
) -> List[Task]:
    """Tasks assigned to the employee, limited to the range when one is active.

    Range filtering uses the end date, else the start date; a task with
    neither is left out while a range is active.
    """

    out = []
    for task in tasks:
        if not employee.matches(task.assigned_to_id, task.assigned_email):
            continue
        if date_range is not None and date_range.is_active and not date_range.contains(task.comparison_date):
            continue
        out.append(task)
    return out


def completion_counts(tasks: Iterable[Task]) -> Tuple[int, int]:
    completed = delayed = 0
    for task in tasks:
        status = canonicalize(task.status)
        if status == CanonicalStatus.COMPLETED:
            completed += 1
        elif status == CanonicalStatus.DELAYED:
            delayed += 1
    return completed, delayed


def completion_percentage(completed: int, delayed: int) -> float:
    tracked = completed + delayed
    if tracked <= 0:
        return 0.0
    return completed / tracked * 100


def quality_average(tasks: Iterable[Task]) -> float:
    """Mean of locked quality marks; draft values never count."""

    return average(t.quality_mark.saved_value for t in tasks if t.quality_mark.is_locked)


def kpi_entries_for_employee(employee: Employee, entries: Iterable[KpiEntry]) -> List[KpiEntry]:
    return [e for e in entries if employee.matches(e.user_id, e.user_email)]


def kpi_average(entries: Iterable[KpiEntry]) -> float:
    return average(coerce_number(e.score, default=0.0) for e in entries)


def _components(completion: float, attendance_pct: float, quality: float, kpi: float):
    return (
        ComponentScore(weighted=weighted(completion, TASK_CLOSING_WEIGHT), raw=completion),
        ComponentScore(weighted=weighted(attendance_pct, ATTENDANCE_WEIGHT), raw=attendance_pct),
        ComponentScore(weighted=weighted(quality, QUALITY_WEIGHT), raw=quality),
        ComponentScore(weighted=weighted(kpi, KPI_WEIGHT), raw=kpi),
    )


def _kpi_in_range(entry: KpiEntry, date_range: Optional[DateRange]) -> bool:
    if date_range is None or not date_range.is_active:
        return True
    month = month_index(entry.month) + 1
    if month <= 0 or not date.min.year <= entry.year <= date.max.year:
        return False
    first = date(entry.year, month, 1)
    last = date(entry.year, month, calendar.monthrange(entry.year, month)[1])
    return date_range.overlaps(first, last)


def _empty_result(employee: Employee) -> EvaluationResult:
    zero = ComponentScore(weighted=0.0, raw=0.0)
    return EvaluationResult(
        employee_id=employee.employee_id,
        name=employee.display_name,
        email=employee.email,
        task_closing=zero,
        attendance=zero,
        quality=zero,
        kpi=zero,
        unrounded_total=0.0,
        total=0.0,
        grade=admin_grade(0.0),
    )


def evaluate(
    employee: Employee,
    tasks: Sequence[Task],
    attendance_map: Mapping[str, str],
    kpi_entries: Sequence[KpiEntry],
    *,
    month: int,
    year: int,
    date_range: Optional[DateRange] = None,
) -> EvaluationResult:
    """Admin-view evaluation of one employee.

    Attendance is resolved over the working days of ``month``/``year``
    (1-12); the date range only narrows the task set.
    """

    if not employee.has_identity:
        return _empty_result(employee)

    own_tasks = tasks_for_employee(employee, tasks, date_range)
    completed, delayed = completion_counts(own_tasks)
    completion = completion_percentage(completed, delayed)
    quality = quality_average(own_tasks)

    metrics = resolve_metrics(employee.employee_id, employee.email, month, year, attendance_map)
    kpi = kpi_average(kpi_entries_for_employee(employee, kpi_entries))

    task_closing, attendance, quality_score, kpi_score = _components(completion, metrics.percentage, quality, kpi)

    unrounded = task_closing.weighted + attendance.weighted + quality_score.weighted + kpi_score.weighted
    total = round1(unrounded)
    return EvaluationResult(
        employee_id=employee.employee_id,
        name=employee.display_name,
        email=employee.email,
        task_closing=task_closing,
        attendance=attendance,
        quality=quality_score,
        kpi=kpi_score,
        unrounded_total=unrounded,
        total=total,
        grade=admin_grade(total),
    )


def evaluate_all(
    employees: Iterable[Employee],
    tasks: Sequence[Task],
    attendance_map: Mapping[str, str],
    kpi_entries: Sequence[KpiEntry],
    *,
    month: int,
    year: int,
    date_range: Optional[DateRange] = None,
) -> List[EvaluationResult]:
    """Evaluate every identifiable employee, sorted by display name."""

    results = []
    for employee in employees:
        if employee.role != Role.EMPLOYEE:
            continue
        if not employee.has_identity:
            logger.warning("Skipping employee %r without id or email", employee.name)
            continue
        results.append(
            evaluate(
                employee,
                tasks,
                attendance_map,
                kpi_entries,
                month=month,
                year=year,
                date_range=date_range,
            )
        )
    results.sort(key=lambda r: r.name.lower())
    return results


def evaluate_self(
    employee: Employee,
    tasks: Sequence[Task],
    attendance_entries: Sequence[AttendanceEntry],
    kpi_entries: Sequence[KpiEntry],
    *,
    date_range: Optional[DateRange] = None,
) -> SelfEvaluation:
    """Employee self-view: same components, five-letter grade on the raw total.

    Attendance comes from the employee's own entries inside the range and
    KPI entries count when their month overlaps the range. Negative KPI
    scores are ignored here.
    """

    own_tasks = tasks_for_employee(employee, tasks, date_range)
    completed, delayed = completion_counts(own_tasks)
    completion = completion_percentage(completed, delayed)
    quality = quality_average(own_tasks)

    own_entries = [e for e in attendance_entries if employee.matches(e.user_id, e.user_email)]
    metrics = summarize_entries(
        own_entries,
        start=date_range.start if date_range else None,
        end=date_range.end if date_range else None,
    )

    own_kpis = [
        e
        for e in kpi_entries_for_employee(employee, kpi_entries)
        if _kpi_in_range(e, date_range) and coerce_number(e.score, default=-1.0) >= 0
    ]
    kpi = kpi_average(own_kpis)

    task_closing, attendance, quality_score, kpi_score = _components(completion, metrics.percentage, quality, kpi)

    unrounded = task_closing.weighted + attendance.weighted + quality_score.weighted + kpi_score.weighted
    grade = employee_grade(unrounded)
    return SelfEvaluation(
        employee_id=employee.employee_id,
        task_closing=task_closing,
        attendance=attendance,
        quality=quality_score,
        kpi=kpi_score,
        attendance_metrics=metrics,
        completed=completed,
        delayed=delayed,
        unrounded_total=unrounded,
        total=round1(unrounded),
        grade=grade,
        remarks=employee_remarks(grade),
    )
