from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..attendance.model import AttendanceMetrics
from ..core.enums import AdminGrade, EmployeeGrade


@dataclass(frozen=True)
class DateRange:
    """Inclusive date range; either bound may be open."""

    start: Optional[date] = None
    end: Optional[date] = None

    @property
    def is_active(self) -> bool:
        return self.start is not None or self.end is not None

    def contains(self, value: Optional[date]) -> bool:
        if value is None:
            return False
        if self.start and value < self.start:
            return False
        if self.end and value > self.end:
            return False
        return True

    def overlaps(self, first: date, last: date) -> bool:
        if self.start and last < self.start:
            return False
        if self.end and first > self.end:
            return False
        return True


@dataclass(frozen=True)
class ComponentScore:
    """One weighted part of the evaluation and the raw value behind it."""

    weighted: float
    raw: float


@dataclass(frozen=True)
class EvaluationResult:
    employee_id: str
    name: str
    email: str
    task_closing: ComponentScore
    attendance: ComponentScore
    quality: ComponentScore
    kpi: ComponentScore
    unrounded_total: float
    total: float
    grade: AdminGrade

    def to_dict(self) -> dict:
        return {
            "id": self.employee_id,
            "name": self.name,
            "email": self.email,
            "taskClosing": {"weighted": self.task_closing.weighted, "raw": self.task_closing.raw},
            "attendance": {"weighted": self.attendance.weighted, "percentage": self.attendance.raw},
            "quality": {"weighted": self.quality.weighted, "raw": self.quality.raw},
            "kpi": {"weighted": self.kpi.weighted, "raw": self.kpi.raw},
            "total": self.total,
            "grade": self.grade.value,
        }


@dataclass(frozen=True)
class SelfEvaluation:
    """Employee's own view of the evaluation, graded on the five-letter scale."""

    employee_id: str
    task_closing: ComponentScore
    attendance: ComponentScore
    quality: ComponentScore
    kpi: ComponentScore
    attendance_metrics: AttendanceMetrics
    completed: int
    delayed: int
    unrounded_total: float
    total: float
    grade: EmployeeGrade
    remarks: str = ""

    def to_dict(self) -> dict:
        return {
            "id": self.employee_id,
            "completionRate": self.task_closing.raw,
            "taskClosingScore": self.task_closing.weighted,
            "attendancePercentage": self.attendance.raw,
            "attendanceScore": self.attendance.weighted,
            "qualityAverage": self.quality.raw,
            "qualityScore": self.quality.weighted,
            "kpiAverage": self.kpi.raw,
            "kpiScore": self.kpi.weighted,
            "attendanceCounts": self.attendance_metrics.to_dict(),
            "closingDenominator": self.completed + self.delayed,
            "totalScore": self.total,
            "grade": self.grade.value,
            "remarks": self.remarks,
        }
