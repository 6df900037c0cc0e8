"""Letter grades.

The admin dashboard and the employee self-view grade on different scales.
Each scale is its own function; they are not meant to share thresholds.
"""

from __future__ import annotations

from ..core.constants import NEEDS_IMPROVEMENT_REMARK
from ..core.enums import AdminGrade, EmployeeGrade


def admin_grade(total: float) -> AdminGrade:
    """A above 90 (totals past 100 included), B from 81 to 90, C below."""

    if total > 90:
        return AdminGrade.A
    if total >= 81:
        return AdminGrade.B
    return AdminGrade.C


def employee_grade(score: float) -> EmployeeGrade:
    """A >90, B 85-90, C 80-84, D 70-79, F otherwise.

    Scores between the listed bands (e.g. 84.5) fall through to F.
    """

    if score > 90:
        return EmployeeGrade.A
    if 85 <= score <= 90:
        return EmployeeGrade.B
    if 80 <= score <= 84:
        return EmployeeGrade.C
    if 70 <= score <= 79:
        return EmployeeGrade.D
    return EmployeeGrade.F


def employee_remarks(grade: EmployeeGrade) -> str:
    return NEEDS_IMPROVEMENT_REMARK if grade == EmployeeGrade.F else ""
