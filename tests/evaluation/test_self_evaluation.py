from __future__ import annotations

from datetime import date

import pytest

from src.task_dashboard.task_dashboard.attendance.model import AttendanceEntry
from src.task_dashboard.task_dashboard.core.enums import EmployeeGrade
from src.task_dashboard.task_dashboard.evaluation.aggregator import evaluate_self
from src.task_dashboard.task_dashboard.evaluation.model import DateRange
from src.task_dashboard.task_dashboard.kpi.model import KpiEntry
from src.task_dashboard.task_dashboard.tasks.model import QualityMark, Task

JANUARY = DateRange(start=date(2025, 1, 1), end=date(2025, 1, 31))


def _entry(day, status, user_id="u1", month=1):
    return AttendanceEntry(user_id=user_id, user_email="", work_date=date(2025, month, day), status=status)


def _kpi(month, score, year=2025):
    return KpiEntry(user_id="u1", user_email="sara@example.com", month=month, year=year, score=score)


def test_self_view_uses_range_filtered_inputs(sara):
    tasks = [
        Task(task_id="t1", status="completed", assigned_to_id="u1", quality_mark=QualityMark.locked(100), end_date=date(2025, 1, 20)),
        Task(task_id="t2", status="delayed", assigned_to_id="u1", end_date=date(2025, 2, 20)),
    ]
    entries = [
        _entry(2, "present"),
        _entry(3, "present"),
        _entry(6, "present"),
        _entry(7, "absent"),
        _entry(3, "absent", month=2),
        _entry(8, "absent", user_id="u2"),
    ]
    kpis = [_kpi("January", 100), _kpi("February", 50), _kpi("January", -5, year=2024)]

    result = evaluate_self(sara, tasks, entries, kpis, date_range=JANUARY)

    assert (result.completed, result.delayed) == (1, 0)
    assert result.attendance.raw == pytest.approx(75.0)
    assert result.kpi.raw == pytest.approx(100.0)
    assert result.unrounded_total == pytest.approx(96.25)
    assert result.total == 96.3
    assert result.grade == EmployeeGrade.A
    assert result.remarks == ""


def test_negative_kpi_scores_are_ignored_without_range(sara):
    result = evaluate_self(sara, [], [], [_kpi("January", 80), _kpi("February", -20)])
    assert result.kpi.raw == pytest.approx(80.0)


def test_grade_uses_unrounded_total(sara):
    tasks = [Task(task_id="t1", status="completed", assigned_to_id="u1", quality_mark=QualityMark.locked(74.8))]

    result = evaluate_self(sara, tasks, [_entry(2, "present")], [])

    # 79.96 sits in the gap between D and C even though it displays as 80.0
    assert result.total == 80.0
    assert result.grade == EmployeeGrade.F
    assert result.remarks == "need improvement"


def test_empty_self_view(sara):
    result = evaluate_self(sara, [], [], [], date_range=JANUARY)
    data = result.to_dict()

    assert data["totalScore"] == 0
    assert data["grade"] == "F"
    assert data["remarks"] == "need improvement"
    assert data["closingDenominator"] == 0
    assert data["attendanceCounts"]["present"] == 0


def test_kpi_with_year_outside_calendar_is_out_of_range(sara):
    kpis = [_kpi("January", 80), _kpi("January", 100, year=20255), _kpi("January", 100, year=0)]

    result = evaluate_self(sara, [], [], kpis, date_range=JANUARY)

    assert result.kpi.raw == pytest.approx(80.0)
