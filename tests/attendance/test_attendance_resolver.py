from __future__ import annotations

from datetime import date

import pytest

from src.task_dashboard.task_dashboard.attendance.calendar import working_days
from src.task_dashboard.task_dashboard.attendance.model import AttendanceEntry
from src.task_dashboard.task_dashboard.attendance.resolver import (
    attendance_percentage,
    resolve_metrics,
    summarize_entries,
)


def _mark(days, status, key="u1"):
    return {f"{key}_{d.key}": status for d in days}


def test_fifteen_present_five_absent_is_75_percent():
    days = working_days(2025, 1)[:20]
    attendance_map = {**_mark(days[:15], "present"), **_mark(days[15:], "absent")}

    metrics = resolve_metrics("u1", "", 1, 2025, attendance_map)

    assert metrics.present == 15
    assert metrics.absent == 5
    assert metrics.percentage == pytest.approx(75.0)


def test_all_off_month_is_zero_percent():
    attendance_map = _mark(working_days(2025, 2), "off")

    metrics = resolve_metrics("u1", "", 2, 2025, attendance_map)

    assert metrics.off == 24
    assert metrics.percentage == 0


def test_partial_credit_for_short_leave_and_half_day():
    days = working_days(2025, 1)
    attendance_map = {
        **_mark(days[:2], "present"),
        **_mark(days[2:3], "outdoor"),
        **_mark(days[3:4], "shortLeave"),
        **_mark(days[4:5], "halfDay"),
        **_mark(days[5:6], "off"),
    }

    metrics = resolve_metrics("u1", "", 1, 2025, attendance_map)

    # (2 + 1 + 0.8 + 0.5) / 5
    assert metrics.percentage == pytest.approx(86.0)
    assert (metrics.present, metrics.outdoor, metrics.short_leave, metrics.half_day, metrics.off) == (2, 1, 1, 1, 1)


def test_unmarked_days_and_non_working_days_count_nowhere():
    attendance_map = {
        "u1_2025-01-05": "absent",  # Sunday
        "u1_2025-01-01": "absent",  # New Year
        "u1_2025-01-02": "present",
        "u1_2025-01-03": "remote",  # unknown mark
    }

    metrics = resolve_metrics("u1", "", 1, 2025, attendance_map)

    assert metrics.present == 1
    assert metrics.absent == 0
    assert metrics.percentage == pytest.approx(100.0)


def test_email_key_used_when_id_key_missing():
    attendance_map = {"sara@example.com_2025-01-02": "absent", "u1_2025-01-03": "present"}

    metrics = resolve_metrics("u1", "Sara@Example.com", 1, 2025, attendance_map)

    assert (metrics.present, metrics.absent) == (1, 1)


def test_no_marks_at_all():
    metrics = resolve_metrics("u1", "sara@example.com", 1, 2025, {})
    assert metrics.percentage == 0
    assert metrics.to_dict()["halfDay"] == 0


def test_percentage_formula_guard():
    assert attendance_percentage({}) == 0
    assert attendance_percentage({"off": 3}) == 0


def test_summarize_entries_filters_range_and_last_entry_wins():
    entries = [
        AttendanceEntry(user_id="u1", user_email="", work_date=date(2025, 1, 2), status="absent"),
        AttendanceEntry(user_id="u1", user_email="", work_date=date(2025, 1, 2), status="present"),
        AttendanceEntry(user_id="u1", user_email="", work_date=date(2025, 1, 3), status="halfDay"),
        AttendanceEntry(user_id="u1", user_email="", work_date=date(2025, 2, 3), status="absent"),
    ]

    metrics = summarize_entries(entries, start=date(2025, 1, 1), end=date(2025, 1, 31))

    assert (metrics.present, metrics.half_day, metrics.absent) == (1, 1, 0)
    assert metrics.percentage == pytest.approx(75.0)
