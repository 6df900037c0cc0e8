from datetime import date

import pytest

from src.task_dashboard.task_dashboard.attendance.model import AttendanceEntry
from src.task_dashboard.task_dashboard.attendance.normalizer import (
    attendance_key_variants,
    build_attendance_map,
    entries_from_documents,
    entry_from_document,
    identifiers_from_doc_id,
    normalize_attendance_status,
    resolve_status,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("present", "present"),
        ("halfDay", "halfDay"),
        ("HALFDAY", "halfDay"),
        ("Half-Day", "halfDay"),
        ("short leave", "shortLeave"),
        ("P", "present"),
        ("on site", "outdoor"),
        ("Sick", "absent"),
        ("weekend", "off"),
        ("", ""),
        (None, ""),
        ("Remote", "remote"),
    ],
)
def test_normalize_attendance_status(raw, expected):
    assert normalize_attendance_status(raw) == expected


def test_identifiers_from_doc_id():
    assert identifiers_from_doc_id("u1_2025-01-02") == ("u1", "2025-01-02")
    assert identifiers_from_doc_id("2025-01-02_u1") == ("u1", "2025-01-02")
    assert identifiers_from_doc_id("random") == ("", "")


def test_entry_uses_candidate_priority():
    entry = entry_from_document(
        "doc",
        {
            "date": "",
            "attendanceDate": "2025-01-03",
            "day": "2025-01-04",
            "uid": "u1",
            "employeeId": "other",
            "employeeEmail": "Sara@Example.com",
            "attendanceStatus": "present",
        },
    )

    assert entry.work_date == date(2025, 1, 3)
    assert entry.user_id == "u1"
    assert entry.user_email == "Sara@Example.com"
    assert entry.status == "present"


def test_entry_falls_back_to_doc_id_and_email():
    from_id = entry_from_document("u9_2025-01-06", {"status": "absent"})
    assert from_id.user_id == "u9" and from_id.work_date == date(2025, 1, 6)

    from_email = entry_from_document("x", {"email": "Sara@Example.com", "date": "2025-01-06", "status": "off"})
    assert from_email.user_id == "sara@example.com"


def test_entries_without_status_or_date_are_dropped():
    entries = entries_from_documents(
        [
            ("a", {"userId": "u1", "date": "2025-01-02"}),
            ("b", {"userId": "u1", "status": "present"}),
            ("c", {"userId": "u1", "date": "2025-01-02", "status": "present"}),
        ]
    )
    assert [e.entry_id for e in entries] == ["c"]


def test_key_variants_id_first_then_email():
    assert attendance_key_variants("u1", " Sara@Example.com", date(2025, 1, 2)) == [
        "u1_2025-01-02",
        "sara@example.com_2025-01-02",
    ]
    assert attendance_key_variants("", "", "2025-01-02") == []
    assert attendance_key_variants("u1", "", None) == []


def test_resolve_status_prefers_id_key():
    attendance_map = {
        "u1_2025-01-02": "present",
        "sara@example.com_2025-01-02": "absent",
        "sara@example.com_2025-01-03": "halfDay",
    }
    assert resolve_status(attendance_map, "u1", "sara@example.com", date(2025, 1, 2)) == "present"
    assert resolve_status(attendance_map, "u1", "SARA@example.com", date(2025, 1, 3)) == "halfDay"
    assert resolve_status(attendance_map, "u1", "", date(2025, 1, 3)) is None


def test_build_map_indexes_every_variant():
    entry = AttendanceEntry(user_id="u1", user_email="Sara@Example.com", work_date=date(2025, 1, 2), status="outdoor")
    assert build_attendance_map([entry]) == {
        "u1_2025-01-02": "outdoor",
        "sara@example.com_2025-01-02": "outdoor",
    }
