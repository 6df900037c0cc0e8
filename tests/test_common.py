from __future__ import annotations

from datetime import date, datetime

import pytest

from src.task_dashboard.task_dashboard.common.datetime_utils import to_date, to_date_key
from src.task_dashboard.task_dashboard.common.field_candidates import fields, first_present
from src.task_dashboard.task_dashboard.common.numbers import average, coerce_number, round1, round_half_up
from src.task_dashboard.task_dashboard.common.validators import require_number_in_range, require_year
from src.task_dashboard.task_dashboard.core.exceptions import ValidationError


def test_first_present_skips_empty_values():
    candidates = fields("userId", "uid", "employeeId")
    assert first_present({"userId": "", "uid": "  ", "employeeId": "e1"}, candidates) == "e1"
    assert first_present({"userId": "u1", "uid": "u2"}, candidates) == "u1"
    assert first_present({"userId": 0}, candidates) is None
    assert first_present({}, candidates) is None


@pytest.mark.parametrize(
    "value, expected",
    [
        (date(2025, 1, 2), date(2025, 1, 2)),
        (datetime(2025, 1, 2, 23, 59), date(2025, 1, 2)),
        ("2025-01-02", date(2025, 1, 2)),
        ("2025-01-02T10:00:00Z", date(2025, 1, 2)),
        ({"seconds": 1735776000}, date(2025, 1, 2)),
        ({"_seconds": 1735776000}, date(2025, 1, 2)),
        ("yesterday", None),
        ("", None),
        (12, None),
    ],
)
def test_to_date(value, expected):
    assert to_date(value) == expected


def test_to_date_key():
    assert to_date_key("2025-01-02T10:00:00Z") == "2025-01-02"
    assert to_date_key(None) == ""


def test_numbers():
    assert round_half_up(2.5) == 3
    assert round_half_up(-2.5) == -2
    assert round_half_up(float("nan")) == 0
    assert average([]) == 0
    assert average([1, 2]) == 1.5
    assert coerce_number(" 12.5 ") == 12.5
    assert coerce_number(True, default=-1) == -1
    assert coerce_number("inf", default=0) == 0


def test_require_number_in_range_message():
    with pytest.raises(ValidationError) as exc:
        require_number_in_range("150", "mark", 0, 100)
    assert str(exc.value) == "Please enter a valid mark between 0 and 100"
    assert require_number_in_range("0", "mark", 0, 100) == 0


@pytest.mark.parametrize("value", [1.7e308, -1.7e308, 5e307])
def test_round1_keeps_huge_values(value):
    assert round1(value) == value
    assert round1(round1(value)) == round1(value)


def test_require_year():
    assert require_year(" 2025 ") == 2025
    for bad in ("20255", "0", "soon"):
        with pytest.raises(ValidationError):
            require_year(bad)
