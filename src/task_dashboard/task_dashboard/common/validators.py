from __future__ import annotations

from typing import Any

from ..core.constants import YEAR_MAX, YEAR_MIN
from ..core.exceptions import ValidationError
from .numbers import coerce_number


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_number_in_range(value: Any, field_name: str, low: float, high: float) -> float:
    number = coerce_number(value, default=float("nan"))
    if number != number or number < low or number > high:
        raise ValidationError(f"Please enter a valid {field_name} between {low:g} and {high:g}")
    return number


def require_non_negative(value: Any, field_name: str) -> float:
    number = coerce_number(value, default=float("nan"))
    if number != number or number < 0:
        raise ValidationError(f"{field_name} must be a number of 0 or more")
    return number


def require_year(value: Any, field_name: str = "Year") -> int:
    try:
        year = int(str(value).strip())
    except ValueError:
        raise ValidationError(f"{field_name} is invalid")
    if not YEAR_MIN <= year <= YEAR_MAX:
        raise ValidationError(f"{field_name} must be between {YEAR_MIN} and {YEAR_MAX}")
    return year
