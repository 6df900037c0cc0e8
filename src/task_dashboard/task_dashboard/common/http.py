from __future__ import annotations

from datetime import date
from typing import Optional

from flask import jsonify

from ..core.exceptions import ValidationError
from .datetime_utils import now_local, parse_iso_date
from .validators import require_year


def json_error(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def optional_date_arg(value: Optional[str], field_name: str) -> Optional[date]:
    text = (value or "").strip()
    if not text:
        return None
    try:
        return parse_iso_date(text)
    except ValueError:
        raise ValidationError(f"{field_name} must be YYYY-MM-DD")


def month_year_args(args) -> tuple[int, int]:
    """``month`` (1-12) and ``year`` query args, defaulting to the current month."""

    today = now_local().date()
    try:
        month = int(args.get("month") or today.month)
        year = int(args.get("year") or today.year)
    except ValueError:
        raise ValidationError("month and year must be numbers")
    if not 1 <= month <= 12:
        raise ValidationError("Month must be between 1 and 12")
    return month, require_year(year)
