from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..core.constants import KPI_MONTHS

_MONTH_LOOKUP = {name.lower(): name for name in KPI_MONTHS}


def normalize_month(value: Any) -> Optional[str]:
    """Month name in canonical case; accepts names (any case) or 1-12."""

    if isinstance(value, int) and not isinstance(value, bool):
        return KPI_MONTHS[value - 1] if 1 <= value <= 12 else None
    text = str(value or "").strip()
    if text.isdigit():
        return normalize_month(int(text))
    return _MONTH_LOOKUP.get(text.lower())


def month_index(name: str) -> int:
    """0-based month position, -1 for unknown names."""
    month = normalize_month(name)
    return KPI_MONTHS.index(month) if month else -1


@dataclass(frozen=True)
class KpiEntry:
    """Domain entity: a monthly KPI score. Scores start at 0 and are uncapped."""

    user_id: str
    user_email: str
    month: str
    year: int
    score: float
    entry_id: str = ""
