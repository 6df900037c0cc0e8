from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List

from ..common.numbers import average, round_half_up
from ..common.validators import require_non_empty, require_non_negative, require_year
from ..core.exceptions import DuplicateKpiEntryError, ValidationError
from .model import KpiEntry, month_index, normalize_month
from .repository import KpiRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KpiHistory:
    entries: List[KpiEntry]
    average: float


class KpiService:
    def __init__(self, kpis: KpiRepository):
        self._kpis = kpis

    def record_score(self, *, user_id: str, user_email: str, month: Any, year: Any, score: Any) -> KpiEntry:
        """Record one monthly score. A second score for the same month is rejected."""

        user_id = require_non_empty(user_id, "Employee")
        month_name = normalize_month(month)
        if not month_name:
            raise ValidationError("Month is invalid")
        year_value = require_year(year)
        score_value = require_non_negative(score, "KPI score")

        if self._kpis.find(user_id=user_id, month=month_name, year=year_value):
            raise DuplicateKpiEntryError(f"KPI score for {month_name} {year_value} already exists")

        email = (user_email or "").strip()
        entry_id = self._kpis.create(
            user_id=user_id,
            user_email=email,
            month=month_name,
            year=year_value,
            score=score_value,
        )
        logger.info("Recorded KPI %s %s for %s: %.2f", month_name, year_value, user_id, score_value)
        return KpiEntry(
            entry_id=entry_id,
            user_id=user_id,
            user_email=email,
            month=month_name,
            year=year_value,
            score=score_value,
        )

    def history(self, *, user_id: str, user_email: str = "") -> KpiHistory:
        """Entries newest first, with the average rounded to a whole number."""

        entries = sorted(
            self._kpis.list_for_user(user_id=user_id, user_email=user_email),
            key=lambda e: (e.year, month_index(e.month)),
            reverse=True,
        )
        avg = average(e.score for e in entries)
        return KpiHistory(entries=entries, average=round_half_up(avg))
