from __future__ import annotations

from typing import Any, Mapping

from ..common.field_candidates import fields, first_present
from ..common.numbers import coerce_number
from .model import KpiEntry, normalize_month

USER_ID_FIELDS = fields("userId", "uid")
EMAIL_FIELDS = fields("userEmail", "email")


def kpi_from_document(entry_id: str, doc: Mapping[str, Any]) -> KpiEntry:
    """Build a :class:`KpiEntry`; an unreadable score is kept as 0."""

    year = coerce_number(doc.get("year"), default=0)
    return KpiEntry(
        entry_id=str(entry_id),
        user_id=str(first_present(doc, USER_ID_FIELDS) or ""),
        user_email=str(first_present(doc, EMAIL_FIELDS) or "").strip(),
        month=normalize_month(doc.get("month")) or str(doc.get("month") or ""),
        year=int(year),
        score=coerce_number(doc.get("score"), default=0.0),
    )
