from __future__ import annotations

from typing import Any, Mapping

from ..common.datetime_utils import to_date
from ..common.field_candidates import fields, first_present
from ..common.numbers import is_number
from .model import QualityMark, Task

STATUS_FIELDS = fields("status", "actualStatus")
ASSIGNED_ID_FIELDS = fields("assignedTo", "assignedToId", "assignedUid")
ASSIGNED_EMAIL_FIELDS = fields("assignedEmail", "assignedToEmail")


def quality_mark_from_raw(value: Any) -> QualityMark:
    if is_number(value) and value == value:
        return QualityMark.locked(value)
    return QualityMark.unset()


def task_from_document(task_id: str, doc: Mapping[str, Any]) -> Task:
    """Build a :class:`Task` from a raw task document."""

    return Task(
        task_id=str(task_id),
        status=str(first_present(doc, STATUS_FIELDS) or ""),
        assigned_to_id=str(first_present(doc, ASSIGNED_ID_FIELDS) or ""),
        assigned_email=str(first_present(doc, ASSIGNED_EMAIL_FIELDS) or "").strip(),
        quality_mark=quality_mark_from_raw(doc.get("qualityMark")),
        start_date=to_date(doc.get("startDate")),
        end_date=to_date(doc.get("endDate")),
        title=str(doc.get("title") or ""),
    )
