from __future__ import annotations

from typing import Any, Mapping

from ..common.field_candidates import fields, first_present
from ..core.enums import Role
from .model import Employee

NAME_FIELDS = fields("name", "displayName")


def role_from_raw(value: Any) -> Role:
    text = str(value or Role.EMPLOYEE.value).strip().lower()
    return Role.ADMIN if text == Role.ADMIN.value else Role.EMPLOYEE


def employee_from_document(record_id: str, doc: Mapping[str, Any]) -> Employee:
    return Employee(
        uid=str(doc.get("uid") or ""),
        record_id=str(record_id or ""),
        email=str(doc.get("email") or "").strip(),
        name=str(first_present(doc, NAME_FIELDS) or ""),
        role=role_from_raw(doc.get("role")),
    )
