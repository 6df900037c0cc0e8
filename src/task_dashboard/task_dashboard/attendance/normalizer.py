"""Normalization of raw attendance documents into keyed attendance maps."""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from ..common.datetime_utils import to_date, to_date_key
from ..common.field_candidates import fields, first_present
from ..core.enums import AttendanceStatus
from .model import AttendanceEntry

logger = logging.getLogger(__name__)

AttendanceMap = Dict[str, str]

STATUS_FIELDS = fields("status", "attendanceStatus", "value", "statusValue")
USER_ID_FIELDS = fields(
    "userId",
    "uid",
    "employeeId",
    "userUID",
    "userUid",
    "assignedTo",
    "assignedUid",
    "memberId",
    "employeeUid",
    "user",
    "employee",
    "member",
    "recipientUid",
    "recipientId",
)
EMAIL_FIELDS = fields(
    "userEmail",
    "employeeEmail",
    "email",
    "assignedEmail",
    "memberEmail",
    "recipientEmail",
    "emailAddress",
    "assignedToEmail",
    "userMail",
    "employeeMail",
    "memberMail",
)
DATE_FIELDS = fields(
    "date",
    "attendanceDate",
    "day",
    "markedDate",
    "forDate",
    "dateKey",
    "fullDate",
    "selectedDate",
    "attendanceDay",
    "dateString",
    "markDate",
    "recordedDate",
)
NAME_FIELDS = fields("userName", "employeeName", "assignedName", "name")

_CANONICAL = {s.value: s.value for s in AttendanceStatus}
_CANONICAL_LOWER = {s.value.lower(): s.value for s in AttendanceStatus}
_ALIASES = {
    "halfday": AttendanceStatus.HALF_DAY,
    "halfdays": AttendanceStatus.HALF_DAY,
    "halfdayleave": AttendanceStatus.HALF_DAY,
    "half": AttendanceStatus.HALF_DAY,
    "shortleave": AttendanceStatus.SHORT_LEAVE,
    "shortleaves": AttendanceStatus.SHORT_LEAVE,
    "present": AttendanceStatus.PRESENT,
    "p": AttendanceStatus.PRESENT,
    "presentday": AttendanceStatus.PRESENT,
    "outdoor": AttendanceStatus.OUTDOOR,
    "out": AttendanceStatus.OUTDOOR,
    "field": AttendanceStatus.OUTDOOR,
    "onsite": AttendanceStatus.OUTDOOR,
    "absent": AttendanceStatus.ABSENT,
    "a": AttendanceStatus.ABSENT,
    "leave": AttendanceStatus.ABSENT,
    "sick": AttendanceStatus.ABSENT,
    "off": AttendanceStatus.OFF,
    "holiday": AttendanceStatus.OFF,
    "weekend": AttendanceStatus.OFF,
    "offday": AttendanceStatus.OFF,
}

_ISO_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


def normalize_attendance_status(value: Any) -> str:
    """Map a raw attendance mark onto a canonical status value.

    Unknown marks are returned lower-cased; the resolver counts them nowhere.
    Empty input gives ``""``.
    """

    if value is None:
        return ""
    raw = str(value).strip()
    if not raw:
        return ""
    if raw in _CANONICAL:
        return raw

    lower = raw.lower()
    if lower in _CANONICAL_LOWER:
        return _CANONICAL_LOWER[lower]

    collapsed = re.sub(r"[^a-z]", "", lower)
    alias = _ALIASES.get(collapsed)
    if alias is not None:
        return alias.value
    return lower


def normalize_email_key(value: Any) -> str:
    return str(value or "").strip().lower()


def identifiers_from_doc_id(doc_id: str) -> Tuple[str, str]:
    """Split ``<uid>_<YYYY-MM-DD>`` / ``<YYYY-MM-DD>_<uid>`` ids into (user id, date)."""

    if not doc_id:
        return "", ""

    match = _ISO_DATE_RE.search(doc_id)
    if match:
        before = doc_id[: match.start()].rstrip("_-")
        after = doc_id[match.end():].lstrip("_-")
        return before or after, match.group(0)

    parts = doc_id.split("_")
    if len(parts) == 2:
        if to_date(parts[0]):
            return parts[1], parts[0]
        if to_date(parts[1]):
            return parts[0], parts[1]
    return "", ""


def attendance_key_variants(user_id: Any, email: Any, day: Any) -> List[str]:
    """Lookup keys for one employee-day, id first then email."""

    date_key = to_date_key(day)
    if not date_key:
        return []
    keys: List[str] = []
    if user_id:
        keys.append(f"{user_id}_{date_key}")
    email_key = normalize_email_key(email)
    if email_key:
        key = f"{email_key}_{date_key}"
        if key not in keys:
            keys.append(key)
    return keys


def entry_from_document(doc_id: str, doc: Mapping[str, Any]) -> Optional[AttendanceEntry]:
    """Build an :class:`AttendanceEntry` from a raw attendance document.

    Returns ``None`` when the document has no usable status or date.
    """

    status = normalize_attendance_status(first_present(doc, STATUS_FIELDS))
    if not status:
        return None

    user_id = str(first_present(doc, USER_ID_FIELDS) or "")
    email = str(first_present(doc, EMAIL_FIELDS) or "").strip()
    date_value = to_date(first_present(doc, DATE_FIELDS))

    if (not user_id or not date_value) and doc_id:
        derived_user, derived_date = identifiers_from_doc_id(doc_id)
        if not user_id and derived_user:
            user_id = derived_user
        if not date_value and derived_date:
            date_value = to_date(derived_date)

    if not user_id and email:
        user_id = normalize_email_key(email)

    if not date_value:
        return None

    return AttendanceEntry(
        entry_id=str(doc_id or ""),
        user_id=user_id,
        user_email=email,
        work_date=date_value,
        status=status,
        user_name=str(first_present(doc, NAME_FIELDS) or ""),
    )


def entries_from_documents(docs: Iterable[Tuple[str, Mapping[str, Any]]]) -> List[AttendanceEntry]:
    entries: List[AttendanceEntry] = []
    for doc_id, doc in docs:
        entry = entry_from_document(doc_id, doc)
        if entry is None:
            logger.debug("Dropped attendance document %r: no status or date", doc_id)
            continue
        entries.append(entry)
    return entries


def build_attendance_map(entries: Iterable[AttendanceEntry]) -> AttendanceMap:
    """Index entries under every key variant; later entries overwrite earlier ones."""

    attendance_map: AttendanceMap = {}
    for entry in entries:
        if not entry.status:
            continue
        for key in attendance_key_variants(entry.user_id, entry.user_email, entry.work_date):
            attendance_map[key] = entry.status
    return attendance_map


def resolve_status(attendance_map: Mapping[str, str], user_id: Any, email: Any, day: Any) -> Optional[str]:
    for key in attendance_key_variants(user_id, email, day):
        status = attendance_map.get(key)
        if status:
            return status
    return None
