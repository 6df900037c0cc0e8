from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_date
from .model import AttendanceEntry
from .normalizer import normalize_attendance_status, normalize_email_key
from .repository import AttendanceRepository


def _row_to_entry(r: Dict[str, Any]) -> AttendanceEntry:
    email = (r.get("user_email") or "").strip()
    return AttendanceEntry(
        entry_id=str(r["mark_id"]),
        user_id=r.get("user_id") or normalize_email_key(email),
        user_email=email,
        work_date=normalize_mysql_date(r["work_date"]),
        status=normalize_attendance_status(r.get("status")),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_between(self, *, start_date: date, end_date: date) -> Sequence[AttendanceEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT mark_id, user_id, user_email, work_date, status
                FROM attendance_marks
                WHERE work_date BETWEEN %s AND %s
                ORDER BY work_date, mark_id
                """,
                (start_date, end_date),
            )
            return [_row_to_entry(r) for r in fetchall(cur)]

    def list_for_user(
        self,
        *,
        user_id: str,
        user_email: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Sequence[AttendanceEntry]:
        email_key = normalize_email_key(user_email)
        if email_key:
            where = ["(user_id=%s OR LOWER(user_email)=%s)"]
            params: list = [user_id, email_key]
        else:
            where = ["user_id=%s"]
            params = [user_id]
        if start_date:
            where.append("work_date >= %s")
            params.append(start_date)
        if end_date:
            where.append("work_date <= %s")
            params.append(end_date)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT mark_id, user_id, user_email, work_date, status
                FROM attendance_marks
                WHERE {' AND '.join(where)}
                ORDER BY work_date, mark_id
                """,
                tuple(params),
            )
            return [_row_to_entry(r) for r in fetchall(cur)]
