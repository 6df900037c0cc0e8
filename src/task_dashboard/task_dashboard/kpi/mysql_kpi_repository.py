from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import KpiEntry
from .repository import KpiRepository

_SELECT = "SELECT kpi_id, user_id, user_email, month, year, score FROM kpi_entries"


def _row_to_entry(r: Dict[str, Any]) -> KpiEntry:
    return KpiEntry(
        entry_id=str(r["kpi_id"]),
        user_id=r.get("user_id") or "",
        user_email=(r.get("user_email") or "").strip(),
        month=r["month"],
        year=int(r["year"]),
        score=float(r["score"]),
    )


class MySQLKpiRepository(KpiRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[KpiEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " ORDER BY year, kpi_id")
            return [_row_to_entry(r) for r in fetchall(cur)]

    def list_for_user(self, *, user_id: str, user_email: str) -> Sequence[KpiEntry]:
        email_key = (user_email or "").strip().lower()
        with db_cursor(self._conn_factory) as (_, cur):
            if email_key:
                cur.execute(_SELECT + " WHERE user_id=%s OR LOWER(user_email)=%s", (user_id, email_key))
            else:
                cur.execute(_SELECT + " WHERE user_id=%s", (user_id,))
            return [_row_to_entry(r) for r in fetchall(cur)]

    def find(self, *, user_id: str, month: str, year: int) -> Optional[KpiEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE user_id=%s AND month=%s AND year=%s", (user_id, month, int(year)))
            r = fetchone(cur)
            return _row_to_entry(r) if r else None

    def create(self, *, user_id: str, user_email: str, month: str, year: int, score: float) -> str:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO kpi_entries(user_id, user_email, month, year, score)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (user_id, user_email or None, month, int(year), float(score)),
            )
            return str(cur.lastrowid)
