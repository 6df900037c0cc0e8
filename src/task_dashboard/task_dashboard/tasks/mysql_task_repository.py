from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date
from .model import QualityMark, Task
from .repository import TaskRepository

_SELECT = """
    SELECT task_id, title, status, assigned_to, assigned_email, quality_mark, start_date, end_date
    FROM tasks
"""


def _row_to_task(r: Dict[str, Any]) -> Task:
    mark = r.get("quality_mark")
    return Task(
        task_id=str(r["task_id"]),
        title=r.get("title") or "",
        status=r.get("status") or "",
        assigned_to_id=r.get("assigned_to") or "",
        assigned_email=(r.get("assigned_email") or "").strip(),
        quality_mark=QualityMark.locked(float(mark)) if mark is not None else QualityMark.unset(),
        start_date=normalize_mysql_date(r.get("start_date")),
        end_date=normalize_mysql_date(r.get("end_date")),
    )


class MySQLTaskRepository(TaskRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Task]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " ORDER BY task_id")
            return [_row_to_task(r) for r in fetchall(cur)]

    def get_by_id(self, task_id: str) -> Optional[Task]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE task_id=%s", (task_id,))
            r = fetchone(cur)
            return _row_to_task(r) if r else None

    def save_quality_mark(self, *, task_id: str, mark: float, marked_at: datetime) -> bool:
        # quality_mark IS NULL keeps the write-once rule even under concurrent saves.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE tasks
                SET quality_mark=%s, quality_marked_at=%s
                WHERE task_id=%s AND quality_mark IS NULL
                """,
                (mark, marked_at, task_id),
            )
            return cur.rowcount > 0
