from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .normalizer import role_from_raw
from .repository import EmployeeRepository


def _row_to_employee(r: Dict[str, Any]) -> Employee:
    return Employee(
        uid=r["uid"],
        record_id=r["uid"],
        email=(r.get("email") or "").strip(),
        name=r.get("name") or "",
        role=role_from_raw(r.get("role")),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT uid, email, name, role FROM users ORDER BY name")
            return [_row_to_employee(r) for r in fetchall(cur)]

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT uid, email, name, role FROM users WHERE uid=%s OR LOWER(email)=%s LIMIT 1",
                (employee_id, (employee_id or "").strip().lower()),
            )
            r = fetchone(cur)
            return _row_to_employee(r) if r else None
