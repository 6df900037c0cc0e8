from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceEntry


class AttendanceRepository(Protocol):
    def list_between(self, *, start_date: date, end_date: date) -> Sequence[AttendanceEntry]:
        raise NotImplementedError

    def list_for_user(
        self,
        *,
        user_id: str,
        user_email: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Sequence[AttendanceEntry]:
        raise NotImplementedError
