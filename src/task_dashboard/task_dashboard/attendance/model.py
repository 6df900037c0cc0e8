from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class AttendanceEntry:
    """Domain entity: one attendance mark for one employee on one day."""

    user_id: str
    user_email: str
    work_date: date
    status: str
    entry_id: str = ""
    user_name: str = ""


@dataclass(frozen=True)
class CalendarDay:
    day: date
    holiday: Optional[str] = None

    @property
    def is_sunday(self) -> bool:
        return self.day.weekday() == 6

    @property
    def is_working_day(self) -> bool:
        return not self.is_sunday and not self.holiday

    @property
    def key(self) -> str:
        return self.day.isoformat()


@dataclass(frozen=True)
class AttendanceMetrics:
    present: int = 0
    outdoor: int = 0
    half_day: int = 0
    short_leave: int = 0
    absent: int = 0
    off: int = 0
    percentage: float = 0.0

    def to_dict(self) -> dict:
        return {
            "present": self.present,
            "outdoor": self.outdoor,
            "halfDay": self.half_day,
            "shortLeave": self.short_leave,
            "absent": self.absent,
            "off": self.off,
            "percentage": self.percentage,
        }
