from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used to pick who gets evaluated."""

    ADMIN = "admin"
    EMPLOYEE = "employee"


class CanonicalStatus(str, Enum):
    """Closed set every free-text task status is mapped onto."""

    COMPLETED = "completed"
    DELAYED = "delayed"
    IN_PROCESS = "in process"
    CANCELLED = "cancelled"


class AttendanceStatus(str, Enum):
    """Attendance mark stored per employee per day."""

    PRESENT = "present"
    OUTDOOR = "outdoor"
    HALF_DAY = "halfDay"
    SHORT_LEAVE = "shortLeave"
    ABSENT = "absent"
    OFF = "off"


class QualityMarkState(str, Enum):
    UNSET = "unset"
    PENDING = "pending"
    LOCKED = "locked"


class AdminGrade(str, Enum):
    A = "A"
    B = "B"
    C = "C"


class EmployeeGrade(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"
