from __future__ import annotations

from collections import Counter
from datetime import date
from typing import Any, Iterable, Mapping, Optional

from ..core.constants import HALF_DAY_CREDIT, SHORT_LEAVE_CREDIT
from ..core.enums import AttendanceStatus
from .calendar import working_days
from .model import AttendanceEntry, AttendanceMetrics
from .normalizer import resolve_status

_TRACKED = frozenset(s.value for s in AttendanceStatus)


def attendance_percentage(counts: Mapping[str, int]) -> float:
    """(present + outdoor + shortLeave*0.8 + halfDay*0.5) over all non-off marks.

    Off days stay out of both sides; no marks at all gives 0.
    """

    present = counts.get(AttendanceStatus.PRESENT.value, 0)
    outdoor = counts.get(AttendanceStatus.OUTDOOR.value, 0)
    half_day = counts.get(AttendanceStatus.HALF_DAY.value, 0)
    short_leave = counts.get(AttendanceStatus.SHORT_LEAVE.value, 0)
    absent = counts.get(AttendanceStatus.ABSENT.value, 0)

    numerator = present + outdoor + short_leave * SHORT_LEAVE_CREDIT + half_day * HALF_DAY_CREDIT
    denominator = present + outdoor + short_leave + half_day + absent
    if denominator <= 0:
        return 0.0
    return numerator / denominator * 100


def _metrics(counts: Mapping[str, int]) -> AttendanceMetrics:
    return AttendanceMetrics(
        present=counts.get(AttendanceStatus.PRESENT.value, 0),
        outdoor=counts.get(AttendanceStatus.OUTDOOR.value, 0),
        half_day=counts.get(AttendanceStatus.HALF_DAY.value, 0),
        short_leave=counts.get(AttendanceStatus.SHORT_LEAVE.value, 0),
        absent=counts.get(AttendanceStatus.ABSENT.value, 0),
        off=counts.get(AttendanceStatus.OFF.value, 0),
        percentage=attendance_percentage(counts),
    )


def resolve_metrics(
    employee_id: Any,
    employee_email: Any,
    month: int,
    year: int,
    attendance_map: Mapping[str, str],
) -> AttendanceMetrics:
    """Attendance tallies and percentage of one employee over a month's working days.

    ``month`` is 1-12. Working days without a mark, or with an unknown mark,
    are counted in no bucket. A month or year outside the calendar has no
    working days and gives empty metrics.
    """

    counts: Counter = Counter()
    if not 1 <= int(month) <= 12 or not date.min.year <= int(year) <= date.max.year:
        return _metrics(counts)
    for day in working_days(int(year), int(month)):
        status = resolve_status(attendance_map, employee_id, employee_email, day.day)
        if status in _TRACKED:
            counts[status] += 1
    return _metrics(counts)


def summarize_entries(
    entries: Iterable[AttendanceEntry],
    *,
    start: Optional[date] = None,
    end: Optional[date] = None,
) -> AttendanceMetrics:
    """Tally an employee's own attendance entries inside an optional date range.

    Unlike :func:`resolve_metrics` there is no working-day calendar: every
    entry in range counts once per day, the latest entry for a day winning.
    """

    by_day = {}
    for entry in entries:
        if start and entry.work_date < start:
            continue
        if end and entry.work_date > end:
            continue
        by_day[entry.work_date] = entry.status

    counts: Counter = Counter(s for s in by_day.values() if s in _TRACKED)
    return _metrics(counts)
