from __future__ import annotations

import calendar
from datetime import date
from typing import Dict, List

from .model import CalendarDay

# (month, day) -> name, every year.
FIXED_HOLIDAYS: Dict[tuple[int, int], str] = {
    (12, 25): "Christmas",
    (1, 1): "New Year",
}

# Approximate Islamic holidays, only known years.
DATED_HOLIDAYS: Dict[date, str] = {
    date(2025, 3, 31): "Eid al-Fitr",
    date(2025, 6, 7): "Eid al-Adha",
    date(2026, 3, 20): "Eid al-Fitr",
    date(2026, 5, 27): "Eid al-Adha",
}


def get_holidays(year: int, month: int) -> Dict[int, str]:
    """Holidays of a month as ``{day_of_month: name}``."""

    holidays = {d: name for (m, d), name in FIXED_HOLIDAYS.items() if m == month}
    for day, name in DATED_HOLIDAYS.items():
        if day.year == year and day.month == month:
            holidays[day.day] = name
    return holidays


def calendar_days(year: int, month: int) -> List[CalendarDay]:
    holidays = get_holidays(year, month)
    _, last_day = calendar.monthrange(year, month)
    return [CalendarDay(day=date(year, month, d), holiday=holidays.get(d)) for d in range(1, last_day + 1)]


def working_days(year: int, month: int) -> List[CalendarDay]:
    """Days of the month that are neither Sundays nor holidays."""
    return [d for d in calendar_days(year, month) if d.is_working_day]
