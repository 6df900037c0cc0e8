"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

TASK_CLOSING_WEIGHT = 50
ATTENDANCE_WEIGHT = 15
QUALITY_WEIGHT = 20
KPI_WEIGHT = 15

SHORT_LEAVE_CREDIT = 0.8
HALF_DAY_CREDIT = 0.5

QUALITY_MARK_MIN = 0
QUALITY_MARK_MAX = 100

KPI_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

NEEDS_IMPROVEMENT_REMARK = "need improvement"

YEAR_MIN = 1970
YEAR_MAX = 2100
