"""
Month arithmetic used by period resolution.
"""

from datetime import date

from dateutil.relativedelta import relativedelta

MONTH_NAMES = (
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


def get_month_end(year: int, month: int) -> date:
    """Get the last calendar day of a given month."""
    # relativedelta clamps day=31 to the month's length, leap years included
    return date(year, month, 1) + relativedelta(day=31)


def is_end_of_month(dt: date) -> bool:
    """Check if date is end of month."""
    return dt == get_month_end(dt.year, dt.month)


def start_of_next_month(dt: date) -> date:
    """Day 1 of the month following dt's month."""
    return dt.replace(day=1) + relativedelta(months=1)


def month_name(dt: date) -> str:
    """English name of dt's month, independent of the process locale."""
    return MONTH_NAMES[dt.month - 1]
