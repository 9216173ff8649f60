from typing import Union
from datetime import datetime, date
from pandas import Timestamp

from deliverylib.errors import InvalidScheduleInput

DATE_FMT = "%Y-%m-%d"
COMPACT_FMT = "%Y%m%d"

DateLike = Union[str, date, datetime, Timestamp]


def to_date(date_like: DateLike) -> date:
    """
    Convert a string, datetime or Timestamp to a calendar date.
    Accepts 'YYYY-MM-DD' and 'YYYYMMDD' string formats; the time of day is dropped.
    """
    if isinstance(date_like, Timestamp):
        return date_like.date()
    if isinstance(date_like, datetime):
        return date_like.date()
    if isinstance(date_like, date):
        return date_like
    if isinstance(date_like, str):
        for fmt in (DATE_FMT, COMPACT_FMT):
            try:
                return datetime.strptime(date_like.strip(), fmt).date()
            except ValueError:
                continue
        raise InvalidScheduleInput(f"Unsupported date string format: {date_like!r}")
    raise InvalidScheduleInput(f"Unsupported type for date: {type(date_like)}")


def days_between(start: DateLike, end: DateLike) -> int:
    """
    Whole calendar days from start to end (negative when end precedes start).
    """
    return (to_date(end) - to_date(start)).days
