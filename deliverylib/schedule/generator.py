"""
Delivery occurrence generation.
"""

from datetime import date, timedelta
from typing import Callable, Iterator, List, Optional

from deliverylib.conventions.billing import get_default_convention
from deliverylib.conventions.frequency import FrequencyLike, parse_frequency
from deliverylib.conventions.types import (
    AlternateDays,
    CustomDays,
    Daily,
    DeliveryFrequency,
)
from deliverylib.errors import InvalidScheduleInput
from deliverylib.utils.date import DateLike, to_date

from .core import BillingPeriod

ONE_DAY = timedelta(days=1)


class OccurrenceSchedule:
    """Delivery dates of a billing period under a frequency.

    Iterating yields dates in ascending order. Every iteration walks the
    period again, so the schedule can be consumed any number of times.
    """

    def __init__(self, period: BillingPeriod, frequency: DeliveryFrequency):
        self.period = period
        self.frequency = frequency
        self._is_delivery_day = self._delivery_rule(frequency)

    def _delivery_rule(self, frequency: DeliveryFrequency) -> Callable[[date], bool]:
        """Get the per-day predicate for a frequency."""
        if isinstance(frequency, Daily):
            return lambda _dt: True
        elif isinstance(frequency, AlternateDays):
            start = self.period.effective_start_date
            return lambda dt: (dt - start).days % 2 == 0
        elif isinstance(frequency, CustomDays):
            return frequency.includes
        else:
            raise InvalidScheduleInput(f"Unsupported frequency: {frequency!r}")

    def __iter__(self) -> Iterator[date]:
        current = self.period.effective_start_date
        while current <= self.period.effective_end_date:
            if self._is_delivery_day(current):
                yield current
            current += ONE_DAY

    def to_list(self) -> List[date]:
        return list(self)

    def __repr__(self) -> str:
        return (
            f"OccurrenceSchedule({self.period.effective_start_date}.."
            f"{self.period.effective_end_date}, {self.frequency!r})"
        )


def enumerate_occurrences(
    period: BillingPeriod, frequency: DeliveryFrequency
) -> OccurrenceSchedule:
    """Return the restartable sequence of delivery dates within period."""
    return OccurrenceSchedule(period, frequency)


def upcoming_dates(
    frequency: FrequencyLike, selected_date: DateLike, count: Optional[int] = None
) -> List[date]:
    """
    Preview the first deliveries from the selected start date.

    Weekday patterns have no preview and return an empty list.

    Args:
        frequency: Delivery frequency or its wire name
        selected_date: Start date picked on the creation form
        count: Number of dates (defaults to the convention's preview_count)
    """
    if count is None:
        count = get_default_convention().preview_count
    if count <= 0:
        raise InvalidScheduleInput(f"count must be positive, got {count}")

    frequency = parse_frequency(frequency)
    if isinstance(frequency, CustomDays):
        return []
    if isinstance(frequency, Daily):
        interval = 1
    elif isinstance(frequency, AlternateDays):
        interval = 2
    else:
        raise InvalidScheduleInput(f"Unsupported frequency: {frequency!r}")

    base = to_date(selected_date)
    return [base + timedelta(days=i * interval) for i in range(count)]
