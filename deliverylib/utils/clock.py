"""Clock providers: the single place the engine learns what "today" is."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional, Protocol

from deliverylib.conventions.billing import BillingConvention, get_default_convention
from deliverylib.errors import InvalidScheduleInput

from .date import DateLike, to_date


class ClockProvider(Protocol):
    def today(self) -> date:
        ...


class SystemClock:
    """Local calendar day from the host clock."""

    def today(self) -> date:
        return date.today()


@dataclass(frozen=True)
class FixedClock:
    """Clock pinned to a given day, for previews and tests."""

    current: date

    def today(self) -> date:
        return self.current


SYSTEM_CLOCK = SystemClock()


def min_start_date(
    clock: ClockProvider = SYSTEM_CLOCK, convention: Optional[BillingConvention] = None
) -> date:
    """Earliest start date a new subscription may use (tomorrow by default)."""
    if convention is None:
        convention = get_default_convention()
    return clock.today() + timedelta(days=convention.min_lead_days)


def default_start_date(
    clock: ClockProvider = SYSTEM_CLOCK, convention: Optional[BillingConvention] = None
) -> date:
    """Start date suggested on the creation form."""
    return min_start_date(clock, convention)


def validate_start_date(
    start_date: DateLike,
    clock: ClockProvider = SYSTEM_CLOCK,
    convention: Optional[BillingConvention] = None,
) -> date:
    """Return start_date as a date, rejecting days before the allowed minimum."""
    start = to_date(start_date)
    earliest = min_start_date(clock, convention)
    if start < earliest:
        raise InvalidScheduleInput(
            f"Start date {start.isoformat()} is before the earliest allowed date {earliest.isoformat()}"
        )
    return start
