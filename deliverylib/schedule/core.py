"""
Core data structures for delivery schedules.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class BillingPeriod:
    """The calendar-month window deliveries are counted and billed over."""

    effective_start_date: date
    effective_end_date: date
    period_label: str
    rolled_to_next_month: bool = False

    @property
    def days_in_period(self) -> int:
        """Number of calendar days in the period, both ends inclusive."""
        return (self.effective_end_date - self.effective_start_date).days + 1

    def __contains__(self, dt: date) -> bool:
        return self.effective_start_date <= dt <= self.effective_end_date


@dataclass(frozen=True)
class ScheduleSummary:
    """Delivery count and cost for one billing period."""

    total_deliveries: int
    total_amount: Decimal
    days_in_period: int
    total_units: int = 0
