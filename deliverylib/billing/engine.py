"""End-to-end schedule evaluation.

Pipeline: start date -> billing period -> delivery occurrences -> summary.
Every call recomputes the result from the subscription terms; nothing is cached.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from deliverylib.conventions.billing import BillingConvention
from deliverylib.conventions.frequency import FrequencyLike, parse_frequency
from deliverylib.conventions.types import DeliveryFrequency
from deliverylib.conventions.weekdays import WeekdayLike
from deliverylib.schedule.core import BillingPeriod, ScheduleSummary
from deliverylib.schedule.generator import OccurrenceSchedule, enumerate_occurrences
from deliverylib.schedule.period import resolve_period
from deliverylib.utils.date import DateLike, to_date

from .aggregator import PriceLike, aggregate, check_quantity, to_price

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubscriptionTerms:
    """Inputs of one schedule evaluation.

    Attributes:
        start_date: Requested subscription start date
        frequency: Delivery frequency variant
        quantity_per_delivery: Units per delivery
        unit_price: Catalog price of one unit
    """

    start_date: date
    frequency: DeliveryFrequency
    quantity_per_delivery: int
    unit_price: Decimal

    def __post_init__(self):
        object.__setattr__(self, "start_date", to_date(self.start_date))
        object.__setattr__(self, "frequency", parse_frequency(self.frequency))
        object.__setattr__(self, "quantity_per_delivery", check_quantity(self.quantity_per_delivery))
        object.__setattr__(self, "unit_price", to_price(self.unit_price))

    @classmethod
    def from_record(
        cls,
        start_date: DateLike,
        frequency: FrequencyLike,
        quantity: int,
        unit_price: PriceLike,
        custom_days: Optional[Iterable[WeekdayLike]] = None,
    ) -> "SubscriptionTerms":
        """Build terms from the fields the subscription service stores."""
        return cls(
            start_date=to_date(start_date),
            frequency=parse_frequency(frequency, custom_days),
            quantity_per_delivery=quantity,
            unit_price=to_price(unit_price),
        )


@dataclass(frozen=True)
class ScheduleEvaluation:
    """Billing period and its summary, with the terms they were computed from."""

    period: BillingPeriod
    summary: ScheduleSummary
    frequency: DeliveryFrequency
    quantity_per_delivery: int
    unit_price: Decimal

    def occurrences(self) -> OccurrenceSchedule:
        """Re-enumerate the delivery dates of this evaluation."""
        return enumerate_occurrences(self.period, self.frequency)


def evaluate(
    terms: SubscriptionTerms, convention: Optional[BillingConvention] = None
) -> ScheduleEvaluation:
    """Resolve the period, enumerate deliveries and total them."""
    period = resolve_period(terms.start_date)
    occurrences = enumerate_occurrences(period, terms.frequency)
    summary = aggregate(
        occurrences,
        terms.quantity_per_delivery,
        terms.unit_price,
        period,
        convention=convention,
    )
    logger.debug(
        "Evaluated %s from %s: %s deliveries, amount %s",
        terms.frequency,
        terms.start_date,
        summary.total_deliveries,
        summary.total_amount,
    )
    return ScheduleEvaluation(
        period=period,
        summary=summary,
        frequency=terms.frequency,
        quantity_per_delivery=terms.quantity_per_delivery,
        unit_price=terms.unit_price,
    )


def get_subscription_details(
    start_date: DateLike,
    frequency: FrequencyLike,
    quantity: int,
    unit_price: PriceLike,
    custom_days: Optional[Iterable[WeekdayLike]] = None,
    convention: Optional[BillingConvention] = None,
) -> ScheduleEvaluation:
    """Evaluate a subscription given as loose fields (wire names allowed)."""
    terms = SubscriptionTerms.from_record(
        start_date, frequency, quantity, unit_price, custom_days=custom_days
    )
    return evaluate(terms, convention=convention)
