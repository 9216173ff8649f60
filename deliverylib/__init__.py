"""Recurring Delivery Schedule & Billing Period Engine.

This package computes, for a water-delivery subscription, the billing period
implied by its start date, the delivery dates inside that period and what the
period costs.

Key modules:
- conventions: Delivery frequencies, weekdays and billing conventions
- schedule: Period resolution and delivery date generation
- billing: Aggregation, end-to-end evaluation and schedule tables
- utils: Date coercion, clock providers and countdown helpers
"""

from deliverylib.billing import (
    ScheduleEvaluation,
    SubscriptionTerms,
    aggregate,
    evaluate,
    get_subscription_details,
)
from deliverylib.conventions import (
    ALTERNATE_DAYS,
    DAILY,
    AlternateDays,
    CustomDays,
    Daily,
    FrequencyType,
    Weekday,
    parse_frequency,
)
from deliverylib.errors import DeliveryLibError, InvalidScheduleInput
from deliverylib.schedule import (
    BillingPeriod,
    ScheduleSummary,
    enumerate_occurrences,
    resolve_period,
)

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "resolve_period",
    "enumerate_occurrences",
    "aggregate",
    "evaluate",
    "get_subscription_details",
    "BillingPeriod",
    "ScheduleSummary",
    "ScheduleEvaluation",
    "SubscriptionTerms",
    "Daily",
    "AlternateDays",
    "CustomDays",
    "DAILY",
    "ALTERNATE_DAYS",
    "FrequencyType",
    "Weekday",
    "parse_frequency",
    "DeliveryLibError",
    "InvalidScheduleInput",
]
