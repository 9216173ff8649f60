"""
Billing period resolution with the month-end rollover rule.
"""

import logging

from deliverylib.utils.date import DateLike, to_date

from .adjustments import get_month_end, is_end_of_month, month_name, start_of_next_month
from .core import BillingPeriod

logger = logging.getLogger(__name__)


def resolve_period(start_date: DateLike) -> BillingPeriod:
    """
    Resolve the effective billing period for a subscription start date.

    A subscription starting on the last day of a month is billed for the whole
    following month; any other start date is billed for the rest of its own
    month.

    Args:
        start_date: Requested start date (date, datetime, Timestamp or ISO string)

    Returns:
        BillingPeriod with inclusive effective start and end dates
    """
    start = to_date(start_date)

    if is_end_of_month(start):
        effective_start = start_of_next_month(start)
        period = BillingPeriod(
            effective_start_date=effective_start,
            effective_end_date=get_month_end(effective_start.year, effective_start.month),
            period_label=f"Full Month ({month_name(effective_start)})",
            rolled_to_next_month=True,
        )
    else:
        period = BillingPeriod(
            effective_start_date=start,
            effective_end_date=get_month_end(start.year, start.month),
            period_label=f"Rest of {month_name(start)}",
            rolled_to_next_month=False,
        )

    logger.debug(
        "Resolved period for %s: %s..%s (rolled=%s)",
        start,
        period.effective_start_date,
        period.effective_end_date,
        period.rolled_to_next_month,
    )
    return period
