"""Folding delivery occurrences into period totals."""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Iterable, Optional, Union

from deliverylib.conventions.billing import BillingConvention, get_default_convention
from deliverylib.errors import InvalidScheduleInput
from deliverylib.schedule.core import BillingPeriod, ScheduleSummary

logger = logging.getLogger(__name__)

PriceLike = Union[Decimal, int, float, str]


def to_price(unit_price: PriceLike) -> Decimal:
    """Convert a unit price to Decimal, rejecting negative or non-finite values.

    Floats go through str() so 0.1 becomes Decimal("0.1"), not its binary expansion.
    """
    if isinstance(unit_price, bool):
        raise InvalidScheduleInput(f"Invalid unit price: {unit_price!r}")
    if isinstance(unit_price, Decimal):
        price = unit_price
    elif isinstance(unit_price, (int, float, str)):
        try:
            price = Decimal(str(unit_price).strip())
        except InvalidOperation as exc:
            raise InvalidScheduleInput(f"Invalid unit price: {unit_price!r}") from exc
    else:
        raise InvalidScheduleInput(f"Unsupported unit price type: {type(unit_price)}")

    if not price.is_finite():
        raise InvalidScheduleInput(f"Unit price must be finite, got {unit_price!r}")
    if price < 0:
        raise InvalidScheduleInput(f"Unit price must not be negative, got {unit_price!r}")
    return price


def check_quantity(quantity_per_delivery: int) -> int:
    """Return the quantity if it is a positive integer."""
    if isinstance(quantity_per_delivery, bool) or not isinstance(quantity_per_delivery, int):
        raise InvalidScheduleInput(
            f"Quantity per delivery must be an integer, got {quantity_per_delivery!r}"
        )
    if quantity_per_delivery <= 0:
        raise InvalidScheduleInput(
            f"Quantity per delivery must be positive, got {quantity_per_delivery}"
        )
    return quantity_per_delivery


def aggregate(
    occurrences: Iterable[date],
    quantity_per_delivery: int,
    unit_price: PriceLike,
    period: BillingPeriod,
    convention: Optional[BillingConvention] = None,
) -> ScheduleSummary:
    """
    Count deliveries and price them.

    Args:
        occurrences: Delivery dates; iterated exactly once
        quantity_per_delivery: Units delivered on each occurrence (> 0)
        unit_price: Price of one unit (>= 0)
        period: Billing period the occurrences belong to
        convention: Rounding convention (defaults to the process default)

    Returns:
        ScheduleSummary for the period
    """
    quantity = check_quantity(quantity_per_delivery)
    price = to_price(unit_price)
    if convention is None:
        convention = get_default_convention()
    if price == 0:
        logger.warning("Aggregating %s with a zero unit price", period.period_label)

    total_deliveries = sum(1 for _ in occurrences)
    total_units = total_deliveries * quantity
    total_amount = convention.quantize(total_units * price)

    logger.debug(
        "%s: %s deliveries x %s units @ %s = %s",
        period.period_label,
        total_deliveries,
        quantity,
        price,
        total_amount,
    )
    return ScheduleSummary(
        total_deliveries=total_deliveries,
        total_amount=total_amount,
        days_in_period=period.days_in_period,
        total_units=total_units,
    )
