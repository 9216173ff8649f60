import logging
from datetime import date
from decimal import Decimal

import pytest

from deliverylib.billing import aggregate
from deliverylib.conventions import CENTS, DAILY, BillingConvention
from deliverylib.errors import InvalidScheduleInput
from deliverylib.schedule import enumerate_occurrences, resolve_period

PERIOD = resolve_period(date(2026, 1, 15))
THREE_DAYS = [date(2026, 1, 15), date(2026, 1, 16), date(2026, 1, 17)]


def test_totals():
    summary = aggregate(enumerate_occurrences(PERIOD, DAILY), 2, Decimal("10"), PERIOD)

    assert summary.total_deliveries == 17
    assert summary.total_units == 34
    assert summary.total_amount == Decimal("340")
    assert summary.days_in_period == 17


def test_days_in_period_independent_of_deliveries():
    summary = aggregate([], 1, Decimal("10"), PERIOD)

    assert summary.total_deliveries == 0
    assert summary.total_amount == Decimal("0")
    assert summary.days_in_period == 17


def test_consumes_one_shot_iterators():
    summary = aggregate(iter(THREE_DAYS), 1, 5, PERIOD)
    assert summary.total_deliveries == 3
    assert summary.total_amount == Decimal("15")


def test_float_prices_do_not_leak_binary_noise():
    summary = aggregate(THREE_DAYS, 1, 0.1, PERIOD)
    assert summary.total_amount == Decimal("0.3")
    assert isinstance(summary.total_amount, Decimal)


def test_string_prices():
    assert aggregate(THREE_DAYS, 2, "12.25", PERIOD).total_amount == Decimal("73.50")


@pytest.mark.parametrize("quantity", [0, -1, 1.5, True, "2", None])
def test_invalid_quantity(quantity):
    with pytest.raises(InvalidScheduleInput):
        aggregate(THREE_DAYS, quantity, Decimal("10"), PERIOD)


@pytest.mark.parametrize(
    "price", [Decimal("-0.01"), -1, "-5", "abc", float("nan"), Decimal("Infinity"), None, False]
)
def test_invalid_price(price):
    with pytest.raises(InvalidScheduleInput):
        aggregate(THREE_DAYS, 1, price, PERIOD)


def test_invalid_input_is_a_value_error():
    with pytest.raises(ValueError):
        aggregate(THREE_DAYS, 0, Decimal("10"), PERIOD)


def test_zero_price_is_allowed_but_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="deliverylib.billing.aggregator"):
        summary = aggregate(THREE_DAYS, 1, 0, PERIOD)

    assert summary.total_amount == Decimal("0")
    assert "zero unit price" in caplog.text


def test_quantized_amounts():
    summary = aggregate(THREE_DAYS, 1, "0.333", PERIOD, convention=CENTS)
    assert summary.total_amount == Decimal("1.00")
    assert summary.total_amount.as_tuple().exponent == -2


def test_exact_amounts_by_default():
    assert aggregate(THREE_DAYS, 1, "0.333", PERIOD).total_amount == Decimal("0.999")


def test_rounding_mode_is_configurable():
    assert aggregate(THREE_DAYS, 1, "0.335", PERIOD, convention=CENTS).total_amount == Decimal("1.01")
    convention = BillingConvention(amount_quantum=Decimal("0.01"), rounding="ROUND_DOWN")
    assert aggregate(THREE_DAYS, 1, "0.335", PERIOD, convention=convention).total_amount == Decimal(
        "1.00"
    )
