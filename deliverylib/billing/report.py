"""Tabular view of a billing period's deliveries."""

from __future__ import annotations

from typing import Optional, Union

import numpy as np
import pandas as pd

from deliverylib.conventions.billing import BillingConvention
from deliverylib.conventions.types import Weekday

from .engine import ScheduleEvaluation, SubscriptionTerms, evaluate

COLUMNS = [
    "date",
    "weekday",
    "delivery_no",
    "quantity",
    "units_to_date",
    "amount",
    "amount_to_date",
]


def schedule_table(
    source: Union[ScheduleEvaluation, SubscriptionTerms],
    convention: Optional[BillingConvention] = None,
) -> pd.DataFrame:
    """
    One row per delivery with running unit and amount totals.

    Given SubscriptionTerms the schedule is evaluated first. Price and
    quantity are read from the evaluation. Amounts stay Decimal (object dtype).
    """
    if isinstance(source, SubscriptionTerms):
        evaluation = evaluate(source, convention=convention)
    else:
        evaluation = source
    unit_price = evaluation.unit_price
    quantity_per_delivery = evaluation.quantity_per_delivery

    dates = evaluation.occurrences().to_list()
    if not dates:
        return pd.DataFrame(columns=COLUMNS)

    n = len(dates)
    delivery_no = np.arange(1, n + 1)
    quantities = np.full(n, quantity_per_delivery, dtype=np.int64)
    units_to_date = np.cumsum(quantities)

    line_amount = quantity_per_delivery * unit_price
    amounts = [line_amount] * n
    amounts_to_date = [int(units) * unit_price for units in units_to_date]

    return pd.DataFrame(
        {
            "date": dates,
            "weekday": [Weekday.of(dt).name for dt in dates],
            "delivery_no": delivery_no,
            "quantity": quantities,
            "units_to_date": units_to_date,
            "amount": pd.Series(amounts, dtype=object),
            "amount_to_date": pd.Series(amounts_to_date, dtype=object),
        },
        columns=COLUMNS,
    )
