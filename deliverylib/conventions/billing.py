"""
Billing conventions: amount rounding, preview length and start-date lead time.
"""

import os
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional

from deliverylib.errors import InvalidScheduleInput

_ROUNDING_MODES = {
    "ROUND_UP",
    "ROUND_DOWN",
    "ROUND_CEILING",
    "ROUND_FLOOR",
    "ROUND_HALF_UP",
    "ROUND_HALF_DOWN",
    "ROUND_HALF_EVEN",
    "ROUND_05UP",
}


@dataclass(frozen=True)
class BillingConvention:
    """Specification for how schedule totals are presented.

    Attributes:
        amount_quantum: Quantize totals to this step (e.g. Decimal("0.01")).
            None keeps amounts exact.
        rounding: decimal rounding mode used with amount_quantum
        preview_count: Number of upcoming dates shown on the creation form
        min_lead_days: Earliest allowed start date, in days after today
    """

    amount_quantum: Optional[Decimal] = None
    rounding: str = ROUND_HALF_UP
    preview_count: int = 4
    min_lead_days: int = 1

    def __post_init__(self):
        if self.rounding not in _ROUNDING_MODES:
            raise InvalidScheduleInput(f"Unknown rounding mode: {self.rounding}")
        if self.amount_quantum is not None and self.amount_quantum <= 0:
            raise InvalidScheduleInput("amount_quantum must be positive")
        if self.preview_count <= 0:
            raise InvalidScheduleInput("preview_count must be positive")
        if self.min_lead_days < 0:
            raise InvalidScheduleInput("min_lead_days must not be negative")

    def quantize(self, amount: Decimal) -> Decimal:
        if self.amount_quantum is None:
            return amount
        return amount.quantize(self.amount_quantum, rounding=self.rounding)


# Predefined conventions
EXACT = BillingConvention()
CENTS = BillingConvention(amount_quantum=Decimal("0.01"))


def _from_environment() -> BillingConvention:
    quantum = os.getenv("DELIVERYLIB_AMOUNT_QUANTUM")
    preview = os.getenv("DELIVERYLIB_PREVIEW_COUNT")
    try:
        return BillingConvention(
            amount_quantum=Decimal(quantum) if quantum else None,
            preview_count=int(preview) if preview else EXACT.preview_count,
        )
    except (InvalidOperation, ValueError) as exc:
        raise InvalidScheduleInput(f"Invalid billing environment settings: {exc}") from exc


_DEFAULT_CONVENTION: Optional[BillingConvention] = None


def get_default_convention() -> BillingConvention:
    """Get default convention, initializing from the environment if needed."""
    global _DEFAULT_CONVENTION
    if _DEFAULT_CONVENTION is None:
        _DEFAULT_CONVENTION = _from_environment()
    return _DEFAULT_CONVENTION


def set_default_convention(convention: Optional[BillingConvention]) -> None:
    """Set the process-wide default convention. None re-reads the environment."""
    global _DEFAULT_CONVENTION
    _DEFAULT_CONVENTION = convention
