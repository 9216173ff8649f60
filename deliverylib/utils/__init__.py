from .clock import (
    SYSTEM_CLOCK,
    ClockProvider,
    FixedClock,
    SystemClock,
    default_start_date,
    min_start_date,
    validate_start_date,
)
from .countdown import days_until, delivery_progress, format_countdown
from .date import days_between, to_date

__all__ = [
    "ClockProvider",
    "SystemClock",
    "FixedClock",
    "SYSTEM_CLOCK",
    "min_start_date",
    "default_start_date",
    "validate_start_date",
    "days_until",
    "format_countdown",
    "delivery_progress",
    "to_date",
    "days_between",
]
