"""Countdown helpers for the next scheduled delivery."""

from __future__ import annotations

from deliverylib.errors import InvalidScheduleInput

from .clock import SYSTEM_CLOCK, ClockProvider
from .date import DateLike, days_between

PROGRESS_WINDOW_DAYS = 7


def days_until(target: DateLike, clock: ClockProvider = SYSTEM_CLOCK) -> int:
    """Days from today until target (0 if today or past)."""
    return max(0, days_between(clock.today(), target))


def _check_days(days_remaining: int) -> None:
    if days_remaining < 0:
        raise InvalidScheduleInput(f"days_remaining must not be negative, got {days_remaining}")


def format_countdown(days_remaining: int) -> str:
    _check_days(days_remaining)
    if days_remaining == 0:
        return "Today"
    if days_remaining == 1:
        return "Tomorrow"
    return f"{days_remaining} days"


def delivery_progress(days_remaining: int) -> float:
    """Progress towards the next delivery as a percentage (0-100)."""
    _check_days(days_remaining)
    if days_remaining == 0:
        return 100.0
    if days_remaining > PROGRESS_WINDOW_DAYS:
        return 0.0
    return (PROGRESS_WINDOW_DAYS - days_remaining) / PROGRESS_WINDOW_DAYS * 100
