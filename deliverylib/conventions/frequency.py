"""Frequency parsing and display labels."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, Optional, Union

from deliverylib.errors import InvalidScheduleInput

from .types import (
    ALTERNATE_DAYS,
    DAILY,
    AlternateDays,
    CustomDays,
    Daily,
    DeliveryFrequency,
    FrequencyType,
)
from .weekdays import WeekdayLike, short_day_names, to_weekday

FrequencyLike = Union[DeliveryFrequency, FrequencyType, str]
FrequencyBuilder = Callable[[Optional[Iterable[WeekdayLike]]], DeliveryFrequency]


def build_custom_days(days: Optional[Iterable[WeekdayLike]] = None) -> CustomDays:
    """Build a CustomDays frequency, validating every weekday."""
    if days is None:
        return CustomDays()
    if isinstance(days, (str, bytes)):
        raise InvalidScheduleInput(f"Custom days must be a collection, got {days!r}")
    return CustomDays(frozenset(to_weekday(day) for day in days))


_REGISTRY: Dict[FrequencyType, FrequencyBuilder] = {
    FrequencyType.DAILY: lambda _days: DAILY,
    FrequencyType.ALTERNATIVE_DAYS: lambda _days: ALTERNATE_DAYS,
    FrequencyType.CUSTOM_DAYS: build_custom_days,
}


def _frequency_type(kind: Union[FrequencyType, str]) -> FrequencyType:
    if isinstance(kind, FrequencyType):
        return kind
    if isinstance(kind, str):
        key = kind.strip().upper()
        try:
            return FrequencyType(key)
        except ValueError as exc:
            raise InvalidScheduleInput(f"Unsupported frequency: {kind}") from exc
    raise InvalidScheduleInput(f"Unsupported frequency: {kind!r}")


def parse_frequency(
    kind: FrequencyLike, custom_days: Optional[Iterable[WeekdayLike]] = None
) -> DeliveryFrequency:
    """Return the frequency variant for a wire name, enum member or variant.

    ``custom_days`` is only consulted for CUSTOM_DAYS.
    """
    if isinstance(kind, (Daily, AlternateDays, CustomDays)):
        return kind
    return _REGISTRY[_frequency_type(kind)](custom_days)


def frequency_label(frequency: DeliveryFrequency) -> str:
    """Human-readable frequency, e.g. 'Daily' or 'Custom: Mon, Wed'."""
    if isinstance(frequency, Daily):
        return "Daily"
    if isinstance(frequency, AlternateDays):
        return "Alternative Days"
    if isinstance(frequency, CustomDays):
        if not frequency.weekdays:
            return "Custom: None"
        return "Custom: " + ", ".join(short_day_names(sorted(frequency.weekdays)))
    raise InvalidScheduleInput(f"Unknown frequency: {frequency!r}")
