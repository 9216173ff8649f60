"""
Basic types and enums used across the delivery scheduling system.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum, IntEnum
from typing import FrozenSet, Union

from deliverylib.errors import InvalidScheduleInput


class Weekday(IntEnum):
    """Days of the week, numbered the way the subscription backend stores them."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @classmethod
    def of(cls, dt: date) -> "Weekday":
        """Weekday of a calendar date (date.weekday() counts from Monday=0)."""
        return cls((dt.weekday() + 1) % 7)

    @property
    def short_name(self) -> str:
        return self.name[:3].capitalize()


_ABBREVIATIONS = {day.name[:3]: day for day in Weekday}


def to_weekday(value) -> Weekday:
    """Coerce an ordinal (Sunday=0), a Weekday or a day name into a Weekday.

    Names are matched case-insensitively, in full ("Monday") or as the
    three-letter abbreviation ("mon").
    """
    if isinstance(value, Weekday):
        return value
    if isinstance(value, bool):
        raise InvalidScheduleInput(f"Invalid weekday: {value!r}")
    if isinstance(value, int):
        try:
            return Weekday(value)
        except ValueError as exc:
            raise InvalidScheduleInput(
                f"Weekday ordinal must be between 0 (Sunday) and 6 (Saturday), got {value}"
            ) from exc
    if isinstance(value, str):
        key = value.strip().upper()
        if key in Weekday.__members__:
            return Weekday[key]
        if key in _ABBREVIATIONS:
            return _ABBREVIATIONS[key]
        raise InvalidScheduleInput(f"Unknown weekday name: {value!r}")
    raise InvalidScheduleInput(f"Unsupported weekday value: {value!r}")


def _weekday_entry(value) -> Weekday:
    if isinstance(value, (str, bytes)):
        raise InvalidScheduleInput(f"Custom days hold weekday ordinals, got name {value!r}")
    return to_weekday(value)


class FrequencyType(Enum):
    """Wire names of delivery frequencies."""

    DAILY = "DAILY"
    ALTERNATIVE_DAYS = "ALTERNATIVE_DAYS"
    CUSTOM_DAYS = "CUSTOM_DAYS"


@dataclass(frozen=True)
class Daily:
    """Delivery every calendar day."""

    @property
    def kind(self) -> FrequencyType:
        return FrequencyType.DAILY


@dataclass(frozen=True)
class AlternateDays:
    """Delivery every second day, counted from the period's effective start."""

    @property
    def kind(self) -> FrequencyType:
        return FrequencyType.ALTERNATIVE_DAYS


@dataclass(frozen=True)
class CustomDays:
    """Delivery on selected weekdays. An empty selection means no deliveries."""

    weekdays: FrozenSet[Weekday] = field(default_factory=frozenset)

    def __post_init__(self):
        # Entries are ordinals or Weekday members; names go through build_custom_days.
        if isinstance(self.weekdays, (str, bytes)):
            raise InvalidScheduleInput(f"Custom days must be a collection, got {self.weekdays!r}")
        try:
            days = frozenset(_weekday_entry(day) for day in self.weekdays)
        except TypeError as exc:
            raise InvalidScheduleInput(f"Custom days must be a collection, got {self.weekdays!r}") from exc
        object.__setattr__(self, "weekdays", days)

    @property
    def kind(self) -> FrequencyType:
        return FrequencyType.CUSTOM_DAYS

    def includes(self, dt: date) -> bool:
        return Weekday.of(dt) in self.weekdays


DeliveryFrequency = Union[Daily, AlternateDays, CustomDays]

DAILY = Daily()
ALTERNATE_DAYS = AlternateDays()
