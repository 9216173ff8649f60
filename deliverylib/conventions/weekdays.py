"""Conversion between weekday names and the backend's numeric ordinals."""

from __future__ import annotations

from typing import Iterable, List, Union

from .types import Weekday, to_weekday

WeekdayLike = Union[Weekday, int, str]


def convert_days_to_numeric(day_names: Iterable[WeekdayLike]) -> List[int]:
    """['MONDAY', 'WEDNESDAY'] -> [1, 3]. Order is preserved."""
    return [int(to_weekday(day)) for day in day_names]


def convert_days_to_names(numeric_days: Iterable[WeekdayLike]) -> List[str]:
    """[1, 3] -> ['MONDAY', 'WEDNESDAY']. Order is preserved."""
    return [to_weekday(day).name for day in numeric_days]


def short_day_names(days: Iterable[WeekdayLike]) -> List[str]:
    """Three-letter display names in the given order, e.g. ['Mon', 'Wed']."""
    return [to_weekday(day).short_name for day in days]
