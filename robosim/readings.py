"""Helpers for working with lists of sensor readings."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

FEET_PER_METER = 3.28084


def average(*args: float) -> float:
    """Arithmetic mean of the given values."""
    if not args:
        raise ValueError("average needs at least one value")
    return sum(args) / len(args)


def meters_to_feet(meters: float) -> float:
    """Convert a distance in meters to feet."""
    return meters * FEET_PER_METER


def scale_reading(value: float, factor: float) -> float:
    """Return ``value`` multiplied by ``factor``."""
    return value * factor


def apply_to_readings(
    data: Iterable[float], transform: Callable[[float], float]
) -> list[float]:
    """Apply ``transform`` to every reading, preserving order."""
    return [transform(value) for value in data]


def min_max(data: Iterable[float]) -> tuple[float, float]:
    """Smallest and largest reading."""
    values = list(data)
    if not values:
        raise ValueError("min_max needs at least one value")
    return min(values), max(values)


def reading_at(data: Sequence[float], index: int) -> float | None:
    """Reading at ``index``, or None when the index is out of bounds."""
    if 0 <= index < len(data):
        return data[index]
    return None