"""Small helpers shared across the simulation."""

from __future__ import annotations

from typing import Iterable, TypeVar

T = TypeVar("T")


def clamp(value: T, low: T, high: T) -> T:
    """Limit ``value`` to the inclusive range ``[low, high]``."""
    if value < low:
        return low
    if value > high:
        return high
    return value


def remove_first(items: Iterable[T], item: T) -> list[T]:
    """Return a copy of ``items`` without the first element equal to ``item``."""
    result = list(items)
    try:
        result.remove(item)
    except ValueError:
        pass
    return result