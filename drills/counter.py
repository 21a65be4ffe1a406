"""Counting occurrences of hashable values."""

from __future__ import annotations

from collections.abc import Hashable
from typing import Generic, TypeVar

T = TypeVar("T", bound=Hashable)


class Counter(Generic[T]):
    """Counts the number of times each value has been seen."""

    def __init__(self) -> None:
        self._values: dict[T, int] = {}

    def count(self, value: T) -> None:
        """Record one occurrence of the value."""
        self._values[value] = self._values.get(value, 0) + 1

    def times_seen(self, value: T) -> int:
        """Return how many times the value has been counted."""
        return self._values.get(value, 0)