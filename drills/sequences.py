"""Sequence helpers: ordered minimum, matrix transpose and cyclic differences."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import cycle, islice
from typing import Any, TypeVar

T = TypeVar("T")


def smaller(left: T, right: T) -> T:
    """Return the smaller of two values, preferring `left` when they are equal."""
    return left if left <= right else right  # type: ignore[operator]


def transpose(matrix: Sequence[Sequence[Any]]) -> list[list[Any]]:
    """Return the transpose of a rectangular matrix as a list of rows."""
    widths = {len(row) for row in matrix}
    if len(widths) > 1:
        raise ValueError("matrix rows must all have the same length")
    return [list(column) for column in zip(*matrix)]


def offset_differences(offset: int, values: Sequence[int]) -> list[int]:
    """Return differences between elements `offset` apart, wrapping around.

    Element n of the result is ``values[(n + offset) % len(values)] - values[n]``.
    """
    if offset < 0:
        raise ValueError("offset must not be negative")
    shifted = islice(cycle(values), offset, None)
    return [later - earlier for earlier, later in zip(values, shifted)]