"""Three-dimensional vector magnitude and normalisation."""

from __future__ import annotations

import math
from collections.abc import Sequence


def magnitude(vector: Sequence[float]) -> float:
    """Return the Euclidean length of the vector."""
    return math.sqrt(sum(coord * coord for coord in vector))


def normalize(vector: Sequence[float]) -> list[float]:
    """Return the vector scaled to length 1.0, keeping its direction.

    Raises ZeroDivisionError for the zero vector.
    """
    mag = magnitude(vector)
    return [coord / mag for coord in vector]