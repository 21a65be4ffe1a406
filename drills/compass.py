"""Display modes and value scaling for a compass on a 5x5 LED grid."""

from __future__ import annotations

import enum

COMPASS_SCALE = 30000
ACCELEROMETER_SCALE = 700


class Mode(enum.Enum):
    """Which sensor drives the display."""

    COMPASS = "compass"
    ACCELEROMETER = "accelerometer"

    def next(self) -> Mode:
        """Return the mode that follows this one."""
        return Mode.ACCELEROMETER if self is Mode.COMPASS else Mode.COMPASS


def _truncating_divide(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def cap(value: int, min_value: int, max_value: int) -> int:
    """Clamp the value to the range from min_value to max_value."""
    return max(min_value, min(value, max_value))


def scale(value: int, min_in: int, max_in: int, min_out: int, max_out: int) -> int:
    """Map a value from the input range linearly onto the output range, clamped.

    Integer division truncates toward zero; an empty input range raises
    ZeroDivisionError.
    """
    range_in = max_in - min_in
    range_out = max_out - min_out
    if range_in == 0:
        raise ZeroDivisionError("input range is empty")
    scaled = min_out + _truncating_divide(range_out * (value - min_in), range_in)
    return cap(scaled, min_out, max_out)