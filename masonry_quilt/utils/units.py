"""Conversions between pixels and internal units."""

import math

from .. import globs


def round_half_up(value: float) -> int:
    """Round to the nearest integer. Halves round up (towards positive infinity)."""
    return int(math.floor(value + 0.5))


def px_to_units(px: float, base_size: float) -> int:
    """Convert a pixel length to internal units, never below one unit."""
    return max(1, round_half_up(px / base_size * globs.UNITS_PER_CELL))
