"""Random helpers used to simulate network conditions."""

from __future__ import annotations

import random

__all__ = ["gen_range_float", "gen_range_int", "gen_bool"]


def gen_range_float(lower: float, upper: float) -> float:
    """Return a random float in the half-open range ``[lower, upper)``."""
    if not lower < upper:
        raise ValueError(f"empty range: [{lower}, {upper})")
    value = lower + random.random() * (upper - lower)
    # Guard against rounding up to the excluded upper bound.
    return value if value < upper else lower


def gen_range_int(lower: int, upper: int) -> int:
    """Return a random integer in the half-open range ``[lower, upper)``."""
    if not lower < upper:
        raise ValueError(f"empty range: [{lower}, {upper})")
    return random.randrange(lower, upper)


def gen_bool() -> bool:
    """Return True or False with equal probability."""
    return random.random() < 0.5