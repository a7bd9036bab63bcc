"""Random draws within half-open ranges."""

from __future__ import annotations

import random


def rand_range_int(low: int, high: int, rng: random.Random | None = None) -> int:
    """Return a random integer in ``[low, high)``; raise ValueError if empty."""
    source = rng if rng is not None else random
    if high <= low:
        raise ValueError(f"empty range [{low}, {high})")
    return source.randrange(low, high)


def rand_range_float(
    low: float, high: float, rng: random.Random | None = None
) -> float:
    """Return a random float in ``[low, high)``."""
    source = rng if rng is not None else random
    return low + source.random() * (high - low)