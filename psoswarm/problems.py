"""Benchmark fitness functions and boundary handling for particle positions."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Sequence

logger = logging.getLogger(__name__)

FitnessFunction = Callable[[int, Sequence[float]], float]


def function_name(fn: Callable[..., object]) -> str:
    """Return the fully qualified name of ``fn``, or ``"unknown"``."""
    qualname = getattr(fn, "__qualname__", None) or getattr(fn, "__name__", None)
    if not qualname:
        return "unknown"
    module = getattr(fn, "__module__", None)
    return f"{module}.{qualname}" if module else qualname


def clean_function_name(fn: Callable[..., object]) -> str:
    """Return the bare name of ``fn`` without its module path."""
    return function_name(fn).rsplit(".", 1)[-1]


def _clamp(value: float, min_bound: float, max_bound: float) -> float:
    if value < min_bound:
        return min_bound
    if value > max_bound:
        return max_bound
    return value


def clamp_array(
    array: Sequence[float], min_bound: float, max_bound: float
) -> list[float]:
    """Return a copy of ``array`` with every value clamped to the bounds."""
    return [_clamp(value, min_bound, max_bound) for value in array]


def clamp_positions_bounce_velocities(
    positions: Sequence[float],
    velocities: Sequence[float],
    min_bound: float,
    max_bound: float,
) -> tuple[list[float], list[float]]:
    """Clamp positions to the bounds, reversing the velocity of any clamped axis.

    Velocities are afterwards clamped to the same bounds. Returns the new
    positions and velocities.
    """
    new_positions: list[float] = []
    new_velocities: list[float] = []
    for position, velocity in zip(positions, velocities, strict=True):
        if position < min_bound or position > max_bound:
            position = min_bound if position < min_bound else max_bound
            logger.info("Bounced velocities from %s to %s", velocity, -velocity)
            velocity = -velocity
        new_positions.append(position)
        new_velocities.append(_clamp(velocity, min_bound, max_bound))
    return new_positions, new_velocities


def _coordinates(dimensions: int, position: Sequence[float]) -> Sequence[float]:
    if len(position) < dimensions:
        raise ValueError(
            f"position has {len(position)} coordinates, {dimensions} required"
        )
    return position[:dimensions]


def rastrigin(dimensions: int, position: Sequence[float]) -> float:
    """Rastrigin function over the first ``dimensions`` coordinates."""
    return 10.0 * dimensions + sum(
        x * x - 10.0 * math.cos(2.0 * x * math.pi)
        for x in _coordinates(dimensions, position)
    )


def sphere(dimensions: int, position: Sequence[float]) -> float:
    """Sphere function (sum of squares) over the first ``dimensions`` coordinates."""
    return sum(x * x for x in _coordinates(dimensions, position))