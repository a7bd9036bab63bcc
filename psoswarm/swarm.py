"""Particles and a global-best particle swarm."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from dataclasses import dataclass, field

from psoswarm.rng import rand_range_float

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MinMaxPair:
    """Inclusive-exclusive range for one dimension."""

    low: float
    high: float


@dataclass
class Particle:
    """A particle's position and velocity in every dimension."""

    id: int
    dimensions: int
    positions: list[float] = field(default_factory=list)
    velocities: list[float] = field(default_factory=list)


@dataclass
class SwarmParticle:
    """A particle together with its best fitness value."""

    particle: Particle
    best_value: float = 0.0


def create_random_particle(
    particle_id: int,
    dimensions: int,
    min_max_positions: Sequence[MinMaxPair],
    min_max_velocities: Sequence[MinMaxPair],
    rng: random.Random | None = None,
) -> Particle:
    """Create a particle with positions and velocities drawn from the given ranges."""
    if len(min_max_positions) != dimensions or len(min_max_velocities) != dimensions:
        raise ValueError(
            f"expected {dimensions} position and velocity ranges, got "
            f"{len(min_max_positions)} and {len(min_max_velocities)}"
        )
    positions: list[float] = []
    velocities: list[float] = []
    for pos_range, vel_range in zip(min_max_positions, min_max_velocities):
        positions.append(rand_range_float(pos_range.low, pos_range.high, rng))
        velocities.append(rand_range_float(vel_range.low, vel_range.high, rng))
    particle = Particle(particle_id, dimensions, positions, velocities)
    logger.debug("Particle created: %s", particle)
    return particle


@dataclass
class GBestSwarm:
    """Swarm whose particles learn from their own and the global best value."""

    particles: list[SwarmParticle]
    global_best: SwarmParticle
    c1: float  # personal learning coefficient
    c2: float  # global learning coefficient
    w1: float  # inertia weight

    @property
    def size(self) -> int:
        return len(self.particles)

    @classmethod
    def create(
        cls,
        size: int,
        dimensions: int,
        min_max_positions: Sequence[MinMaxPair],
        min_max_velocities: Sequence[MinMaxPair],
        c1: float,
        c2: float,
        w1: float,
        rng: random.Random | None = None,
    ) -> GBestSwarm:
        """Create a swarm of random particles; the first one starts as global best."""
        if size < 1:
            raise ValueError("a swarm needs at least one particle")
        particles = [
            SwarmParticle(
                create_random_particle(
                    i, dimensions, min_max_positions, min_max_velocities, rng
                )
            )
            for i in range(size)
        ]
        # The global best shares the first particle's coordinate lists.
        global_best = SwarmParticle(particles[0].particle, particles[0].best_value)
        return cls(particles, global_best, c1, c2, w1)

    def next_velocities(self, r1: float, r2: float) -> list[list[float]]:
        """Compute every particle's velocity for the next step."""
        result: list[list[float]] = []
        for member in self.particles:
            particle = member.particle
            row: list[float] = []
            for dim, (velocity, position) in enumerate(
                zip(particle.velocities, particle.positions), start=1
            ):
                value = (
                    self.w1 * velocity
                    + self.c1 * r1 * (member.best_value - position)
                    + self.c2 * r2 * (self.global_best.best_value - position)
                )
                logger.debug(
                    "Velocity calculated for particle %s in dimension %s is %s",
                    particle.id,
                    dim,
                    value,
                )
                row.append(value)
            result.append(row)
        return result

    def next_positions(
        self, r1: float, r2: float, velocities: Sequence[Sequence[float]]
    ) -> list[list[float]]:
        """Compute every particle's position after moving by ``velocities``."""
        result: list[list[float]] = []
        for member, particle_velocities in zip(self.particles, velocities, strict=True):
            row = [
                position + velocity
                for position, velocity in zip(
                    member.particle.positions, particle_velocities
                )
            ]
            logger.debug("Particle %s set in position: %s", member.particle.id, row)
            result.append(row)
        return result

    def update(
        self,
        new_positions: Sequence[Sequence[float]],
        new_velocities: Sequence[Sequence[float]],
    ) -> None:
        """Store new positions and velocities in the particles, in place."""
        for member, positions, velocities in zip(
            self.particles, new_positions, new_velocities, strict=True
        ):
            logger.debug(
                "For particle %s setting positions: %s", member.particle.id, positions
            )
            member.particle.positions[:] = positions
            member.particle.velocities[:] = velocities