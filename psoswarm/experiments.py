"""The global-best particle swarm experiment and its command."""

from __future__ import annotations

import argparse
import logging
import random
from collections.abc import Sequence
from pathlib import Path

from psoswarm.problems import (
    FitnessFunction,
    clamp_positions_bounce_velocities,
    clean_function_name,
    rastrigin,
    sphere,
)
from psoswarm.swarm import GBestSwarm, MinMaxPair, SwarmParticle
from psoswarm.visualization import create_heatmap_2d

logger = logging.getLogger(__name__)

_POSITION_RANGE = MinMaxPair(-5.12, 5.12)
_VELOCITY_RANGE = MinMaxPair(-0.005, 0.005)
_PERSONAL_LEARNING_RATE = 0.2
_GLOBAL_LEARNING_RATE = 0.01
_INERTIA_WEIGHT = 0.3


def experiment_pso_best(
    particle_count: int,
    dimensions: int,
    iteration_count: int,
    fitness: FitnessFunction,
    min_boundary: float,
    max_boundary: float,
    output_dir: str | Path = "output",
    rng: random.Random | None = None,
) -> GBestSwarm:
    """Run the global-best swarm, maximising ``fitness``, and chart every step.

    One heatmap page per iteration is written to ``output_dir``. Returns the
    final swarm.
    """
    source = rng if rng is not None else random.Random()
    name = clean_function_name(fitness)
    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)

    swarm = GBestSwarm.create(
        particle_count,
        dimensions,
        [_POSITION_RANGE] * 2,
        [_VELOCITY_RANGE] * 2,
        _PERSONAL_LEARNING_RATE,
        _GLOBAL_LEARNING_RATE,
        _INERTIA_WEIGHT,
        source,
    )
    logger.info("Initial swarm: %s", swarm)

    previous = [fitness(dimensions, m.particle.positions) for m in swarm.particles]

    for iteration in range(iteration_count):
        logger.info("Iteration %s.", iteration)
        r1, r2 = source.random(), source.random()

        velocities = swarm.next_velocities(r1, r2)
        positions = swarm.next_positions(r1, r2, velocities)
        bounded = [
            clamp_positions_bounce_velocities(p, v, min_boundary, max_boundary)
            for p, v in zip(positions, velocities)
        ]
        swarm.update([p for p, _ in bounded], [v for _, v in bounded])

        current = [fitness(dimensions, m.particle.positions) for m in swarm.particles]

        for member, old, new in zip(swarm.particles, previous, current):
            # Improvements are reported only; personal best values keep their
            # initial value and so do not steer the velocities.
            if new > old:
                logger.info(
                    "New fitness value for particle: %s is %s", member.particle.id, new
                )
            if new > swarm.global_best.best_value:
                swarm.global_best = SwarmParticle(member.particle, new)
                logger.info(
                    "Found new best particle in a swarm: %s", swarm.global_best.particle
                )
        previous = current

        chart = create_heatmap_2d(
            [m.particle.positions for m in swarm.particles], fitness
        )
        page = out / f"pso_problem_{name}_{iteration:03d}.html"
        with page.open("w", encoding="utf-8") as stream:
            chart.render(stream)

    print(
        f"After {iteration_count} iterations, best value in swarm: "
        f"{swarm.global_best.best_value} in position: "
        f"{swarm.global_best.particle.positions}"
    )
    return swarm


def main(argv: Sequence[str] | None = None) -> int:
    """Run the experiment on the sphere and Rastrigin functions."""
    parser = argparse.ArgumentParser(
        description="Run a global-best particle swarm on benchmark functions."
    )
    parser.add_argument(
        "--output-dir", default="output", help="directory for the chart pages"
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    for fitness in (sphere, rastrigin):
        experiment_pso_best(30, 2, 15, fitness, -5.12, 5.12, args.output_dir, rng)
    return 0