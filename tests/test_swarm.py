import random

import pytest

from psoswarm.swarm import (
    GBestSwarm,
    MinMaxPair,
    Particle,
    SwarmParticle,
    create_random_particle,
)

POSITIONS = [MinMaxPair(-5.12, 5.12), MinMaxPair(-5.12, 5.12)]
VELOCITIES = [MinMaxPair(-0.005, 0.005), MinMaxPair(-0.005, 0.005)]


def _swarm(positions, velocities, best, global_best, c1, c2, w1):
    particle = Particle(0, len(positions), list(positions), list(velocities))
    member = SwarmParticle(particle, best)
    return GBestSwarm([member], SwarmParticle(particle, global_best), c1, c2, w1)


def test_random_particle_within_ranges():
    particle = create_random_particle(4, 2, POSITIONS, VELOCITIES, random.Random(1))
    assert particle.id == 4
    assert particle.dimensions == 2
    assert len(particle.positions) == 2
    assert all(-5.12 <= p < 5.12 for p in particle.positions)
    assert all(-0.005 <= v < 0.005 for v in particle.velocities)


def test_random_particle_range_count_mismatch():
    with pytest.raises(ValueError):
        create_random_particle(0, 3, POSITIONS, VELOCITIES, random.Random(1))


def test_create_swarm():
    swarm = GBestSwarm.create(5, 2, POSITIONS, VELOCITIES, 0.2, 0.01, 0.3, random.Random(2))
    assert swarm.size == 5
    assert [m.particle.id for m in swarm.particles] == list(range(5))
    assert all(m.best_value == 0.0 for m in swarm.particles)
    assert swarm.global_best.best_value == 0.0
    assert swarm.global_best.particle.positions is swarm.particles[0].particle.positions
    assert (swarm.c1, swarm.c2, swarm.w1) == (0.2, 0.01, 0.3)


def test_create_swarm_deterministic():
    a = GBestSwarm.create(3, 2, POSITIONS, VELOCITIES, 0.2, 0.01, 0.3, random.Random(9))
    b = GBestSwarm.create(3, 2, POSITIONS, VELOCITIES, 0.2, 0.01, 0.3, random.Random(9))
    assert [m.particle.positions for m in a.particles] == [
        m.particle.positions for m in b.particles
    ]


def test_create_empty_swarm_rejected():
    with pytest.raises(ValueError):
        GBestSwarm.create(0, 2, POSITIONS, VELOCITIES, 0.2, 0.01, 0.3)


def test_inertia_only_keeps_velocities():
    swarm = _swarm([1.0, -1.0], [0.5, -0.25], 3.0, 4.0, 0.0, 0.0, 1.0)
    assert swarm.next_velocities(0.7, 0.9) == [[0.5, -0.25]]


def test_zero_random_factors_scale_velocity():
    swarm = _swarm([1.0, -1.0], [0.5, -0.25], 3.0, 4.0, 0.2, 0.01, 1.0)
    assert swarm.next_velocities(0.0, 0.0) == [[0.5, -0.25]]


def test_personal_term_pulls_toward_best_value():
    swarm = _swarm([1.0, 3.0], [0.0, 0.0], 1.0, 0.0, 1.0, 0.0, 0.0)
    assert swarm.next_velocities(1.0, 0.0) == [[0.0, -2.0]]


def test_global_term_vanishes_at_global_value():
    swarm = _swarm([5.0, 5.0], [0.0, 0.0], 0.0, 5.0, 0.0, 1.0, 0.0)
    assert swarm.next_velocities(0.0, 1.0) == [[0.0, 0.0]]


def test_empty_swarm_has_no_velocities():
    particle = Particle(0, 2, [0.0, 0.0], [0.0, 0.0])
    swarm = GBestSwarm([], SwarmParticle(particle), 0.2, 0.01, 0.3)
    assert swarm.next_velocities(0.5, 0.5) == []


def test_next_positions_adds_velocities():
    swarm = GBestSwarm.create(4, 2, POSITIONS, VELOCITIES, 0.2, 0.01, 0.3, random.Random(3))
    velocities = swarm.next_velocities(0.4, 0.6)
    positions = swarm.next_positions(0.4, 0.6, velocities)
    for member, new, vel in zip(swarm.particles, positions, velocities):
        for old_p, new_p, v in zip(member.particle.positions, new, vel):
            assert new_p - old_p == pytest.approx(v)


def test_next_positions_with_zero_velocity():
    swarm = GBestSwarm.create(2, 2, POSITIONS, VELOCITIES, 0.2, 0.01, 0.3, random.Random(4))
    positions = swarm.next_positions(0.1, 0.2, [[0.0, 0.0], [0.0, 0.0]])
    assert positions == [m.particle.positions for m in swarm.particles]


def test_update_stores_values_and_keeps_global_alias():
    swarm = GBestSwarm.create(2, 2, POSITIONS, VELOCITIES, 0.2, 0.01, 0.3, random.Random(5))
    new_positions = [[1.0, 2.0], [3.0, 4.0]]
    new_velocities = [[0.1, 0.2], [0.3, 0.4]]
    swarm.update(new_positions, new_velocities)
    assert [m.particle.positions for m in swarm.particles] == new_positions
    assert [m.particle.velocities for m in swarm.particles] == new_velocities
    assert swarm.global_best.particle.positions == [1.0, 2.0]


def test_update_count_mismatch_rejected():
    swarm = GBestSwarm.create(2, 2, POSITIONS, VELOCITIES, 0.2, 0.01, 0.3, random.Random(6))
    with pytest.raises(ValueError):
        swarm.update([[1.0, 2.0]], [[0.1, 0.2]])