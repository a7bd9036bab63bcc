# psoswarm

A small global-best particle swarm optimiser (PSO) for two-dimensional
benchmark functions. At every iteration it writes an HTML page that shows
the swarm on top of a heatmap of the function.

## What is inside

- `psoswarm.problems`: the fitness functions `sphere` and `rastrigin`.
  Both take `(dimensions, position)` and raise `ValueError` if the
  position has fewer coordinates than `dimensions`. The module also has:
  - `clamp_array`, which returns a clamped copy of a list.
  - `clamp_positions_bounce_velocities`, which clamps positions to the
    bounds and reverses the velocity on every clamped axis. It then clamps
    the velocities to the same bounds and returns the new positions and
    velocities.
  - `function_name` and `clean_function_name`, which give the qualified
    name and the bare name of a fitness function.
- `psoswarm.rng`: `rand_range_int` and `rand_range_float`. They draw
  uniform values in `[low, high)`, from an optional `random.Random` or,
  if none is given, from the `random` module. `rand_range_int` raises
  `ValueError` for an empty range.
- `psoswarm.swarm`: `MinMaxPair`, `Particle`, `SwarmParticle` and
  `GBestSwarm`, and the function `create_random_particle`.
  - `create_random_particle` raises `ValueError` if the number of ranges
    does not match the number of dimensions.
  - `GBestSwarm.create` builds a swarm of random particles. The first
    particle starts as the global best. It raises `ValueError` for fewer
    than one particle.
  - `next_velocities` and `next_positions` compute the next step, and
    `update` stores it in place.
- `psoswarm.visualization`:
  - `function_surface_data` and `contour_data` sample a fitness function
    on a grid.
  - `create_3d_surface` builds a surface `Chart`, and `create_heatmap_2d`
    builds a heatmap `Chart` with the particles marked on it.
  - `Chart.to_options` returns the chart options as JSON-compatible data.
    `Chart.render` writes a standalone HTML page to a text stream.
- `psoswarm.experiments`:
  - `experiment_pso_best` runs a complete experiment and returns the
    final swarm.
  - `main` is the command-line entry point.

## Installing

```
pip install .
```

To run the tests, install the `test` extra and call pytest:

```
pip install ".[test]"
pytest
```

## Running the experiments

```
psoswarm [--output-dir DIR] [--seed N]
```

This runs two experiments, first on `sphere` and then on `rastrigin`.
Each uses 30 particles in 2 dimensions for 15 iterations, with positions
bounded to `[-5.12, 5.12]`.

- Each iteration writes one page, `pso_problem_<function>_<NNN>.html`, to
  the output directory. The default is `output`, and it is created if it
  is missing.
- `--seed` makes the run repeatable.
- When a run ends, the best value found and its position are printed.
  Progress messages go through the `logging` module.

## Using it from Python

```python
import random

from psoswarm.experiments import experiment_pso_best
from psoswarm.problems import rastrigin

swarm = experiment_pso_best(
    30, 2, 15, rastrigin, -5.12, 5.12,
    output_dir="output",
    rng=random.Random(42),
)
print(swarm.global_best.best_value)
```

Stepping a swarm yourself:

```python
import random

from psoswarm.swarm import GBestSwarm, MinMaxPair

rng = random.Random(1)
bounds = [MinMaxPair(-5.12, 5.12), MinMaxPair(-5.12, 5.12)]
speeds = [MinMaxPair(-0.005, 0.005), MinMaxPair(-0.005, 0.005)]
swarm = GBestSwarm.create(30, 2, bounds, speeds, 0.2, 0.01, 0.3, rng)

r1, r2 = rng.random(), rng.random()
velocities = swarm.next_velocities(r1, r2)
positions = swarm.next_positions(r1, r2, velocities)
swarm.update(positions, velocities)
```

## How the experiment behaves

- **It maximises.** The swarm's global best is replaced whenever a
  particle reaches a larger fitness value. Each particle's own
  `best_value` keeps its starting value of `0.0`, so improvements in a
  particle are only logged.
- **Its settings are fixed.** The experiment always creates particles
  from two position ranges of `[-5.12, 5.12]` and two velocity ranges of
  `[-0.005, 0.005]`. The personal learning rate is 0.2, the global
  learning rate 0.01 and the inertia weight 0.3.
- **The heatmaps cover a fixed area.** They span `[-5.12, 5.12]` on both
  axes at a resolution of 100.

## What it does not do

- **It does not ship the chart library.** The HTML pages load
  `echarts.min.js` from the directory they are in; the 3D surface page
  also loads `echarts-gl.min.js`. The package does not provide these
  scripts. Put them next to the pages before you open them.
- **It does not write 3D surface pages on its own.** The command only
  writes heatmaps. Surface charts are built only when you call
  `create_3d_surface` yourself.