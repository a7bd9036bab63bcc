"""Global-best particle swarm optimisation on benchmark functions, with HTML heatmaps."""

__version__ = "0.1.0"