[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "psoswarm"
version = "0.1.0"
description = "Global-best particle swarm optimisation on benchmark functions, with per-iteration HTML heatmaps"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "particle swarm optimization",
    "pso",
    "optimization",
    "metaheuristics",
    "rastrigin",
    "sphere",
    "heatmap",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
psoswarm = "psoswarm.experiments:main"

[tool.hatch.build.targets.wheel]
packages = ["psoswarm"]

[tool.pytest.ini_options]
addopts = "-ra"
