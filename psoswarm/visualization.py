"""Chart descriptions of two-dimensional fitness landscapes and swarm positions."""

from __future__ import annotations

import copy
import html
import json
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, TextIO

from psoswarm.problems import FitnessFunction, clean_function_name

_LOW = -5.12
_HIGH = 5.12
_SPAN = 10.24
_HEATMAP_RESOLUTION = 100
_SURFACE_RESOLUTION = 50
_PARTICLE_MARK = 150


def _axis_values(low: float, high: float, resolution: int) -> list[float]:
    if resolution < 2:
        raise ValueError(f"resolution must be at least 2, got {resolution}")
    step = (high - low) / (resolution - 1)
    return [low + i * step for i in range(resolution)]


def function_surface_data(
    x_min: float,
    x_max: float,
    y_min: float,
    y_max: float,
    resolution: int,
    fitness: FitnessFunction,
) -> list[tuple[float, float, float]]:
    """Sample ``fitness`` on a grid as ``(x, y, z)`` points, x varying slowest."""
    xs = _axis_values(x_min, x_max, resolution)
    ys = _axis_values(y_min, y_max, resolution)
    return [(x, y, fitness(2, [x, y])) for x in xs for y in ys]


def contour_data(
    x_min: float,
    x_max: float,
    y_min: float,
    y_max: float,
    resolution: int,
    fitness: FitnessFunction,
) -> tuple[list[list[float]], list[float], list[float]]:
    """Sample ``fitness`` on a grid, one row per y value.

    Returns the rows together with the x and y axis values.
    """
    xs = _axis_values(x_min, x_max, resolution)
    ys = _axis_values(y_min, y_max, resolution)
    rows = [[fitness(2, [x, y]) for x in xs] for y in ys]
    return rows, xs, ys


@dataclass
class Chart:
    """A chart description that renders to a standalone HTML page."""

    kind: str
    title: str
    series: list[dict[str, Any]] = field(default_factory=list)
    theme: str = "white"
    x_axis: dict[str, Any] | None = None
    y_axis: dict[str, Any] | None = None
    visual_map: dict[str, Any] | None = None
    width: str = "900px"
    height: str = "500px"
    script_assets: tuple[str, ...] = ("echarts.min.js",)

    def to_options(self) -> dict[str, Any]:
        """Return the chart options as JSON-compatible data."""
        options: dict[str, Any] = {
            "title": {"text": self.title},
            "series": copy.deepcopy(self.series),
        }
        if self.x_axis is not None:
            options["xAxis"] = copy.deepcopy(self.x_axis)
        if self.y_axis is not None:
            options["yAxis"] = copy.deepcopy(self.y_axis)
        if self.visual_map is not None:
            options["visualMap"] = copy.deepcopy(self.visual_map)
        if self.kind == "surface":
            options["xAxis3D"] = {"type": "value"}
            options["yAxis3D"] = {"type": "value"}
            options["zAxis3D"] = {"type": "value"}
            options["grid3D"] = {}
        return options

    def render(self, stream: TextIO) -> None:
        """Write the chart as an HTML page to ``stream``."""
        chart_id = f"chart-{self.kind}"
        options = json.dumps(self.to_options()).replace("</", "<\\/")
        scripts = "\n".join(
            f'    <script src="{html.escape(asset)}"></script>'
            for asset in self.script_assets
        )
        stream.write(
            "<!DOCTYPE html>\n"
            "<html>\n"
            "<head>\n"
            '    <meta charset="utf-8">\n'
            f"    <title>{html.escape(self.title)}</title>\n"
            f"{scripts}\n"
            "</head>\n"
            "<body>\n"
            f'<div id="{chart_id}" style="width:{self.width};height:{self.height};"></div>\n'
            f'<script type="application/json" id="{chart_id}-options">{options}</script>\n'
            "<script>\n"
            f'  var chart = echarts.init(document.getElementById("{chart_id}"), '
            f"{json.dumps(self.theme)});\n"
            f'  chart.setOption(JSON.parse(document.getElementById("{chart_id}-options").textContent));\n'
            "</script>\n"
            "</body>\n"
            "</html>\n"
        )


def create_3d_surface(fitness: FitnessFunction) -> Chart:
    """Build a 3D surface chart of ``fitness`` over the standard domain."""
    data = function_surface_data(
        _LOW, _HIGH, _LOW, _HIGH, _SURFACE_RESOLUTION, fitness
    )
    return Chart(
        kind="surface",
        title="2D Rastrigin Function",
        theme="westeros",
        series=[
            {
                "name": "Rastrigin",
                "type": "surface",
                "data": [{"value": list(point)} for point in data],
                "itemStyle": {"opacity": 0.8},
            }
        ],
        script_assets=("echarts.min.js", "echarts-gl.min.js"),
    )


def _grid_index(coordinate: float) -> int:
    index = int((coordinate - _LOW) * _HEATMAP_RESOLUTION / _SPAN)
    return min(max(index, 0), _HEATMAP_RESOLUTION - 1)


def create_heatmap_2d(
    particle_positions: Sequence[Sequence[float]], fitness: FitnessFunction
) -> Chart:
    """Build a heatmap of ``fitness`` with the particles marked on top."""
    name = clean_function_name(fitness)
    rows, xs, ys = contour_data(
        _LOW, _HIGH, _LOW, _HIGH, _HEATMAP_RESOLUTION, fitness
    )
    heat_data = [
        {"value": [j, i, value]}
        for i, row in enumerate(rows)
        for j, value in enumerate(row)
    ]
    particle_data = [
        {"value": [_grid_index(pos[0]), _grid_index(pos[1]), _PARTICLE_MARK]}
        for pos in particle_positions
    ]
    return Chart(
        kind="heatmap",
        title=f"2D {name} Plot",
        x_axis={"type": "category", "data": [f"{v:.1f}" for v in xs]},
        y_axis={"type": "category", "data": [f"{v:.1f}" for v in ys]},
        visual_map={"calculable": True, "min": 0, "max": 100},
        series=[
            {"name": name, "type": "heatmap", "data": heat_data},
            {
                "name": "Particles",
                "type": "heatmap",
                "data": particle_data,
                "itemStyle": {"color": "red"},
            },
        ],
    )