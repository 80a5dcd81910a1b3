"""
Renders a RenderSet onto a DrawingSurface.

This module provides:
    • cell_center(point, width, height, resolution)
    • draw_grid_dots(surface, width, height, ...)
    • draw_polyline(surface, points, width, height, ...)
    • render(surface, render_set, width, height, ...)

Drawing order: clear, the fixed grid of dots, then one stroke per
polyline in RenderSet.strokes.
"""

from typing import Sequence, Tuple

from models.grid_point import GridPoint
from models.render_set import RenderSet
from visualization.surface import DrawingSurface
from config import get_active_params


# ---------------------------------------------------------------------
#  Geometry
# ---------------------------------------------------------------------

def cell_center(point, width, height, resolution) -> Tuple[float, float]:
    """Device coordinates of the center of a grid cell."""
    x, y = point
    cell_w = width / resolution
    cell_h = height / resolution
    return x * cell_w + cell_w / 2, y * cell_h + cell_h / 2


# ---------------------------------------------------------------------
#  Dots
# ---------------------------------------------------------------------

def draw_grid_dots(
    surface: DrawingSurface,
    width,
    height,
    resolution: int,
    radius=3,
    color: str = "black",
):
    """
    Draws resolution x resolution filled dots, one per cell center,
    regardless of what was detected.
    """
    for y in range(resolution):
        for x in range(resolution):
            cx, cy = cell_center((x, y), width, height, resolution)
            surface.fill_circle(cx, cy, radius, color)


# ---------------------------------------------------------------------
#  Lines
# ---------------------------------------------------------------------

def draw_polyline(
    surface: DrawingSurface,
    points: Sequence[GridPoint],
    width,
    height,
    resolution: int,
    color: str = "red",
    line_width=2,
) -> bool:
    """
    Strokes one polyline through the cell centers of `points`.
    Fewer than two points draw nothing; returns whether a stroke was made.
    """
    if len(points) < 2:
        return False

    surface.begin_path()
    for index, point in enumerate(points):
        px, py = cell_center(point, width, height, resolution)
        if index == 0:
            surface.move_to(px, py)
        else:
            surface.line_to(px, py)

    surface.stroke(color, line_width)
    return True


# ---------------------------------------------------------------------
#  Full render
# ---------------------------------------------------------------------

def render(surface: DrawingSurface, render_set: RenderSet, width, height, dot_radius=None):
    """
    Clears the surface and draws the dot grid plus every stroke of the
    render set. `dot_radius` overrides the configured radius (text previews
    use 0).
    """
    params = get_active_params(render_set.variant)
    resolution = params["RESOLUTION"]
    radius = params["DOT_RADIUS"] if dot_radius is None else dot_radius

    surface.clear(width, height)

    draw_grid_dots(surface, width, height, resolution, radius, params["DOT_COLOR"])

    for stroke_points in render_set.strokes:
        draw_polyline(
            surface,
            stroke_points,
            width,
            height,
            resolution,
            color=params["STROKE_COLOR"],
            line_width=params["STROKE_WIDTH"],
        )
