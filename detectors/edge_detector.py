"""
Threshold-driven edge detection on an IntensityGrid.

This module provides:
    • detect(grid, threshold)
    • select_variant(threshold)
    • detect_simple_edges(grid, threshold)
    • detect_gradient_edges(grid, threshold)

Both variants report edge cells in row-major scan order (y outer, x inner).
That order is what the segment builder later partitions, so it must not
change.
"""

import logging
from typing import List

import numpy as np

from models.grid_point import GridPoint
from models.intensity_grid import IntensityGrid
from config import MID_THRESHOLD

logger = logging.getLogger(__name__)


# ----------------------------------------------------------------------
#  NEIGHBOR LOOKUP
# ----------------------------------------------------------------------

def _neighbors(grid: IntensityGrid):
    """
    Returns (left, right, top, bottom) arrays aligned with grid.values.

    Edge padding repeats the border cell, so a neighbor that falls outside
    the grid takes the value of the cell itself.
    """
    padded = np.pad(grid.values, 1, mode="edge")
    left = padded[1:-1, :-2]
    right = padded[1:-1, 2:]
    top = padded[:-2, 1:-1]
    bottom = padded[2:, 1:-1]
    return left, right, top, bottom


def _points_above(gradient: np.ndarray, threshold) -> List[GridPoint]:
    # argwhere walks the array in C order: row (y) outer, column (x) inner
    rows_cols = np.argwhere(gradient > threshold)
    return [GridPoint(int(x), int(y)) for y, x in rows_cols]


# ----------------------------------------------------------------------
#  SIMPLE VARIANT (right / bottom differences)
# ----------------------------------------------------------------------

def detect_simple_edges(grid: IntensityGrid, threshold) -> List[GridPoint]:
    """
    gradient = sqrt((c - right)^2 + (c - bottom)^2)
    """
    current = grid.values
    _, right, _, bottom = _neighbors(grid)
    gradient = np.sqrt((current - right) ** 2 + (current - bottom) ** 2)
    return _points_above(gradient, threshold)


# ----------------------------------------------------------------------
#  GRADIENT VARIANT (central differences)
# ----------------------------------------------------------------------

def detect_gradient_edges(grid: IntensityGrid, threshold) -> List[GridPoint]:
    """
    gradient = sqrt((right - left)^2 + (bottom - top)^2)
    """
    left, right, top, bottom = _neighbors(grid)
    gradient_x = right - left
    gradient_y = bottom - top
    gradient = np.sqrt(gradient_x * gradient_x + gradient_y * gradient_y)
    return _points_above(gradient, threshold)


# ----------------------------------------------------------------------
#  DISPATCH
# ----------------------------------------------------------------------

def select_variant(threshold) -> str:
    """'simple' up to and including MID_THRESHOLD, 'gradient' above it."""
    return "simple" if threshold <= MID_THRESHOLD else "gradient"


def detect(grid: IntensityGrid, threshold) -> List[GridPoint]:
    """
    Detects edge cells, choosing the algorithm from the threshold alone.

    Parameters
    ----------
    grid : IntensityGrid
        Grayscale grid of the downsampled image.
    threshold : int | float
        Sensitivity. A cell is an edge iff its gradient is strictly greater.

    Returns
    -------
    list[GridPoint]
        Edge cells in row-major scan order.
    """
    variant = select_variant(threshold)

    if variant == "simple":
        points = detect_simple_edges(grid, threshold)
    else:
        points = detect_gradient_edges(grid, threshold)

    logger.debug("%s edge detection at threshold %s: %d points", variant, threshold, len(points))
    return points
