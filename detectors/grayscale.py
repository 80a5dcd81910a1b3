"""
Grayscale reduction of a resized RGBA pixel buffer.

This module provides:
    • to_intensity_grid(pixels, resolution)
"""

import logging

import numpy as np

from models.intensity_grid import IntensityGrid
from errors import InvalidInput
from config import RESOLUTION

logger = logging.getLogger(__name__)


def _as_byte_array(pixels) -> np.ndarray:
    if isinstance(pixels, (bytes, bytearray, memoryview)):
        return np.frombuffer(pixels, dtype=np.uint8)
    return np.asarray(pixels).ravel()


def to_intensity_grid(pixels, resolution: int = RESOLUTION) -> IntensityGrid:
    """
    Converts an RGBA buffer into an IntensityGrid.

    Each cell is the plain average of the R, G and B channels of its pixel.
    Alpha is ignored.

    Parameters
    ----------
    pixels : bytes | bytearray | sequence | np.ndarray
        Row-major RGBA values, 4 per pixel, resolution² pixels.
    resolution : int
        Side length of the grid.

    Returns
    -------
    IntensityGrid

    Raises
    ------
    InvalidInput
        If the buffer length is not a multiple of 4 or does not hold
        exactly resolution² pixels.
    """
    data = _as_byte_array(pixels)
    expected = resolution * resolution * 4

    if data.size % 4 != 0:
        raise InvalidInput(f"Pixel buffer length {data.size} is not a multiple of 4")
    if data.size != expected:
        raise InvalidInput(
            f"Pixel buffer length {data.size} does not match {resolution}x{resolution} RGBA ({expected})"
        )

    rgba = data.reshape(resolution, resolution, 4).astype(np.float64)
    gray = (rgba[..., 0] + rgba[..., 1] + rgba[..., 2]) / 3

    grid = IntensityGrid(gray)
    logger.debug("Built %r", grid)
    return grid
