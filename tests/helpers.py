"""Synthetic images shared by the test modules."""

import numpy as np


def rgba_buffer(gray_rows):
    """Flat RGBA bytes for a 2D array of gray levels (alpha 255)."""
    gray = np.asarray(gray_rows, dtype=np.uint8)
    rgba = np.stack([gray, gray, gray, np.full_like(gray, 255)], axis=-1)
    return rgba.reshape(-1).tobytes()


def vertical_split(size=9, boundary=4):
    """Black columns left of `boundary`, white from it on."""
    gray = np.zeros((size, size), dtype=np.uint8)
    gray[:, boundary:] = 255
    return gray


def split_image(cell=10, boundary=4, resolution=9):
    """BGR image that downsamples exactly to vertical_split()."""
    side = cell * resolution
    image = np.zeros((side, side, 3), dtype=np.uint8)
    image[:, boundary * cell:] = 255
    return image


def uniform_image(level=128, side=64):
    return np.full((side, side, 3), level, dtype=np.uint8)
