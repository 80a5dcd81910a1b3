"""
Visualization Tools

Provides drawing utilities for:
- Drawing surfaces (OpenCV image, terminal text)
- Rendering the dot grid and edge strokes
- Saving rendered sketches
"""

from .surface import DrawingSurface, ImageSurface
from .text_surface import TextSurface
from .renderer import cell_center, draw_grid_dots, draw_polyline, render
from .save_outputs import save_all_outputs, save_sketch, sketch_path

__all__ = [
    "DrawingSurface",
    "ImageSurface",
    "TextSurface",
    "cell_center",
    "draw_grid_dots",
    "draw_polyline",
    "render",
    "save_all_outputs",
    "save_sketch",
    "sketch_path",
]
