"""
Output-saving utilities for rendered sketches.

This module provides:
    • sketch_path(output_dir, image_id, sensitivity)
    • save_sketch(path, surface)
    • save_all_outputs(...)

Uses utils.image_io for filesystem handling.
"""

from visualization.surface import ImageSurface
from utils.image_io import save_image, ensure_output_dir


def sketch_path(output_dir: str, image_id: str, sensitivity: int) -> str:
    """
    Example:
        output/cat_s50.png
    """
    return f"{output_dir}/{image_id}_s{sensitivity}.png"


def save_sketch(path: str, surface: ImageSurface) -> bool:
    """
    Writes the current contents of an ImageSurface to disk.
    """
    return save_image(path, surface.image)


def save_all_outputs(
    output_dir: str,
    image_id: str,
    sensitivity: int,
    surface: ImageSurface,
):
    """
    Saves every output artifact for one rendered sketch:

        <id>_s<sensitivity>.png   the sketch

    Returns the sketch path.
    """
    ensure_output_dir(output_dir)

    path = sketch_path(output_dir, image_id, sensitivity)
    save_sketch(path, surface)
    return path
