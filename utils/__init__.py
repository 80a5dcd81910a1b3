"""
Utility Functions

Image I/O helpers: decoding, rescaled RGBA sampling and saving.
"""

from .image_io import (
    load_image,
    list_images,
    image_name,
    sample_pixels,
    ensure_output_dir,
    save_image,
)

__all__ = [
    "load_image",
    "list_images",
    "image_name",
    "sample_pixels",
    "ensure_output_dir",
    "save_image",
]
