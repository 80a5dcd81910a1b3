"""
Image I/O utilities for the dot-sketch pipeline.

This module provides:
    • load_image(path)
    • list_images(path_pattern)
    • image_name(filename)
    • sample_pixels(image, width, height)
    • ensure_output_dir(path)
    • save_image(path, image)

Handles all filesystem interaction in a consistent, testable way.
"""

import os
import glob
from typing import List, Optional

import cv2
import numpy as np

from errors import InvalidInput


# -------------------------------------------------------------------------
#  FILENAME HANDLING
# -------------------------------------------------------------------------

def image_name(filename: str) -> str:
    """
    Base name without directory or extension, used to name outputs.

    Example:
        'selected/cat.png' → 'cat'
    """
    return os.path.splitext(os.path.basename(filename))[0]


# -------------------------------------------------------------------------
#  IMAGE LOADING
# -------------------------------------------------------------------------

def list_images(path_pattern: str) -> List[str]:
    """Sorted list of files matching the glob pattern."""
    return sorted(glob.glob(path_pattern))


def load_image(path: str) -> Optional[np.ndarray]:
    """
    Decodes one image file, keeping an alpha channel when present.

    Returns None when the file cannot be decoded; callers treat that as an
    image that never became ready.
    """
    return cv2.imread(path, cv2.IMREAD_UNCHANGED)


# -------------------------------------------------------------------------
#  PIXEL SAMPLING
# -------------------------------------------------------------------------

def _to_rgba(image: np.ndarray) -> np.ndarray:
    if image.ndim == 2:
        return cv2.cvtColor(image, cv2.COLOR_GRAY2RGBA)

    if image.ndim == 3 and image.shape[2] == 1:
        return cv2.cvtColor(image[:, :, 0], cv2.COLOR_GRAY2RGBA)

    if image.ndim == 3 and image.shape[2] == 3:
        return cv2.cvtColor(image, cv2.COLOR_BGR2RGBA)

    if image.ndim == 3 and image.shape[2] == 4:
        return cv2.cvtColor(image, cv2.COLOR_BGRA2RGBA)

    raise InvalidInput(f"Unsupported image shape {image.shape}")


def sample_pixels(image: np.ndarray, width: int, height: int) -> np.ndarray:
    """
    Rescales an OpenCV image (gray, BGR or BGRA) to width x height and
    returns its pixels as a flat row-major RGBA uint8 buffer.

    INTER_AREA averages whole source blocks, which is what a browser does
    when drawing a large image into a tiny canvas. Color is averaged
    premultiplied by alpha, as a canvas stores it, so transparent pixels
    contribute no color and read back as (0, 0, 0, 0).
    """
    if image is None or image.size == 0:
        raise InvalidInput("Cannot sample an empty image")

    if image.dtype == np.uint16:
        image = (image >> 8).astype(np.uint8)
    elif image.dtype != np.uint8:
        raise InvalidInput(f"Unsupported image dtype {image.dtype}")

    rgba = _to_rgba(image).astype(np.float32)
    rgba[..., :3] *= rgba[..., 3:4] / 255.0

    small = cv2.resize(rgba, (int(width), int(height)), interpolation=cv2.INTER_AREA)
    small = small.reshape(int(height), int(width), 4)

    # un-premultiply; pixels that end up fully transparent keep no color
    alpha = small[..., 3:4]
    visible = np.rint(alpha) > 0
    safe_alpha = np.where(visible, alpha, 1.0)
    small[..., :3] = np.where(visible, small[..., :3] * 255.0 / safe_alpha, 0.0)

    return np.clip(np.rint(small), 0, 255).astype(np.uint8).reshape(-1)


# -------------------------------------------------------------------------
#  OUTPUT DIRECTORY HANDLING
# -------------------------------------------------------------------------

def ensure_output_dir(path: str):
    """
    Ensures that an output directory exists.
    """
    if path and not os.path.exists(path):
        os.makedirs(path, exist_ok=True)


# -------------------------------------------------------------------------
#  IMAGE SAVING
# -------------------------------------------------------------------------

def save_image(path: str, image: np.ndarray) -> bool:
    """
    Save an image to disk, ensuring the directory exists.
    """
    ensure_output_dir(os.path.dirname(path))
    return cv2.imwrite(path, image)
