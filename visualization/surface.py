"""
Drawing surfaces the renderer paints on.

This module provides:
    • DrawingSurface   (path bookkeeping + primitive interface)
    • ImageSurface     (numpy BGR canvas drawn with OpenCV)

Colors are passed around by name ("black", "red", ...) and each surface
maps them to its own representation.
"""

from typing import List, Tuple

import cv2
import numpy as np

from config import COLORS_BGR, BACKGROUND_COLOR


# ---------------------------------------------------------------------
#  BASE: path handling shared by every surface
# ---------------------------------------------------------------------

class DrawingSurface:
    """
    Canvas-style drawing primitives:

        clear(w, h)
        fill_circle(cx, cy, r, color)
        begin_path() / move_to(x, y) / line_to(x, y) / stroke(color, width)

    Subclasses implement clear, fill_circle and _stroke_polyline.
    """

    def __init__(self):
        self._subpaths: List[List[Tuple[float, float]]] = []

    # -------------------------------------------------------------
    #   Primitives implemented by subclasses
    # -------------------------------------------------------------

    def clear(self, width, height):
        raise NotImplementedError

    def fill_circle(self, cx, cy, r, color):
        raise NotImplementedError

    def _stroke_polyline(self, points, color, width):
        raise NotImplementedError

    # -------------------------------------------------------------
    #   Path building
    # -------------------------------------------------------------

    def begin_path(self):
        self._subpaths = []

    def move_to(self, x, y):
        self._subpaths.append([(x, y)])

    def line_to(self, x, y):
        if not self._subpaths:
            # a line_to without a current point behaves like move_to
            self._subpaths.append([(x, y)])
            return
        self._subpaths[-1].append((x, y))

    def stroke(self, color, width):
        for points in self._subpaths:
            if len(points) >= 2:
                self._stroke_polyline(points, color, width)


# ---------------------------------------------------------------------
#  OpenCV image canvas
# ---------------------------------------------------------------------

class ImageSurface(DrawingSurface):
    """
    Draws onto a BGR uint8 numpy array.

    Coordinates are floats; they are passed to OpenCV as fixed-point values
    (SHIFT fractional bits) so cell centers keep sub-pixel accuracy.
    """

    SHIFT = 4

    def __init__(self, width=1, height=1):
        super().__init__()
        self.image = None
        self.clear(width, height)

    @property
    def width(self):
        return self.image.shape[1]

    @property
    def height(self):
        return self.image.shape[0]

    def _bgr(self, color):
        return COLORS_BGR.get(color, COLORS_BGR["black"])

    def _fixed(self, value):
        return int(round(value * (1 << self.SHIFT)))

    def clear(self, width, height):
        self.image = np.full(
            (int(height), int(width), 3),
            self._bgr(BACKGROUND_COLOR),
            dtype=np.uint8,
        )
        self.begin_path()

    def fill_circle(self, cx, cy, r, color):
        cv2.circle(
            self.image,
            (self._fixed(cx), self._fixed(cy)),
            self._fixed(r),
            self._bgr(color),
            thickness=-1,
            lineType=cv2.LINE_AA,
            shift=self.SHIFT,
        )

    def _stroke_polyline(self, points, color, width):
        pts = np.array(
            [[self._fixed(x), self._fixed(y)] for x, y in points],
            dtype=np.int32,
        ).reshape(-1, 1, 2)

        cv2.polylines(
            self.image,
            [pts],
            isClosed=False,
            color=self._bgr(color),
            thickness=int(width),
            lineType=cv2.LINE_AA,
            shift=self.SHIFT,
        )
