"""
Character-grid drawing surface for terminal previews.

Rasterizes strokes and dots with pybresenham, one character per device
unit. Each color maps to a glyph (see config.TEXT_GLYPHS).
"""

from typing import Dict, List

import pybresenham as bres

from visualization.surface import DrawingSurface
from config import TEXT_GLYPHS


class TextSurface(DrawingSurface):

    def __init__(self, width=1, height=1, glyphs: Dict[str, str] = None):
        super().__init__()
        self.glyphs = dict(TEXT_GLYPHS if glyphs is None else glyphs)
        self.rows: List[List[str]] = []
        self.clear(width, height)

    @property
    def width(self):
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self):
        return len(self.rows)

    def _glyph(self, color):
        return self.glyphs.get(color, "*")

    def _plot(self, x, y, glyph):
        if 0 <= x < self.width and 0 <= y < self.height:
            self.rows[y][x] = glyph

    def clear(self, width, height):
        self.rows = [[" "] * int(width) for _ in range(int(height))]
        self.begin_path()

    def fill_circle(self, cx, cy, r, color):
        glyph = self._glyph(color)
        cx, cy, r = int(cx), int(cy), int(round(r))

        if r <= 0:
            self._plot(cx, cy, glyph)
            return

        # fill each row between the outermost outline pixels
        spans = {}
        for x, y in bres.circle(cx, cy, r):
            lo, hi = spans.get(y, (x, x))
            spans[y] = (min(lo, x), max(hi, x))

        for y, (lo, hi) in spans.items():
            for x in range(lo, hi + 1):
                self._plot(x, y, glyph)

    def _stroke_polyline(self, points, color, width):
        # width is ignored: one character is already wider than a 2px stroke
        glyph = self._glyph(color)
        for (x1, y1), (x2, y2) in zip(points, points[1:]):
            for x, y in bres.line(int(x1), int(y1), int(x2), int(y2)):
                self._plot(int(x), int(y), glyph)

    def to_text(self) -> str:
        return "\n".join("".join(row).rstrip() for row in self.rows)

    def __str__(self):
        return self.to_text()
