import pytest

from visualization.surface import DrawingSurface


class RecordingSurface(DrawingSurface):
    """Keeps every primitive call so tests can inspect what was drawn."""

    def __init__(self):
        super().__init__()
        self.calls = []

    def clear(self, width, height):
        self.calls.append(("clear", width, height))
        self.begin_path()

    def fill_circle(self, cx, cy, r, color):
        self.calls.append(("circle", cx, cy, r, color))

    def _stroke_polyline(self, points, color, width):
        self.calls.append(("stroke", list(points), color, width))

    def of_kind(self, kind):
        return [c for c in self.calls if c[0] == kind]


@pytest.fixture
def surface():
    return RecordingSurface()

