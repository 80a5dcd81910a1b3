from dataclasses import dataclass, field
from typing import List

from models.grid_point import GridPoint


@dataclass
class Segment:
    """
    An ordered run of edge points drawn as one connected polyline.

    Membership comes from scan order, not spatial adjacency, so two
    segments may still cross on the canvas.
    """

    points: List[GridPoint] = field(default_factory=list)

    def add_point(self, point: GridPoint):
        self.points.append(point)

    def __len__(self):
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    def __bool__(self):
        return bool(self.points)
