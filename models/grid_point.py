from typing import NamedTuple


class GridPoint(NamedTuple):
    """
    One cell of the intensity grid that was flagged as an edge.

    x is the column and y the row, both in [0, resolution).
    Being a NamedTuple, GridPoint(3, 4) == (3, 4).
    """

    x: int
    y: int

    def __repr__(self):
        return f"GridPoint(x={self.x}, y={self.y})"
