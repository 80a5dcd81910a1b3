import numpy as np


class IntensityGrid:
    """
    Square grid of luminance values, one per grid cell.

    Supports:
      - (x, y) lookup where x is the column and y the row
      - read-only access to the underlying (resolution, resolution) array

    The wrapped array is copied and its write flag cleared, so a grid
    cannot change after it is built.
    """

    def __init__(self, values):
        arr = np.array(values, dtype=np.float64)

        if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
            raise ValueError(f"IntensityGrid needs a square 2D array, got shape {arr.shape}")

        arr.setflags(write=False)
        self._values = arr

    # ------------------------------------------------------------
    # Basic properties
    # ------------------------------------------------------------
    @property
    def resolution(self) -> int:
        return self._values.shape[0]

    @property
    def values(self) -> np.ndarray:
        """Row-major (y, x) array view. Read-only."""
        return self._values

    def __len__(self):
        return self._values.size

    # ------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------
    def at(self, x: int, y: int) -> float:
        return float(self._values[y, x])

    # ------------------------------------------------------------
    # Repr
    # ------------------------------------------------------------
    def __repr__(self):
        return (
            f"IntensityGrid(resolution={self.resolution}, "
            f"min={self._values.min():.1f}, max={self._values.max():.1f})"
        )
