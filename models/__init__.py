"""
Data Models

Defines the core data structures:
- GridPoint
- IntensityGrid
- Segment
- RenderSet / PipelineState
"""

from .grid_point import GridPoint
from .intensity_grid import IntensityGrid
from .segment import Segment
from .render_set import RenderSet, PipelineState

__all__ = ["GridPoint", "IntensityGrid", "Segment", "RenderSet", "PipelineState"]
