from dataclasses import dataclass, field, replace
from typing import Any, List, Optional

from models.grid_point import GridPoint
from models.segment import Segment
from errors import NoImageLoaded
from config import DEFAULT_SENSITIVITY


@dataclass(frozen=True)
class RenderSet:
    """
    Everything one pipeline run produced for the renderer.

    `segments` is None for the direct variant, which draws the whole
    edge point set as a single polyline.
    """

    variant: str
    sensitivity: int
    points: List[GridPoint] = field(default_factory=list)
    segments: Optional[List[Segment]] = None

    @property
    def strokes(self) -> List[List[GridPoint]]:
        """Point sequences to draw, one polyline each."""
        if self.segments is None:
            return [list(self.points)]
        return [list(seg.points) for seg in self.segments]

    @property
    def drawn_strokes(self) -> List[List[GridPoint]]:
        """Strokes long enough to produce a line."""
        return [s for s in self.strokes if len(s) >= 2]


@dataclass(frozen=True)
class PipelineState:
    """
    Explicit controller state.

    Handlers never mutate a state; they return a new one with
    dataclasses.replace, so a failed run can simply drop it.
    """

    image: Optional[Any] = None
    sensitivity: int = DEFAULT_SENSITIVITY
    last_render: Optional[RenderSet] = None

    @property
    def has_image(self) -> bool:
        return self.image is not None

    def require_image(self):
        if self.image is None:
            raise NoImageLoaded("No source image has been loaded yet")
        return self.image

    def with_image(self, image) -> "PipelineState":
        return replace(self, image=image)

    def with_sensitivity(self, sensitivity: int) -> "PipelineState":
        return replace(self, sensitivity=sensitivity)

    def with_render(self, render_set: RenderSet) -> "PipelineState":
        return replace(self, last_render=render_set)
