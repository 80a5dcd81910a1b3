"""
Pipeline controller: turns input events into renders.

This module provides:
    • parse_sensitivity(value)
    • run_pipeline(image, sensitivity, variant)
    • PipelineController
        - on_image_ready(image)
        - on_sensitivity_changed(value)

Every run is synchronous and recomputes the full render set. Nothing is
drawn until the render set is complete, so a failing run leaves the
previous sketch on the surface.
"""

import logging

from models.render_set import PipelineState, RenderSet
from detectors.grayscale import to_intensity_grid
from detectors.edge_detector import detect
from detectors.segment_builder import segment_edges
from visualization.renderer import render
from utils.image_io import sample_pixels
from errors import InvalidInput, NoImageLoaded
from config import get_active_params, CANVAS_SIZE, DEFAULT_SENSITIVITY

logger = logging.getLogger(__name__)


# ----------------------------------------------------------------------
# 1. INPUT PARSING
# ----------------------------------------------------------------------

def parse_sensitivity(value, params=None) -> int:
    """
    Converts a control value ("42", 42, 42.0) into an int clamped to
    [SENSITIVITY_MIN, SENSITIVITY_MAX].
    """
    if params is None:
        params = get_active_params()

    try:
        sensitivity = int(float(value))
    except (TypeError, ValueError) as exc:
        raise InvalidInput(f"Sensitivity must be a number, got {value!r}") from exc

    return max(params["SENSITIVITY_MIN"], min(params["SENSITIVITY_MAX"], sensitivity))


# ----------------------------------------------------------------------
# 2. ONE FULL RUN (image → render set)
# ----------------------------------------------------------------------

def run_pipeline(image, sensitivity: int, variant: str = None) -> RenderSet:
    """
    Runs every stage except drawing:

      1. sample the image into a resolution x resolution RGBA buffer
      2. reduce to an intensity grid
      3. detect edge points at `sensitivity`
      4. segment them (segmented variant only)

    Parameters
    ----------
    image : np.ndarray
        Decoded source image (gray, BGR or BGRA).
    sensitivity : int
        Edge threshold, also drives segment pruning.
    variant : str
        "segmented" or "direct"; defaults to config.PIPELINE_VARIANT.

    Returns
    -------
    RenderSet
    """
    params = get_active_params(variant)
    resolution = params["RESOLUTION"]

    pixels = sample_pixels(image, resolution, resolution)
    grid = to_intensity_grid(pixels, resolution)
    points = detect(grid, sensitivity)

    segments = None
    if params["SEGMENT_EDGES"]:
        segments = segment_edges(points, sensitivity)

    return RenderSet(
        variant=params["VARIANT"],
        sensitivity=sensitivity,
        points=points,
        segments=segments,
    )


# ----------------------------------------------------------------------
# 3. EVENT-DRIVEN CONTROLLER
# ----------------------------------------------------------------------

class PipelineController:
    """
    Owns a drawing surface and an explicit PipelineState.

    Two entry points, callable from any event loop:

        on_image_ready(image)          a decoded image arrived
        on_sensitivity_changed(value)  the sensitivity control moved

    Both return the new state. If a run raises, the state is not
    committed and the surface is left as it was.
    """

    def __init__(
        self,
        surface,
        width=CANVAS_SIZE,
        height=CANVAS_SIZE,
        variant: str = None,
        sensitivity=DEFAULT_SENSITIVITY,
        dot_radius=None,
    ):
        self.params = get_active_params(variant)
        self.variant = self.params["VARIANT"]
        self.surface = surface
        self.width = width
        self.height = height
        self.dot_radius = dot_radius
        self.state = PipelineState(sensitivity=parse_sensitivity(sensitivity, self.params))

    # ------------------------------------------------------------
    # Events
    # ------------------------------------------------------------
    def on_image_ready(self, image) -> PipelineState:
        return self._commit(self.state.with_image(image))

    def on_sensitivity_changed(self, value) -> PipelineState:
        new_state = self.state.with_sensitivity(parse_sensitivity(value, self.params))

        try:
            return self._commit(new_state)
        except NoImageLoaded:
            logger.debug("Sensitivity set to %d with no image loaded", new_state.sensitivity)
            self.state = new_state
            return new_state

    # ------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------
    def _commit(self, state: PipelineState) -> PipelineState:
        image = state.require_image()

        render_set = run_pipeline(image, state.sensitivity, self.variant)
        render(self.surface, render_set, self.width, self.height, dot_radius=self.dot_radius)

        logger.debug(
            "Rendered %s sketch at sensitivity %d: %d points, %d strokes",
            render_set.variant,
            render_set.sensitivity,
            len(render_set.points),
            len(render_set.drawn_strokes),
        )

        self.state = state.with_render(render_set)
        return self.state
