import numpy as np
import pytest

from pipeline.controller import PipelineController, parse_sensitivity, run_pipeline
from models.render_set import PipelineState
from errors import InvalidInput, NoImageLoaded
from config import get_active_params
from helpers import split_image, uniform_image


def stripes_image(cell=10):
    """White columns 2 and 6 on black: four edge cells per row at threshold 30."""
    image = np.zeros((9 * cell, 9 * cell, 3), dtype=np.uint8)
    for column in (2, 6):
        image[:, column * cell:(column + 1) * cell] = 255
    return image


# ----------------------------------------------------------------------
# parse_sensitivity
# ----------------------------------------------------------------------

def test_parse_sensitivity_accepts_control_values():
    assert parse_sensitivity("42") == 42
    assert parse_sensitivity(42.7) == 42
    assert parse_sensitivity("150") == 100
    assert parse_sensitivity(-3) == 0


def test_parse_sensitivity_rejects_garbage():
    with pytest.raises(InvalidInput):
        parse_sensitivity("high")
    with pytest.raises(InvalidInput):
        parse_sensitivity(None)


def test_unknown_variant_is_rejected(surface):
    with pytest.raises(InvalidInput):
        get_active_params("zigzag")
    with pytest.raises(InvalidInput):
        PipelineController(surface, variant="zigzag")


# ----------------------------------------------------------------------
# run_pipeline
# ----------------------------------------------------------------------

@pytest.mark.parametrize("sensitivity", [0, 10, 50, 51, 100])
@pytest.mark.parametrize("variant", ["segmented", "direct"])
def test_uniform_image_has_no_edges(sensitivity, variant):
    render_set = run_pipeline(uniform_image(), sensitivity, variant)

    assert render_set.points == []
    assert render_set.drawn_strokes == []


def test_vertical_split_end_to_end():
    render_set = run_pipeline(split_image(boundary=4), 30, "segmented")

    assert render_set.points == [(3, y) for y in range(9)]
    assert len(render_set.segments) == 1
    assert render_set.segments[0].points == render_set.points


def test_direct_variant_has_no_segments():
    render_set = run_pipeline(split_image(), 30, "direct")

    assert render_set.segments is None
    assert render_set.strokes == [render_set.points]


def test_variants_differ_below_mid_threshold():
    segmented = run_pipeline(stripes_image(), 30, "segmented")
    direct = run_pipeline(stripes_image(), 30, "direct")

    assert segmented.points == direct.points
    assert len(direct.points) == 36
    assert [s for s in segmented.drawn_strokes] == [[(1, 0), (2, 0)], [(5, 0), (6, 0)]]
    assert len(direct.drawn_strokes) == 1
    assert len(direct.drawn_strokes[0]) == 36


def test_segments_are_kept_at_high_sensitivity():
    render_set = run_pipeline(stripes_image(), 50, "segmented")

    assert len(render_set.segments) == 18


# ----------------------------------------------------------------------
# PipelineController events
# ----------------------------------------------------------------------

def test_sensitivity_change_without_image_is_a_no_op(surface):
    controller = PipelineController(surface, 90, 90)

    state = controller.on_sensitivity_changed("70")

    assert surface.calls == []
    assert state.sensitivity == 70
    assert state.last_render is None
    assert controller.state is state


def test_image_ready_renders(surface):
    controller = PipelineController(surface, 90, 90, "segmented", sensitivity=30)

    state = controller.on_image_ready(split_image())

    assert state.has_image
    assert state.last_render.points == [(3, y) for y in range(9)]
    assert surface.calls[0] == ("clear", 90, 90)
    assert len(surface.of_kind("circle")) == 81
    assert len(surface.of_kind("stroke")) == 1


def test_sensitivity_change_reruns_full_pipeline(surface):
    controller = PipelineController(surface, 90, 90, "direct", sensitivity=30)
    controller.on_image_ready(split_image())
    surface.calls.clear()

    state = controller.on_sensitivity_changed(60)

    assert state.sensitivity == 60
    assert len(state.last_render.points) == 18
    assert surface.calls[0] == ("clear", 90, 90)
    assert len(surface.of_kind("stroke")) == 1


def test_uniform_image_draws_dots_only(surface):
    controller = PipelineController(surface, 90, 90)

    controller.on_image_ready(uniform_image())

    assert len(surface.of_kind("circle")) == 81
    assert surface.of_kind("stroke") == []


def test_failed_run_keeps_previous_render(surface):
    controller = PipelineController(surface, 90, 90, sensitivity=30)
    good = controller.on_image_ready(split_image())
    drawn = list(surface.calls)

    with pytest.raises(InvalidInput):
        controller.on_image_ready(np.zeros((9, 9, 2), dtype=np.uint8))

    assert surface.calls == drawn
    assert controller.state is good


def test_state_requires_image():
    with pytest.raises(NoImageLoaded):
        PipelineState().require_image()


def test_transparent_half_does_not_create_edges():
    image = np.zeros((90, 90, 4), dtype=np.uint8)
    image[:, :45] = (255, 255, 255, 0)
    image[:, 45:] = (0, 0, 0, 255)

    render_set = run_pipeline(image, 30, "direct")

    assert render_set.points == []
