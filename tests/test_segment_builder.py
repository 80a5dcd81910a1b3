from detectors.segment_builder import build_segments, prune_segments, segment_edges
from models.segment import Segment


def five_segments():
    return [Segment([(x * 3, 0)]) for x in range(5)]


def test_gap_greater_than_one_starts_new_segment():
    segments = build_segments([(0, 0), (1, 0), (5, 0)])

    assert [seg.points for seg in segments] == [[(0, 0), (1, 0)], [(5, 0)]]


def test_step_of_one_column_stays_in_segment():
    points = [(3, 0), (4, 0), (3, 1), (4, 1)]

    segments = build_segments(points)

    assert len(segments) == 1
    assert segments[0].points == points


def test_points_are_partitioned_not_changed():
    points = [(1, 0), (2, 0), (5, 0), (6, 0), (1, 1), (2, 1)]

    segments = build_segments(points)

    assert [p for seg in segments for p in seg] == points
    assert len(segments) == 3


def test_empty_input_gives_no_segments():
    assert build_segments([]) == []


def test_low_sensitivity_keeps_first_two_segments():
    segments = five_segments()

    kept = prune_segments(segments, 10)

    assert kept == segments[:2]


def test_high_sensitivity_keeps_all_segments():
    segments = five_segments()

    assert prune_segments(segments, 80) == segments
    assert prune_segments(segments, 50) == segments


def test_segment_edges_builds_then_prunes():
    points = [(0, 0), (4, 0), (8, 0), (0, 1), (4, 1)]

    assert len(segment_edges(points, 80)) == 5
    assert [seg.points for seg in segment_edges(points, 49)] == [[(0, 0)], [(4, 0)]]
