"""
Groups ordered edge points into drawable segments.

This module provides:
    • build_segments(points, gap)
    • prune_segments(segments, sensitivity)
    • segment_edges(points, sensitivity)
"""

import logging
from typing import List, Sequence

from models.grid_point import GridPoint
from models.segment import Segment
from config import get_active_params

logger = logging.getLogger(__name__)


def build_segments(points: Sequence[GridPoint], gap: int = None) -> List[Segment]:
    """
    Splits the point sequence wherever consecutive points jump more than
    `gap` columns apart. The jump starts a new segment with the later point.

    Points are only partitioned: none is added, dropped or reordered.

    Example:
        [(0,0), (1,0), (5,0)]  ->  [[(0,0), (1,0)], [(5,0)]]
    """
    if gap is None:
        gap = get_active_params("segmented")["SEGMENT_GAP"]

    points = [GridPoint(*p) for p in points]
    segments = []
    current = Segment()

    for i, point in enumerate(points):
        if i > 0 and abs(points[i - 1].x - point.x) > gap:
            segments.append(current)
            current = Segment()
        current.add_point(point)

    if current:
        segments.append(current)

    return segments


def prune_segments(segments: List[Segment], sensitivity, keep: int = None) -> List[Segment]:
    """
    Below the mid threshold only the first `keep` segments survive;
    at or above it every segment is returned unchanged.
    """
    params = get_active_params("segmented")
    if keep is None:
        keep = params["MAX_SEGMENTS_LOW"]

    if sensitivity < params["MID_THRESHOLD"]:
        return segments[:keep]
    return segments


def segment_edges(points: Sequence[GridPoint], sensitivity) -> List[Segment]:
    """Build, then prune according to sensitivity."""
    segments = build_segments(points)
    kept = prune_segments(segments, sensitivity)

    if len(kept) < len(segments):
        logger.debug("Sensitivity %s: kept %d of %d segments", sensitivity, len(kept), len(segments))

    return kept
