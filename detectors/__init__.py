"""
Detectors Package

Contains the detection stages of the sketch pipeline:
- Grayscale reduction
- Edge detection (simple and gradient variants)
- Segment building
"""

from .grayscale import to_intensity_grid
from .edge_detector import (
    detect,
    select_variant,
    detect_simple_edges,
    detect_gradient_edges,
)
from .segment_builder import build_segments, prune_segments, segment_edges

__all__ = [
    "to_intensity_grid",
    "detect",
    "select_variant",
    "detect_simple_edges",
    "detect_gradient_edges",
    "build_segments",
    "prune_segments",
    "segment_edges",
]
