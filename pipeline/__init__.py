"""
Pipeline Package

Orchestrates one sketch run (sampling, grayscale, edges, segments, render)
and exposes the event entry points used by front ends.
"""

from .controller import PipelineController, run_pipeline, parse_sensitivity

__all__ = [
    "PipelineController",
    "run_pipeline",
    "parse_sensitivity",
]
