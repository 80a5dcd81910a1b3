"""
Exception types raised by the dot-sketch pipeline.
"""


class SketchError(Exception):
    """Base class for every error raised by this package."""


class InvalidInput(SketchError, ValueError):
    """
    Input that cannot be processed: a pixel buffer of the wrong length,
    an image array of unexpected shape, an unparseable sensitivity value
    or an unknown pipeline variant.

    A run that raises this never reaches the drawing surface, so whatever
    was rendered before stays on screen.
    """


class NoImageLoaded(SketchError):
    """A pipeline run was requested before any source image arrived."""
