"""
Configuration file for the dot-sketch pipeline.

Contains both SEGMENTED and DIRECT parameter sets.
Modules should read values using the get_active_params() function.
"""

from errors import InvalidInput


# ---------------------------------------------------------------
# VARIANT SELECTION
# ---------------------------------------------------------------

# "segmented" splits edge points into polylines, "direct" draws one
PIPELINE_VARIANT = "segmented"


# ---------------------------------------------------------------
# I/O PATHS
# ---------------------------------------------------------------

SELECTED_IMAGE_PATTERN = "selected/*.png"
OUTPUT_FOLDER = "output"


# ===============================================================
# SEGMENTED-VARIANT PARAMETERS
# ===============================================================

SEGMENTED = {
    "SEGMENT_EDGES": True,
    "MAX_SEGMENTS_LOW": 2,      # kept below MID_THRESHOLD
    "SEGMENT_GAP": 1,           # |dx| above this starts a new segment
}


# ===============================================================
# DIRECT-VARIANT PARAMETERS
# ===============================================================

DIRECT = {
    "SEGMENT_EDGES": False,
    "MAX_SEGMENTS_LOW": None,
    "SEGMENT_GAP": None,
}

VARIANTS = {
    "segmented": SEGMENTED,
    "direct": DIRECT,
}


# ---------------------------------------------------------------
# SHARED PARAMETERS (used by both variants)
# ---------------------------------------------------------------

RESOLUTION = 9                     # dots per side
MID_THRESHOLD = 50                 # simple vs gradient split

SENSITIVITY_MIN = 0
SENSITIVITY_MAX = 100
DEFAULT_SENSITIVITY = 50

CANVAS_SIZE = 450                  # device units per side

DOT_RADIUS = 3
DOT_COLOR = "black"
STROKE_COLOR = "red"
STROKE_WIDTH = 2
BACKGROUND_COLOR = "white"


# ---------------------------------------------------------------
# SURFACE COLORS
# ---------------------------------------------------------------

COLORS_BGR = {
    "black": (0, 0, 0),
    "red": (0, 0, 255),
    "white": (255, 255, 255),
}

TEXT_GLYPHS = {
    "black": "o",
    "red": "#",
    "white": " ",
}


# ---------------------------------------------------------------
# PARAMETER ACCESS LOGIC
# ---------------------------------------------------------------

def get_active_params(variant=None):
    """
    Returns the active set of parameters:
    - A combination of SHARED + variant-specific constants.
    - Used by detectors, renderer and controller so they only import one dictionary.
    """
    if variant is None:
        variant = PIPELINE_VARIANT

    if variant not in VARIANTS:
        raise InvalidInput(
            f"Unknown pipeline variant {variant!r}; expected one of {sorted(VARIANTS)}"
        )

    base = {
        "VARIANT": variant,
        "RESOLUTION": RESOLUTION,
        "MID_THRESHOLD": MID_THRESHOLD,
        "SENSITIVITY_MIN": SENSITIVITY_MIN,
        "SENSITIVITY_MAX": SENSITIVITY_MAX,
        "DOT_RADIUS": DOT_RADIUS,
        "DOT_COLOR": DOT_COLOR,
        "STROKE_COLOR": STROKE_COLOR,
        "STROKE_WIDTH": STROKE_WIDTH,
    }

    # Merge in variant values
    base.update(VARIANTS[variant])

    return base
