"""Color conversion utilities.

This module provides the color space conversion used to turn the color gene
into a display color. Separating it from the genetics code keeps the
conversion testable in isolation.

Design Note:
    These are pure functions with no simulation dependencies.
"""

import math
from typing import Tuple

# Genome colors use vivid, light tones
SLIME_COLOR_SATURATION = 1.0
SLIME_COLOR_LIGHTNESS = 0.7


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def hsl_to_rgb(hue_degrees: float, saturation: float, lightness: float) -> Tuple[int, int, int]:
    """Convert an HSL color to an RGB tuple.

    Uses the standard chroma/sector conversion with sector breakpoints every
    60 degrees.

    Args:
        hue_degrees: Hue in degrees (0-360)
        saturation: Saturation from 0.0 (gray) to 1.0 (vivid)
        lightness: Lightness from 0.0 (black) to 1.0 (white)

    Returns:
        Tuple of (R, G, B) values, each 0-255, rounded half up

    Example:
        >>> hsl_to_rgb(0.0, 1.0, 0.7)
        (255, 102, 102)
        >>> hsl_to_rgb(120.0, 1.0, 0.7)
        (102, 255, 102)
    """
    c = (1 - abs(2 * lightness - 1)) * saturation
    x = c * (1 - abs(((hue_degrees / 60) % 2) - 1))
    m = lightness - c / 2

    # 6-sector color wheel
    if hue_degrees < 60:
        r, g, b = c, x, 0.0
    elif hue_degrees < 120:
        r, g, b = x, c, 0.0
    elif hue_degrees < 180:
        r, g, b = 0.0, c, x
    elif hue_degrees < 240:
        r, g, b = 0.0, x, c
    elif hue_degrees < 300:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return (
        _round_half_up((r + m) * 255),
        _round_half_up((g + m) * 255),
        _round_half_up((b + m) * 255),
    )


def gene_to_rgb(color_gene: float) -> Tuple[int, int, int]:
    """Map a color gene value (0.0-1.0) to the slime's display color."""
    return hsl_to_rgb(color_gene * 360, SLIME_COLOR_SATURATION, SLIME_COLOR_LIGHTNESS)
