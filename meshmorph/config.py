"""
Constants and defaults shared across meshmorph.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, TypeVar

import numpy as np

T = TypeVar('T')

# 16-bit fixed point RGBA
CHANNEL_MAX = 0xFFFF
CHANNELS = 4
PIXEL_DTYPE = np.uint16

# 8 bit <-> 16 bit channel widening factor (0xFF * 257 == 0xFFFF)
WIDEN_8_TO_16 = 257


class SplineKind(float, Enum):
    """Catmull-Rom knot exponents."""
    UNIFORM = 0.0
    CENTRIPETAL = 0.5
    CHORDAL = 1.0


@dataclass
class MorphSettings:
    """Per-run knobs for the morph pipeline.

    Args:
        alpha: Catmull-Rom knot exponent in [0, 1].
        vertical_steps: Samples per vertical spline. None uses the raster height.
        horizontal_steps: Samples per horizontal spline. None uses the raster width.
        crossing_tolerance: Distance under which two spline crossings are the same point.
    """
    alpha: float = SplineKind.CENTRIPETAL.value
    vertical_steps: Optional[int] = None
    horizontal_steps: Optional[int] = None
    crossing_tolerance: float = 1e-9


DEFAULT_SETTINGS = MorphSettings()


def value_or_default(value: Optional[T], default: T) -> T:
    """Return the value if it is not None, otherwise return the default."""
    return value if value is not None else default
