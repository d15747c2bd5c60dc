"""
Saturating arithmetic on 16-bit fixed point RGBA colors.

Channels live in [0, CHANNEL_MAX]. Scaling rounds half up; anything that
would leave the channel range is clamped to it instead of wrapping.
"""
import math
from typing import Sequence

import numpy as np
from boundednumbers import clamp

from ..config import CHANNEL_MAX, PIXEL_DTYPE
from ..types.raster_types import Color


def weight_channel(value: int, weight: float) -> int:
    """Scale one channel by weight, rounding half up and saturating."""
    return clamp(math.floor(value * weight + 0.5), 0, CHANNEL_MAX)


def add_channels(value: int, other: int) -> int:
    return clamp(value + other, 0, CHANNEL_MAX)


def weight_color(color: Sequence[int], weight: float) -> Color:
    """Scale every channel of color by weight."""
    r, g, b, a = color
    return (weight_channel(r, weight), weight_channel(g, weight),
            weight_channel(b, weight), weight_channel(a, weight))


def add_colors(color: Sequence[int], other: Sequence[int]) -> Color:
    """Channel-wise saturating sum."""
    r, g, b, a = color
    r2, g2, b2, a2 = other
    return (add_channels(r, r2), add_channels(g, g2),
            add_channels(b, b2), add_channels(a, a2))


def interpolate_colors(color: Sequence[int], other: Sequence[int], weight: float) -> Color:
    """weight of color plus (1 - weight) of other."""
    return add_colors(weight_color(color, weight), weight_color(other, 1.0 - weight))


# =============================================================================
# Whole-raster variants
# =============================================================================
def weight_array(pixels: np.ndarray, weight: float) -> np.ndarray:
    """weight_color applied to every pixel; returns int64 so sums cannot wrap."""
    scaled = np.floor(pixels.astype(np.float64) * weight + 0.5)
    return np.clip(scaled, 0, CHANNEL_MAX).astype(np.int64)


def add_arrays(pixels: np.ndarray, other: np.ndarray) -> np.ndarray:
    """add_colors applied pixel by pixel."""
    total = pixels.astype(np.int64) + other.astype(np.int64)
    return np.clip(total, 0, CHANNEL_MAX).astype(np.int64)


def to_pixels(arr: np.ndarray) -> np.ndarray:
    """Clamp and narrow an accumulator array to the pixel dtype."""
    return np.clip(arr, 0, CHANNEL_MAX).astype(PIXEL_DTYPE)
