from __future__ import annotations
from typing import Optional, Sequence, Tuple

import numpy as np

from ..config import CHANNEL_MAX, CHANNELS, PIXEL_DTYPE, WIDEN_8_TO_16
from ..errors import StructuralInputError
from ..types.raster_types import Bounds, Color, TRANSPARENT


class Raster:
    """
    Rectangle of 16-bit RGBA pixels addressed by absolute (x, y).

    The pixels live in a ``(height, width, 4)`` uint16 array; ``origin`` is
    the absolute coordinate of its top-left pixel. Reads outside the bounds
    give transparent black and writes outside the bounds are dropped.
    """
    __slots__ = ('_pixels', '_origin')

    def __init__(self, pixels: np.ndarray, origin: Tuple[int, int] = (0, 0)):
        if pixels.ndim != 3 or pixels.shape[2] != CHANNELS:
            raise StructuralInputError(f"Raster pixels must have shape (h, w, {CHANNELS}), got {pixels.shape}")
        if pixels.dtype != PIXEL_DTYPE:
            raise TypeError(f"Raster pixels must be {np.dtype(PIXEL_DTYPE)}, got {pixels.dtype}")
        self._pixels = pixels
        self._origin = (int(origin[0]), int(origin[1]))

    # ------------------ CONSTRUCTION ------------------
    @classmethod
    def new(cls, width: int, height: int, origin: Tuple[int, int] = (0, 0)) -> Raster:
        """Fully transparent raster."""
        if width < 0 or height < 0:
            raise StructuralInputError(f"Raster size must be non-negative, got {width}x{height}")
        return cls(np.zeros((height, width, CHANNELS), dtype=PIXEL_DTYPE), origin)

    @classmethod
    def with_bounds(cls, bounds: Bounds) -> Raster:
        return cls.new(bounds.width, bounds.height, (bounds.min_x, bounds.min_y))

    @classmethod
    def from_array(cls, arr: np.ndarray, origin: Tuple[int, int] = (0, 0)) -> Raster:
        """Copy an (h, w, 4) array of channel values, clamped to the channel range."""
        arr = np.asarray(arr)
        if arr.ndim != 3 or arr.shape[2] != CHANNELS:
            raise StructuralInputError(f"Expected an (h, w, {CHANNELS}) array, got {arr.shape}")
        return cls(np.clip(arr, 0, CHANNEL_MAX).astype(PIXEL_DTYPE), origin)

    @classmethod
    def from_image(cls, image, origin: Tuple[int, int] = (0, 0)) -> Raster:
        """Widen a Pillow image to 16-bit RGBA."""
        rgba = np.asarray(image.convert("RGBA"), dtype=np.uint16)
        return cls(rgba * WIDEN_8_TO_16, origin)

    def to_image(self):
        """Narrow to an 8-bit RGBA Pillow image."""
        from PIL import Image
        return Image.fromarray((self._pixels >> 8).astype(np.uint8))

    # ------------------ GEOMETRY ------------------
    @property
    def pixels(self) -> np.ndarray:
        return self._pixels

    @property
    def origin(self) -> Tuple[int, int]:
        return self._origin

    @property
    def width(self) -> int:
        return self._pixels.shape[1]

    @property
    def height(self) -> int:
        return self._pixels.shape[0]

    @property
    def bounds(self) -> Bounds:
        x0, y0 = self._origin
        return Bounds(x0, y0, x0 + self.width, y0 + self.height)

    def same_bounds(self, other: Raster) -> bool:
        return self.bounds == other.bounds

    def copy(self) -> Raster:
        return Raster(self._pixels.copy(), self._origin)

    def __repr__(self) -> str:
        return f"Raster(bounds={tuple(self.bounds)})"

    # ------------------ PIXEL ACCESS ------------------
    def in_bounds(self, x: int, y: int) -> bool:
        return self.bounds.contains(x, y)

    def at(self, x: int, y: int) -> Color:
        if not self.in_bounds(x, y):
            return TRANSPARENT
        r, g, b, a = self._pixels[y - self._origin[1], x - self._origin[0]]
        return (int(r), int(g), int(b), int(a))

    def set(self, x: int, y: int, color: Sequence[int]) -> None:
        if not self.in_bounds(x, y):
            return
        self._pixels[y - self._origin[1], x - self._origin[0]] = color


def load_raster(path, origin: Tuple[int, int] = (0, 0)) -> Raster:
    """Read an image file into a Raster."""
    from PIL import Image
    with Image.open(path) as image:
        return Raster.from_image(image, origin)


def save_raster(raster: Raster, path, format: Optional[str] = None) -> None:
    """Write a Raster as an 8-bit RGBA image file."""
    raster.to_image().save(path, format=format)
