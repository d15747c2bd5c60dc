"""
Color blending for 16-bit RGBA pixels.

>>> from meshmorph.colors import weight_color, add_colors
>>> weight_color((0, 0x1000, 0x2000, 0x1000), 16)
(0, 65535, 65535, 65535)
>>> add_colors((0, 0xfffe, 0x2000, 0x1000), (0x1254, 0x0002, 0x2222, 0x0909))
(4692, 65535, 16930, 6409)
"""
from .blend import (
    weight_channel,
    add_channels,
    weight_color,
    add_colors,
    interpolate_colors,
    weight_array,
    add_arrays,
    to_pixels,
)

__all__ = [
    "weight_channel",
    "add_channels",
    "weight_color",
    "add_colors",
    "interpolate_colors",
    "weight_array",
    "add_arrays",
    "to_pixels",
]
