from .resampler import merge_pixels_in_line, stretch_horizontal, stretch_vertical
from .dissolve import cross_dissolve

__all__ = ["merge_pixels_in_line", "stretch_horizontal", "stretch_vertical", "cross_dissolve"]
