from .point_types import Point2D, Axis, as_point
from .raster_types import Color, Bounds, TRANSPARENT

__all__ = ["Point2D", "Axis", "as_point", "Color", "Bounds", "TRANSPARENT"]
