from .parametric_curve import ParametricCurve
from .catmull_rom import catmull_rom, distance, linear_interpolation, sample_distribution

__all__ = ["ParametricCurve", "catmull_rom", "distance", "linear_interpolation", "sample_distribution"]
