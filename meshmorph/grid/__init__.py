from .sorted_line import SortedPointIndex
from .coordinate_grid import CoordinateGrid

__all__ = ["SortedPointIndex", "CoordinateGrid"]
