from __future__ import annotations
from typing import Iterable, Iterator, List, Union

import numpy as np

from ..errors import BoundsError, PointNotFoundError, StructuralInputError
from ..types.point_types import Axis, Point2D


class ParametricCurve:
    """
    Ordered floating samples of a curve, stored as an (n, 2) array.

    Samples keep their parametric order (the order the spline produced them
    in), so a curve may be queried along either axis.
    """
    __slots__ = ('_points',)

    def __init__(self, points: Union[np.ndarray, Iterable[Point2D]]):
        arr = np.array(points, dtype=np.float64)
        if arr.size == 0:
            arr = arr.reshape(0, 2)
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise StructuralInputError(f"Curve samples must have shape (n, 2), got {arr.shape}")
        arr.setflags(write=False)
        self._points = arr

    @property
    def points(self) -> np.ndarray:
        """Read-only (n, 2) sample array."""
        return self._points

    def __len__(self) -> int:
        return self._points.shape[0]

    def __iter__(self) -> Iterator[Point2D]:
        for x, y in self._points:
            yield Point2D(float(x), float(y))

    def __repr__(self) -> str:
        return f"ParametricCurve(n={len(self)})"

    def point(self, index: int) -> Point2D:
        if index < 0 or index >= len(self):
            raise BoundsError(f"Sample {index} is out of bounds for a curve of {len(self)} samples")
        x, y = self._points[index]
        return Point2D(float(x), float(y))

    def nearest(self, value: float, axis: Axis = Axis.X) -> Point2D:
        """Sample whose coordinate along axis is closest to value."""
        if len(self) == 0:
            raise PointNotFoundError("Curve has no samples")
        index = int(np.argmin(np.abs(self._points[:, int(axis)] - value)))
        return self.point(index)

    def crossings(self, value: float, axis: Axis = Axis.Y, tolerance: float = 1e-9) -> List[Point2D]:
        """
        Linearly interpolated points where the curve crosses axis == value.

        Segments crossed in either direction count. A sample lying exactly on
        the value is reported once, not once per adjacent segment.

        Args:
            value: Coordinate to cross.
            axis: Axis the value is measured on.
            tolerance: Crossings closer than this are merged.

        Returns:
            Crossing points in parametric order.
        """
        if len(self) < 2:
            raise BoundsError("Curve has fewer than 2 samples")
        k = int(axis)
        starts = self._points[:-1]
        ends = self._points[1:]
        a = starts[:, k]
        b = ends[:, k]
        hit = ((a <= value) & (value <= b)) | ((b <= value) & (value <= a))
        if not np.any(hit):
            return []

        a, b = a[hit], b[hit]
        starts, ends = starts[hit], ends[hit]
        span = b - a
        with np.errstate(divide='ignore', invalid='ignore'):
            frac = np.where(span != 0, (value - a) / span, 0.0)
        found = starts + frac[:, np.newaxis] * (ends - starts)

        result: List[Point2D] = []
        for x, y in found:
            if result and abs(result[-1].x - x) <= tolerance and abs(result[-1].y - y) <= tolerance:
                continue
            result.append(Point2D(float(x), float(y)))
        return result

    def crossing(self, value: float, axis: Axis = Axis.Y, tolerance: float = 1e-9) -> Point2D:
        """The single crossing at value; folding curves are structural errors."""
        found = self.crossings(value, axis, tolerance)
        if not found:
            raise BoundsError(f"Curve never reaches {axis.name} = {value}")
        if len(found) > 1:
            raise StructuralInputError(
                f"Curve crosses {axis.name} = {value} {len(found)} times (it folds back on itself)")
        return found[0]
