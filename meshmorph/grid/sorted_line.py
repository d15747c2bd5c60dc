from __future__ import annotations
from bisect import bisect_left
from typing import Iterable, Iterator, List, Tuple

from ..errors import BoundsError, PointNotFoundError
from ..types.point_types import Axis, Number, Point2D


class SortedPointIndex:
    """
    Points kept sorted on a primary axis, ties broken by the other axis.

    Lookups are binary searches. Insertion is linear in the line length,
    which is fine for the handful of points a mesh line carries.
    """
    __slots__ = ('primary_axis', '_keys', '_points')

    def __init__(self, primary_axis: Axis = Axis.X, points: Iterable[Point2D] = ()):
        self.primary_axis = Axis(primary_axis)
        self._keys: List[Tuple[Number, Number]] = []
        self._points: List[Point2D] = []
        self.insert_many(points)

    def _key(self, point: Point2D) -> Tuple[Number, Number]:
        return (point[self.primary_axis], point[self.primary_axis.other])

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point2D]:
        return iter(self._points)

    def __repr__(self) -> str:
        return f"SortedPointIndex({self.primary_axis.name}, {self._points!r})"

    @property
    def has_points(self) -> bool:
        return len(self._points) > 0

    def insert(self, point: Point2D) -> int:
        """Insert a point and return the rank it landed at."""
        point = Point2D(*point)
        key = self._key(point)
        rank = bisect_left(self._keys, key)
        self._keys.insert(rank, key)
        self._points.insert(rank, point)
        return rank

    def insert_many(self, points: Iterable[Point2D]) -> None:
        for point in points:
            self.insert(point)

    def _check_rank(self, rank: int) -> None:
        if rank < 0 or rank >= len(self._points):
            raise BoundsError(f"Rank {rank} is out of bounds for a line of {len(self._points)} points")

    def point_at_rank(self, rank: int) -> Point2D:
        self._check_rank(rank)
        return self._points[rank]

    def remove_at_rank(self, rank: int) -> Point2D:
        """Remove and return the point at the given rank."""
        self._check_rank(rank)
        del self._keys[rank]
        return self._points.pop(rank)

    def replace_at_rank(self, rank: int, point: Point2D) -> int:
        """Swap the point at rank for another one; returns the new rank."""
        self.remove_at_rank(rank)
        return self.insert(point)

    def rank_of_primary(self, value: Number) -> int:
        """Rank of the first point whose primary coordinate equals value."""
        rank = bisect_left(self._keys, (value, float('-inf')))
        if rank == len(self._keys) or self._keys[rank][0] != value:
            raise PointNotFoundError(f"No point with {self.primary_axis.name} = {value}")
        return rank

    def find_by_primary(self, value: Number) -> Point2D:
        return self._points[self.rank_of_primary(value)]

    def remove_by_primary(self, value: Number) -> Point2D:
        return self.remove_at_rank(self.rank_of_primary(value))
