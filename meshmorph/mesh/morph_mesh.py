from __future__ import annotations
import logging
from typing import Callable, List, Sequence, Tuple

from boundednumbers import UnitFloat

from ..curves.catmull_rom import catmull_rom
from ..curves.parametric_curve import ParametricCurve
from ..errors import BoundsError, StructuralInputError
from ..grid.coordinate_grid import CoordinateGrid
from ..types.point_types import Point2D, as_point

logger = logging.getLogger(__name__)

InterpolationFunc = Callable[[Point2D, Point2D, float], Point2D]


class MorphMesh:
    """
    Paired source/destination grids of correspondence points.

    Every write lands in both grids at the same (row, col), so the two grids
    always share one index space. Rows run horizontally and columns
    vertically across the image.
    """
    __slots__ = ('_source', '_destination')

    def __init__(self):
        self._source = CoordinateGrid()
        self._destination = CoordinateGrid()

    @property
    def source(self) -> CoordinateGrid:
        return self._source

    @property
    def destination(self) -> CoordinateGrid:
        return self._destination

    def __repr__(self) -> str:
        return f"MorphMesh(rows={self.row_count}, columns={self.column_count})"

    # ------------------ CORRESPONDENCES ------------------
    def add_correspondence(self, row: int, col: int,
                           source_point: Sequence[float], destination_point: Sequence[float]) -> None:
        """Write a matched pair into both grids; on error neither grid changes."""
        if row < 0 or col < 0:
            raise BoundsError(f"Grid indices must be non-negative, got ({row}, {col})")
        source_point = as_point(source_point)
        destination_point = as_point(destination_point)
        self._source.add_point(row, col, source_point)
        self._destination.add_point(row, col, destination_point)

    def remove_correspondence(self, row: int, col: int) -> Tuple[Point2D, Point2D]:
        source_point = self._source.remove_point(row, col)
        destination_point = self._destination.remove_point(row, col)
        return source_point, destination_point

    def points(self, row: int, col: int) -> Tuple[Point2D, Point2D]:
        return self._source.point(row, col), self._destination.point(row, col)

    def _check_paired(self) -> None:
        if (self._source.row_count != self._destination.row_count
                or self._source.column_count != self._destination.column_count):
            raise StructuralInputError(
                f"Source grid ({self._source.row_count}x{self._source.column_count}) and destination grid "
                f"({self._destination.row_count}x{self._destination.column_count}) are out of step")

    @property
    def row_count(self) -> int:
        self._check_paired()
        return self._source.row_count

    @property
    def column_count(self) -> int:
        self._check_paired()
        return self._source.column_count

    # ------------------ LINES ------------------
    def extract_row_line(self, row: int) -> Tuple[List[Point2D], List[Point2D]]:
        """Source and destination points of a row, ordered by column."""
        return self._source.row_line(row), self._destination.row_line(row)

    def extract_column_line(self, col: int) -> Tuple[List[Point2D], List[Point2D]]:
        """Source and destination points of a column, ordered by row."""
        return self._source.column_line(col), self._destination.column_line(col)

    def all_splines_for_axis(self, vertical: bool, alpha: float,
                             steps: int) -> Tuple[List[ParametricCurve], List[ParametricCurve], int]:
        """
        Fit a spline to every line along one axis of both grids.

        Args:
            vertical: Columns when True, rows otherwise.
            alpha: Knot exponent in [0, 1].
            steps: Samples per spline.

        Returns:
            (source_splines, destination_splines, count). Lines with fewer than
            three points in either grid are skipped.
        """
        self._check_paired()
        span = self._source.column_span if vertical else self._source.row_span
        source_splines: List[ParametricCurve] = []
        destination_splines: List[ParametricCurve] = []
        for index in range(span):
            if vertical:
                source_points, destination_points = self.extract_column_line(index)
            else:
                source_points, destination_points = self.extract_row_line(index)
            if len(source_points) < 3 or len(destination_points) < 3:
                logger.debug("Skipping %s line %d with %d/%d points",
                             "vertical" if vertical else "horizontal", index,
                             len(source_points), len(destination_points))
                continue
            source_splines.append(catmull_rom(source_points, alpha, steps))
            destination_splines.append(catmull_rom(destination_points, alpha, steps))
        return source_splines, destination_splines, len(source_splines)

    # ------------------ TIME AXIS ------------------
    def interpolated_grid(self, interp_fn: InterpolationFunc, t: float) -> CoordinateGrid:
        """
        Grid of points a fraction t of the way from source to destination.

        Args:
            interp_fn: Positional interpolation, called as interp_fn(source, destination, t).
            t: Time fraction; 0 is the source grid and 1 the destination grid.

        Returns:
            A new CoordinateGrid holding floating points at every paired cell.
        """
        t = UnitFloat(t)
        result = CoordinateGrid()
        for row, col, source_point in self._source.cells():
            if not self._destination.has_point(row, col):
                raise StructuralInputError(f"Source cell ({row}, {col}) has no destination counterpart")
            destination_point = self._destination.point(row, col)
            result.add_point(row, col, as_point(interp_fn(source_point, destination_point, t)))
        for row, col, _ in self._destination.cells():
            if not self._source.has_point(row, col):
                raise StructuralInputError(f"Destination cell ({row}, {col}) has no source counterpart")
        return result

