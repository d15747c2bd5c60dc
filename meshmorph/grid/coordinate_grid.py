from __future__ import annotations
from typing import Iterator, List, Tuple

from ..curves.catmull_rom import catmull_rom
from ..curves.parametric_curve import ParametricCurve
from ..errors import BoundsError, PointNotFoundError, StructuralInputError
from ..types.point_types import Axis, Point2D
from .sorted_line import SortedPointIndex

#
# Gridlines:
#  +------> x
#  |
#  |          -- rows (horizontal gridlines)
#  |          --
# \/          --
#  y
#    |  |  |
#    columns (vertical gridlines)
#


class CoordinateGrid:
    """
    Sparse grid of points addressable by (row, column).

    Points live in per-column lines sorted on the vertical axis. Every row
    keeps an inverted index of (column, rank-within-column) entries, so a
    (row, column) lookup is two binary searches. Lines materialize lazily on
    first insertion and stay materialized when emptied; ``row_count`` and
    ``column_count`` only count lines that currently hold points.
    """
    __slots__ = ('_columns', '_row_index', '_row_count', '_column_count')

    def __init__(self):
        self._columns: List[SortedPointIndex] = []
        self._row_index: List[SortedPointIndex] = []
        self._row_count = 0
        self._column_count = 0

    # ------------------ COUNTS ------------------
    @property
    def row_count(self) -> int:
        """Number of non-empty rows."""
        return self._row_count

    @property
    def column_count(self) -> int:
        """Number of non-empty columns."""
        return self._column_count

    @property
    def row_span(self) -> int:
        """Number of materialized rows, empty or not."""
        return len(self._row_index)

    @property
    def column_span(self) -> int:
        """Number of materialized columns, empty or not."""
        return len(self._columns)

    def __len__(self) -> int:
        return sum(len(column) for column in self._columns)

    def __repr__(self) -> str:
        return (f"CoordinateGrid(rows={self._row_count}, columns={self._column_count}, "
                f"points={len(self)})")

    # ------------------ MUTATION ------------------
    def add_point(self, row: int, col: int, point: Point2D) -> None:
        """Store point at (row, col), replacing whatever was there."""
        if row < 0 or col < 0:
            raise BoundsError(f"Grid indices must be non-negative, got ({row}, {col})")
        if self.has_point(row, col):
            self.remove_point(row, col)

        while len(self._columns) <= col:
            self._columns.append(SortedPointIndex(Axis.Y))
        while len(self._row_index) <= row:
            self._row_index.append(SortedPointIndex(Axis.X))

        column = self._columns[col]
        if not column.has_points:
            self._column_count += 1
        rank = column.insert(point)
        # Points at or past the new rank moved down by one
        self._renumber_column(col, rank, 1)

        row_line = self._row_index[row]
        if not row_line.has_points:
            self._row_count += 1
        row_line.insert(Point2D(col, rank))

    def remove_point(self, row: int, col: int) -> Point2D:
        """Remove and return the point at (row, col)."""
        self._check_bounds(row, col)
        entry = self._row_index[row].find_by_primary(col)
        removed = self._columns[col].remove_at_rank(entry.y)
        if not self._columns[col].has_points:
            self._column_count -= 1

        self._row_index[row].remove_by_primary(col)
        if not self._row_index[row].has_points:
            self._row_count -= 1

        self._renumber_column(col, entry.y + 1, -1)
        return removed

    def _renumber_column(self, col: int, from_rank: int, delta: int) -> None:
        """Shift every row-index rank >= from_rank in column col by delta."""
        for row_line in self._row_index:
            try:
                rank = row_line.rank_of_primary(col)
            except PointNotFoundError:
                continue
            entry = row_line.point_at_rank(rank)
            if entry.y >= from_rank:
                row_line.replace_at_rank(rank, Point2D(col, entry.y + delta))

    # ------------------ LOOKUP ------------------
    def _check_bounds(self, row: int, col: int) -> None:
        if row < 0 or row >= len(self._row_index):
            raise BoundsError(f"Row {row} is out of bounds (materialized rows: {len(self._row_index)})")
        if col < 0 or col >= len(self._columns):
            raise BoundsError(f"Column {col} is out of bounds (materialized columns: {len(self._columns)})")

    def point(self, row: int, col: int) -> Point2D:
        self._check_bounds(row, col)
        entry = self._row_index[row].find_by_primary(col)
        return self._columns[col].point_at_rank(entry.y)

    def has_point(self, row: int, col: int) -> bool:
        if row < 0 or row >= len(self._row_index) or col < 0 or col >= len(self._columns):
            return False
        try:
            self._row_index[row].rank_of_primary(col)
        except PointNotFoundError:
            return False
        return True

    def row_line(self, row: int) -> List[Point2D]:
        """Points of one row, ordered by column."""
        if row < 0 or row >= len(self._row_index):
            raise BoundsError(f"Row {row} is out of bounds (materialized rows: {len(self._row_index)})")
        return [self._columns[entry.x].point_at_rank(entry.y) for entry in self._row_index[row]]

    def column_line(self, col: int) -> List[Point2D]:
        """Points of one column, ordered by row."""
        if col < 0 or col >= len(self._columns):
            raise BoundsError(f"Column {col} is out of bounds (materialized columns: {len(self._columns)})")
        column = self._columns[col]
        points = []
        for row_line in self._row_index:
            try:
                entry = row_line.find_by_primary(col)
            except PointNotFoundError:
                continue
            points.append(column.point_at_rank(entry.y))
        return points

    def line(self, index: int, vertical: bool) -> List[Point2D]:
        return self.column_line(index) if vertical else self.row_line(index)

    def cells(self) -> Iterator[Tuple[int, int, Point2D]]:
        """Yield (row, col, point) for every stored point, row-major."""
        for row, row_line in enumerate(self._row_index):
            for entry in row_line:
                yield row, entry.x, self._columns[entry.x].point_at_rank(entry.y)

    def splines_for_axis(self, vertical: bool, alpha: float, steps: int) -> List[ParametricCurve]:
        """
        One Catmull-Rom curve per line along an axis.

        Args:
            vertical: Fit columns when True, rows otherwise.
            alpha: Knot exponent in [0, 1].
            steps: Samples per curve (the curve carries steps + 1 points).

        Returns:
            List of ParametricCurve. Lines with fewer than three points are skipped.
        """
        span = len(self._columns) if vertical else len(self._row_index)
        splines = []
        for index in range(span):
            points = self.line(index, vertical)
            if len(points) < 3:
                continue
            splines.append(catmull_rom(points, alpha, steps))
        return splines

    def check_consistency(self) -> None:
        """Raise StructuralInputError if the row index and columns disagree."""
        seen = [set() for _ in self._columns]
        for row, row_line in enumerate(self._row_index):
            for entry in row_line:
                col, rank = entry
                if col >= len(self._columns) or rank >= len(self._columns[col]):
                    raise StructuralInputError(f"Row {row} points at missing entry ({col}, {rank})")
                if rank in seen[col]:
                    raise StructuralInputError(f"Column {col} rank {rank} is claimed twice")
                seen[col].add(rank)
        for col, column in enumerate(self._columns):
            if len(seen[col]) != len(column):
                raise StructuralInputError(
                    f"Column {col} holds {len(column)} points but {len(seen[col])} are indexed")
        if self._row_count != sum(1 for line in self._row_index if line.has_points):
            raise StructuralInputError("Row counter out of sync")
        if self._column_count != sum(1 for line in self._columns if line.has_points):
            raise StructuralInputError("Column counter out of sync")
