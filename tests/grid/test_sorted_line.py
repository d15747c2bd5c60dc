import pytest

from meshmorph.errors import BoundsError, PointNotFoundError
from meshmorph.grid import SortedPointIndex
from meshmorph.types import Axis, Point2D


def test_insert_keeps_primary_order():
    line = SortedPointIndex(Axis.X)
    assert line.insert(Point2D(5, 0)) == 0
    assert line.insert(Point2D(1, 0)) == 0
    assert line.insert(Point2D(3, 0)) == 1
    assert list(line) == [(1, 0), (3, 0), (5, 0)]


def test_ties_broken_by_other_axis():
    line = SortedPointIndex(Axis.Y, [(4, 2), (1, 2), (0, 1)])
    assert list(line) == [(0, 1), (1, 2), (4, 2)]


def test_rank_of_primary():
    line = SortedPointIndex(Axis.X, [(2, 9), (7, 1), (4, 4)])
    assert line.rank_of_primary(4) == 1
    assert line.find_by_primary(7) == (7, 1)
    with pytest.raises(PointNotFoundError):
        line.rank_of_primary(5)


def test_remove():
    line = SortedPointIndex(Axis.X, [(2, 9), (7, 1), (4, 4)])
    assert line.remove_at_rank(0) == (2, 9)
    assert line.remove_by_primary(7) == (7, 1)
    assert list(line) == [(4, 4)]
    assert line.has_points
    line.remove_at_rank(0)
    assert not line.has_points


def test_rank_out_of_bounds():
    line = SortedPointIndex(Axis.X, [(1, 1)])
    with pytest.raises(BoundsError):
        line.point_at_rank(1)
    with pytest.raises(BoundsError):
        line.remove_at_rank(-1)


def test_replace_at_rank_resorts():
    line = SortedPointIndex(Axis.X, [(1, 0), (2, 0), (3, 0)])
    assert line.replace_at_rank(0, Point2D(9, 0)) == 2
    assert list(line) == [(2, 0), (3, 0), (9, 0)]
