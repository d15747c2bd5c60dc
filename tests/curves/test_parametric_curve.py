import numpy as np
import pytest

from meshmorph.curves import ParametricCurve
from meshmorph.errors import BoundsError, StructuralInputError
from meshmorph.types import Axis


def test_points_are_read_only():
    curve = ParametricCurve([(0, 0), (1, 2), (2, 3)])
    assert len(curve) == 3
    assert curve.point(1) == (1.0, 2.0)
    with pytest.raises(ValueError):
        curve.points[0, 0] = 5.0
    with pytest.raises(BoundsError):
        curve.point(3)


def test_bad_shape():
    with pytest.raises(StructuralInputError):
        ParametricCurve([(0, 0, 0), (1, 1, 1)])


def test_nearest():
    curve = ParametricCurve([(0, 0), (1, 5), (2, 9), (3, 4)])
    assert curve.nearest(1.8) == (2.0, 9.0)
    assert curve.nearest(4.5, Axis.Y) == (1.0, 5.0)


def test_crossing_interpolates():
    curve = ParametricCurve([(0, 0), (2, 4), (3, 8)])
    assert np.allclose(curve.crossing(1.0, Axis.Y), (0.5, 1.0))
    assert np.allclose(curve.crossing(6.0, Axis.Y), (2.5, 6.0))
    assert np.allclose(curve.crossing(2.5, Axis.X), (2.5, 6.0))


def test_crossing_descending_curve():
    curve = ParametricCurve([(0, 8), (1, 4), (2, 0)])
    assert np.allclose(curve.crossing(2.0, Axis.Y), (1.5, 2.0))


def test_crossing_on_sample_counts_once():
    curve = ParametricCurve([(0, 0), (1, 2), (2, 4)])
    assert curve.crossings(2.0, Axis.Y) == [(1.0, 2.0)]
    assert curve.crossing(0.0, Axis.Y) == (0.0, 0.0)
    assert curve.crossing(4.0, Axis.Y) == (2.0, 4.0)


def test_no_crossing():
    curve = ParametricCurve([(0, 0), (1, 2)])
    assert curve.crossings(3.0, Axis.Y) == []
    with pytest.raises(BoundsError):
        curve.crossing(3.0, Axis.Y)


def test_folding_curve():
    curve = ParametricCurve([(0, 0), (1, 4), (2, 0)])
    assert len(curve.crossings(2.0, Axis.Y)) == 2
    with pytest.raises(StructuralInputError):
        curve.crossing(2.0, Axis.Y)
