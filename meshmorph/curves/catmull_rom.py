"""
Catmull-Rom spline evaluation.

Knots are cumulative powers of the distances between consecutive control
points, ``t[i+1] = t[i] + |P[i+1] - P[i]| ** alpha``. An alpha of 0 gives the
uniform spline, 0.5 the centripetal spline (no cusps or self intersections
within a segment) and 1 the chordal spline. Each segment is evaluated with
Barry and Goldman's pyramid of linear blends.
"""
import math
from typing import Sequence

import numpy as np

from ..errors import StructuralInputError
from ..types.point_types import Point2D
from .parametric_curve import ParametricCurve


def distance(p: Sequence[float], q: Sequence[float]) -> float:
    """Euclidean distance between two 2D points."""
    return math.hypot(p[0] - q[0], p[1] - q[1])


def linear_interpolation(start: Sequence[float], end: Sequence[float], t: float) -> Point2D:
    """Point a fraction t of the way from start to end (t in [0, 1])."""
    return Point2D(
        float(start[0]) * (1 - t) + float(end[0]) * t,
        float(start[1]) * (1 - t) + float(end[1]) * t,
    )


def sample_distribution(points: np.ndarray, steps: int) -> np.ndarray:
    """
    Split ``steps`` samples across the segments in proportion to their length.

    Segment boundaries are rounded on the cumulative length, so every segment
    gets ``round(steps * length / total)`` samples give or take one and the
    counts always add up to ``steps``.
    """
    lengths = np.hypot(*np.diff(points, axis=0).T)
    total = lengths.sum()
    boundaries = np.floor(steps * np.cumsum(lengths) / total + 0.5).astype(np.int64)
    return np.diff(boundaries, prepend=0)


def _blend(p: np.ndarray, q: np.ndarray, t0: float, t1: float, t: np.ndarray) -> np.ndarray:
    w = ((t - t0) / (t1 - t0))[:, np.newaxis]
    return p * (1.0 - w) + q * w


def _segment(p0, p1, p2, p3, t0, t1, t2, t3, t: np.ndarray) -> np.ndarray:
    """Barry-Goldman pyramid for the segment between p1 and p2."""
    a1 = _blend(p0, p1, t0, t1, t)
    a2 = _blend(p1, p2, t1, t2, t)
    a3 = _blend(p2, p3, t2, t3, t)
    b1 = _blend(a1, a2, t0, t2, t)
    b2 = _blend(a2, a3, t1, t3, t)
    return _blend(b1, b2, t1, t2, t)


def catmull_rom(points: Sequence[Sequence[float]], alpha: float = 0.5, steps: int = 100) -> ParametricCurve:
    """
    Sample a Catmull-Rom spline through the given points.

    Args:
        points: Control points, at least three, no two consecutive ones equal.
        alpha: Knot exponent in [0, 1].
        steps: Number of intervals to sample, at least 2.

    Returns:
        ParametricCurve of ``steps + 1`` samples. The first and last samples are
        the first and last control points.

    Raises:
        StructuralInputError: on too few points, alpha out of range, steps < 2
            or repeated consecutive points.
    """
    pts = np.array(points, dtype=np.float64)
    if pts.ndim != 2 or pts.shape[1] != 2:
        raise StructuralInputError(f"Control points must have shape (n, 2), got {pts.shape}")
    n_points = pts.shape[0]
    if n_points < 3:
        raise StructuralInputError(f"Catmull-Rom needs at least 3 points, got {n_points}")
    if alpha < 0 or alpha > 1:
        raise StructuralInputError(f"alpha must be in [0.0, 1.0], got {alpha}")
    if steps < 2:
        raise StructuralInputError(f"steps must be 2 or greater, got {steps}")
    if np.any(np.all(pts[1:] == pts[:-1], axis=1)):
        raise StructuralInputError("Consecutive control points must differ")

    steps_per_segment = sample_distribution(pts, steps)

    # Virtual end points extrapolated past both ends
    head = pts[0] - 2 * (pts[1] - pts[0])
    tail = pts[-1] + 2 * (pts[-1] - pts[-2])
    controls = np.vstack([head, pts, tail])

    knots = np.zeros(n_points + 2)
    for i in range(1, n_points + 2):
        knots[i] = knots[i - 1] + distance(controls[i - 1], controls[i]) ** alpha

    samples = []
    for seg, count in enumerate(steps_per_segment):
        if count == 0:
            continue
        t0, t1, t2, t3 = knots[seg:seg + 4]
        t = t1 + np.arange(count) * (t2 - t1) / count
        p0, p1, p2, p3 = controls[seg:seg + 4]
        samples.append(_segment(p0, p1, p2, p3, t0, t1, t2, t3, t))
    samples.append(pts[-1:])
    return ParametricCurve(np.vstack(samples))
