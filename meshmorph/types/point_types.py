from enum import IntEnum
from typing import NamedTuple, Sequence, Union

Number = Union[int, float]


class Axis(IntEnum):
    """Coordinate axis. The value doubles as the index into a Point2D."""
    X = 0
    Y = 1

    @property
    def other(self) -> "Axis":
        return Axis.Y if self is Axis.X else Axis.X


class Point2D(NamedTuple):
    """
    Immutable coordinate pair.

    Integer points address pixels; floating points address sub-pixel
    locations, so (1.25, 2.5) lies a quarter of the way into and halfway
    down the pixel at (1, 2).
    """
    x: Number
    y: Number

    def along(self, axis: Axis) -> Number:
        return self[int(axis)]


def as_point(value: Union[Point2D, Sequence[Number]]) -> Point2D:
    """Coerce a 2-sequence into a Point2D."""
    if isinstance(value, Point2D):
        return value
    if len(value) != 2:
        raise ValueError(f"Expected a 2D point, got {value!r}")
    return Point2D(value[0], value[1])
