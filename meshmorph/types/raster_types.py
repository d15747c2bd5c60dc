from typing import NamedTuple, Tuple, TypeAlias

# R, G, B, A as unsigned 16-bit fixed point
Color: TypeAlias = Tuple[int, int, int, int]

TRANSPARENT: Color = (0, 0, 0, 0)


class Bounds(NamedTuple):
    """Pixel rectangle; max coordinates are exclusive."""
    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @property
    def width(self) -> int:
        return self.max_x - self.min_x

    @property
    def height(self) -> int:
        return self.max_y - self.min_y

    def contains(self, x: int, y: int) -> bool:
        return self.min_x <= x < self.max_x and self.min_y <= y < self.max_y
