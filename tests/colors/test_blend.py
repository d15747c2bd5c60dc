import numpy as np

from meshmorph.colors import (
    add_colors,
    interpolate_colors,
    weight_color,
    weight_channel,
)
from meshmorph.colors.blend import add_arrays, to_pixels, weight_array

COLOR = (0, 0x1000, 0x2000, 0x1000)
ZERO = (0, 0, 0, 0)


def test_weight_saturates():
    assert weight_color(COLOR, 16) == (0, 0xFFFF, 0xFFFF, 0xFFFF)


def test_weight_identity_and_zero():
    assert weight_color(COLOR, 1) == COLOR
    assert weight_color(COLOR, 0) == ZERO


def test_weight_rounds_half_up():
    assert weight_channel(3, 0.5) == 2
    assert weight_channel(1, 0.25) == 0
    assert weight_channel(0xFFFF, 0.5) == 0x8000


def test_add_saturates():
    result = add_colors((0, 0xFFFE, 0x2000, 0x1000), (0x1254, 0x0002, 0x2222, 0x0909))
    assert result == (0x1254, 0xFFFF, 0x4222, 0x1909)


def test_add():
    assert add_colors(COLOR, (0x1254, 0x3333, 0x2222, 0x0909)) == (0x1254, 0x4333, 0x4222, 0x1909)
    assert add_colors(COLOR, ZERO) == COLOR


def test_interpolate():
    assert interpolate_colors(COLOR, ZERO, 0.5) == (0, 0x800, 0x1000, 0x800)
    assert interpolate_colors(COLOR, ZERO, 1) == COLOR
    assert interpolate_colors(COLOR, COLOR, 0.33333333333) == COLOR


def test_array_variants_match_scalar():
    pixels = np.array([[COLOR, (0xFFFF, 1, 3, 0x8001)]], dtype=np.uint16)
    weighted = weight_array(pixels, 0.5)
    assert tuple(weighted[0, 0]) == weight_color(COLOR, 0.5)
    assert tuple(weighted[0, 1]) == weight_color((0xFFFF, 1, 3, 0x8001), 0.5)

    total = add_arrays(weighted, weighted)
    assert tuple(total[0, 1]) == (0xFFFF, 2, 4, 0x8002)
    assert to_pixels(add_arrays(total, total)).dtype == np.uint16
    assert tuple(to_pixels(add_arrays(total, total))[0, 1]) == (0xFFFF, 4, 8, 0xFFFF)


def test_weight_stays_within_rounding():
    for value in (0, 1, 0x7FFF, 0x8001, 0xFFFF):
        for weight in np.linspace(0.0, 1.0, 11):
            assert abs(weight_channel(value, weight) - value * weight) <= 0.5
