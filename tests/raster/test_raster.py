import numpy as np
import pytest
from PIL import Image

from meshmorph.errors import StructuralInputError
from meshmorph.raster import Raster, load_raster, save_raster
from meshmorph.types import Bounds, TRANSPARENT


def test_new_raster_is_transparent():
    raster = Raster.new(3, 2, origin=(5, 7))
    assert raster.width == 3
    assert raster.height == 2
    assert raster.bounds == Bounds(5, 7, 8, 9)
    assert raster.at(5, 7) == TRANSPARENT


def test_absolute_addressing():
    raster = Raster.new(3, 2, origin=(5, 7))
    raster.set(7, 8, (1, 2, 3, 4))
    assert raster.at(7, 8) == (1, 2, 3, 4)
    assert tuple(raster.pixels[1, 2]) == (1, 2, 3, 4)


def test_out_of_bounds_access():
    raster = Raster.new(2, 2)
    raster.set(2, 0, (9, 9, 9, 9))
    raster.set(-1, 1, (9, 9, 9, 9))
    assert not raster.pixels.any()
    assert raster.at(5, 5) == TRANSPARENT
    assert raster.at(-1, 0) == TRANSPARENT


def test_invalid_pixels():
    with pytest.raises(StructuralInputError):
        Raster(np.zeros((2, 2, 3), dtype=np.uint16))
    with pytest.raises(TypeError):
        Raster(np.zeros((2, 2, 4), dtype=np.uint8))
    with pytest.raises(StructuralInputError):
        Raster.new(-1, 2)


def test_from_array_clamps():
    raster = Raster.from_array(np.full((1, 1, 4), 70000))
    assert raster.at(0, 0) == (0xFFFF, 0xFFFF, 0xFFFF, 0xFFFF)


def test_copy_is_independent():
    raster = Raster.new(2, 2)
    clone = raster.copy()
    clone.set(0, 0, (1, 1, 1, 1))
    assert raster.at(0, 0) == TRANSPARENT
    assert raster.same_bounds(clone)


def test_image_round_trip(tmp_path):
    image = Image.new("RGBA", (3, 2), (255, 128, 0, 255))
    raster = Raster.from_image(image)
    assert raster.at(2, 1) == (0xFFFF, 128 * 257, 0, 0xFFFF)

    path = tmp_path / "frame.png"
    save_raster(raster, path)
    loaded = load_raster(path, origin=(1, 1))
    assert loaded.bounds == Bounds(1, 1, 4, 3)
    assert loaded.at(1, 1) == (0xFFFF, 128 * 257, 0, 0xFFFF)
    assert np.array_equal(loaded.pixels, raster.pixels)


def test_rgb_image_gets_opaque_alpha():
    raster = Raster.from_image(Image.new("RGB", (1, 1), (10, 20, 30)))
    assert raster.at(0, 0) == (10 * 257, 20 * 257, 30 * 257, 0xFFFF)
