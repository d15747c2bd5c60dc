import numpy as np
import pytest

from meshmorph import MorphMesh, Raster


def lattice(size, step):
    """Evenly spaced (row, col, point) triples covering [0, size] in both axes."""
    coords = list(range(0, size + 1, step))
    return [(row, col, (x, y)) for row, y in enumerate(coords) for col, x in enumerate(coords)]


@pytest.fixture
def identity_mesh():
    """3x3 mesh over a 4x4 image where nothing moves."""
    mesh = MorphMesh()
    for row, col, point in lattice(4, 2):
        mesh.add_correspondence(row, col, point, point)
    return mesh


@pytest.fixture
def bulge_mesh():
    """3x3 mesh over a 4x4 image whose centre slides one pixel right."""
    mesh = MorphMesh()
    for row, col, point in lattice(4, 2):
        mesh.add_correspondence(row, col, point, point)
    mesh.add_correspondence(1, 1, (2, 2), (3, 2))
    return mesh


@pytest.fixture
def gradient_raster():
    """4x4 opaque raster; red grows along x, green along y. Colour channels are even."""
    pixels = np.zeros((4, 4, 4), dtype=np.uint16)
    for y in range(4):
        for x in range(4):
            pixels[y, x] = (0x2000 * (x + 1), 0x1000 * (y + 1), 0x0800, 0xFFFF)
    return Raster(pixels)


@pytest.fixture
def blue_raster():
    pixels = np.zeros((4, 4, 4), dtype=np.uint16)
    pixels[...] = (0, 0, 0xF000, 0xFFFF)
    return Raster(pixels)
