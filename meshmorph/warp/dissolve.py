from typing import Sequence

from ..colors.blend import add_arrays, to_pixels, weight_array
from ..errors import StructuralInputError
from ..raster.raster import Raster


def cross_dissolve(rasters: Sequence[Raster], weights: Sequence[float]) -> Raster:
    """
    Pixel-by-pixel weighted sum of equally sized rasters.

    Every raster is scaled by its weight with weight_color semantics and the
    results are summed with saturation.

    Raises:
        StructuralInputError: if fewer than two rasters are given, the number of
            weights differs from the number of rasters, or the bounds differ.
    """
    if len(rasters) != len(weights):
        raise StructuralInputError(
            f"Number of rasters ({len(rasters)}) does not match number of weights ({len(weights)})")
    if len(rasters) < 2:
        raise StructuralInputError("Two or more rasters must be provided")
    bounds = rasters[0].bounds
    for raster in rasters[1:]:
        if raster.bounds != bounds:
            raise StructuralInputError(f"Raster bounds do not match: {tuple(bounds)} vs {tuple(raster.bounds)}")

    total = weight_array(rasters[0].pixels, weights[0])
    for raster, weight in zip(rasters[1:], weights[1:]):
        total = add_arrays(total, weight_array(raster.pixels, weight))
    return Raster(to_pixels(total), rasters[0].origin)
