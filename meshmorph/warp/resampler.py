"""
Two-pass mesh warp.

The horizontal pass slides every row of pixels so that the vertical splines
of the original mesh land on the vertical splines of the warped mesh. The
vertical pass does the same for columns using horizontal splines. Each pass
treats the strip between two neighbouring splines as a cell and resamples
the pixel run inside it with exact area weights, so a source pixel spread
over several destination pixels (or squeezed into part of one) keeps its
color mass.
"""
import logging
import math
from typing import List, Optional, Tuple

from ..colors.blend import add_colors, weight_color
from ..curves.parametric_curve import ParametricCurve
from ..errors import StructuralInputError
from ..raster.raster import Raster
from ..types.point_types import Axis

logger = logging.getLogger(__name__)


def merge_pixels_in_line(
        horizontal: bool,
        line: int,
        fade_start: bool,
        fade_end: bool,
        orig_start: float,
        orig_end: float,
        dest_start: float,
        dest_end: float,
        original: Raster,
        warped: Raster,
) -> None:
    """
    Resample the pixel run [orig_start, orig_end] of one scanline onto
    [dest_start, dest_end] of the same scanline in warped.

    Args:
        horizontal: The scanline is a row (True) or a column (False).
        line: Row y (horizontal) or column x (vertical) of the scanline.
        fade_start: A neighbouring cell already wrote the first destination
            pixel, so this cell adds onto it instead of overwriting.
        fade_end: A neighbouring cell will write the last destination pixel,
            so the last source pixel only adds onto it.
        orig_start, orig_end: Cell boundaries in the original scanline.
        dest_start, dest_end: Cell boundaries in the warped scanline.
        original: Raster to read from.
        warped: Raster to write into, mutated in place.
    """
    orig_span = orig_end - orig_start
    dest_span = dest_end - dest_start
    if orig_span < 0 or dest_span < 0:
        raise StructuralInputError(
            f"Cell boundaries cross on line {line}: original [{orig_start}, {orig_end}], "
            f"warped [{dest_start}, {dest_end}]")
    if orig_span == 0:
        return

    if horizontal:
        def read(i):
            return original.at(i, line)

        def peek(i):
            return warped.at(i, line)

        def write(i, color):
            warped.set(i, line, color)
    else:
        def read(i):
            return original.at(line, i)

        def peek(i):
            return warped.at(line, i)

        def write(i, color):
            warped.set(line, i, color)

    trace = logger.isEnabledFor(logging.DEBUG)
    if trace:
        logger.debug("merge line=%d original=[%.4f, %.4f] warped=[%.4f, %.4f]",
                     line, orig_start, orig_end, dest_start, dest_end)

    first_source = math.floor(orig_start)
    last_source = math.floor(orig_end)
    # Last destination pixel written on this scanline
    cursor = math.floor(dest_start)
    if not fade_start:
        cursor -= 1

    for source in range(first_source, last_source + 1):
        covered_end = min(source + 1, orig_end)
        w_orig = covered_end - max(source, orig_start)
        if w_orig <= 0:
            continue
        color = read(source)
        owned = not (fade_end and source == last_source)

        dest_hi = (covered_end - orig_start) / orig_span * dest_span + dest_start
        dest_lo = dest_hi - w_orig / orig_span * dest_span
        for dest in range(math.floor(dest_lo), math.floor(dest_hi) + 1):
            coverage = min(dest + 1, dest_hi) - max(dest, dest_lo)
            if coverage <= 0:
                continue
            contribution = weight_color(color, coverage)
            if dest > cursor and owned:
                write(dest, contribution)
            else:
                write(dest, add_colors(peek(dest), contribution))
            cursor = max(cursor, dest)
            if trace:
                logger.debug("  source %d -> %d weight=%.4f", source, dest, coverage)


def _stretch(
        horizontal: bool,
        scan_range: Optional[Tuple[int, int]],
        original_splines: List[ParametricCurve],
        warped_splines: List[ParametricCurve],
        original: Raster,
        tolerance: float,
) -> Raster:
    n_splines = len(original_splines)
    if n_splines != len(warped_splines):
        raise StructuralInputError(
            f"Spline count does not match between original ({n_splines}) and warped ({len(warped_splines)}) meshes")
    if n_splines < 2:
        raise StructuralInputError(f"At least two splines are needed to bound a cell, got {n_splines}")

    bounds = original.bounds
    if scan_range is None:
        scan_range = (bounds.min_y, bounds.max_y) if horizontal else (bounds.min_x, bounds.max_x)
    # Horizontal pass scans rows, so the vertical splines are cut at y
    scan_axis = Axis.Y if horizontal else Axis.X
    along = scan_axis.other

    warped = Raster.with_bounds(bounds)
    for line in range(*scan_range):
        cuts = []
        for curves in (original_splines, warped_splines):
            cuts.append([curve.crossing(float(line), scan_axis, tolerance)[along] for curve in curves])
        original_cuts, warped_cuts = cuts
        for cell in range(n_splines - 1):
            merge_pixels_in_line(
                horizontal, line,
                cell != 0, cell != n_splines - 2,
                original_cuts[cell], original_cuts[cell + 1],
                warped_cuts[cell], warped_cuts[cell + 1],
                original, warped,
            )
    return warped


def stretch_horizontal(
        y_range: Optional[Tuple[int, int]],
        original_splines: List[ParametricCurve],
        warped_splines: List[ParametricCurve],
        original: Raster,
        tolerance: float = 1e-9,
) -> Raster:
    """
    Warp every row in y_range so the original vertical splines map onto the
    warped vertical splines.

    Args:
        y_range: (first row, end row) with end exclusive; None scans all rows.
        original_splines: Vertical splines over the original raster, left to right.
        warped_splines: Matching vertical splines of the warped mesh.
        original: Source raster, left untouched.
        tolerance: Distance under which two crossings of one spline are merged.

    Returns:
        A new raster with the bounds of original.

    Raises:
        StructuralInputError: if the spline lists differ in length or a spline
            crosses a scanline more than once.
    """
    return _stretch(True, y_range, original_splines, warped_splines, original, tolerance)


def stretch_vertical(
        x_range: Optional[Tuple[int, int]],
        original_splines: List[ParametricCurve],
        warped_splines: List[ParametricCurve],
        original: Raster,
        tolerance: float = 1e-9,
) -> Raster:
    """Column counterpart of stretch_horizontal, driven by horizontal splines."""
    return _stretch(False, x_range, original_splines, warped_splines, original, tolerance)
