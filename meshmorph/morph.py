"""
Frame generation for mesh morphing.

Each in-between frame warps both keyframes onto the time-interpolated mesh
with the two-pass resampler and cross-dissolves the results.
"""
import logging
from typing import Callable, List, Optional

from boundednumbers import UnitFloat

from .config import MorphSettings, DEFAULT_SETTINGS, value_or_default
from .curves.catmull_rom import linear_interpolation
from .errors import StructuralInputError
from .grid.coordinate_grid import CoordinateGrid
from .mesh.morph_mesh import InterpolationFunc, MorphMesh
from .raster.raster import Raster
from .types.point_types import Point2D
from .warp.dissolve import cross_dissolve
from .warp.resampler import stretch_horizontal, stretch_vertical

logger = logging.getLogger(__name__)


def identity(t: float) -> float:
    return t


def auxiliary_grids(mesh: MorphMesh, intermediate: CoordinateGrid):
    """
    Grids whose points take x from the intermediate mesh and y from the
    source (first) or destination (second) mesh. They are the target of the
    horizontal pass and the origin of the vertical pass.
    """
    aux_source = CoordinateGrid()
    aux_destination = CoordinateGrid()
    for row, col, point in intermediate.cells():
        source_point, destination_point = mesh.points(row, col)
        aux_source.add_point(row, col, Point2D(float(point.x), float(source_point.y)))
        aux_destination.add_point(row, col, Point2D(float(point.x), float(destination_point.y)))
    return aux_source, aux_destination


def _check_count(expected: int, got: int, what: str) -> None:
    if expected != got:
        raise StructuralInputError(f"Mesh produced {expected} splines but {what} produced {got}")


def morph_frame(
        t: float,
        source: Raster,
        destination: Raster,
        mesh: MorphMesh,
        *,
        time_interp: InterpolationFunc = linear_interpolation,
        nominal_time: Callable[[float], float] = identity,
        settings: Optional[MorphSettings] = None,
) -> Raster:
    """
    Render the frame a fraction t of the way from source to destination.

    Args:
        t: Time fraction in [0, 1].
        source: First keyframe.
        destination: Last keyframe, same bounds as source.
        mesh: Correspondences between the two keyframes.
        time_interp: Moves mesh points through time.
        nominal_time: Maps t to the dissolve weight of the destination frame.
        settings: Spline parameters; defaults to DEFAULT_SETTINGS.

    Returns:
        A new raster with the bounds of source.
    """
    if not source.same_bounds(destination):
        raise StructuralInputError(
            f"Keyframe bounds do not match: {tuple(source.bounds)} vs {tuple(destination.bounds)}")
    settings = value_or_default(settings, DEFAULT_SETTINGS)
    vertical_steps = value_or_default(settings.vertical_steps, source.height)
    horizontal_steps = value_or_default(settings.horizontal_steps, source.width)
    alpha = settings.alpha
    tolerance = settings.crossing_tolerance

    intermediate = mesh.interpolated_grid(time_interp, t)
    aux_source, aux_destination = auxiliary_grids(mesh, intermediate)

    # Pass one: rows, driven by vertical splines
    source_splines, destination_splines, n_splines = mesh.all_splines_for_axis(True, alpha, vertical_steps)
    aux_source_splines = aux_source.splines_for_axis(True, alpha, vertical_steps)
    _check_count(n_splines, len(aux_source_splines), "the source auxiliary grid")
    aux_destination_splines = aux_destination.splines_for_axis(True, alpha, vertical_steps)
    _check_count(n_splines, len(aux_destination_splines), "the destination auxiliary grid")

    source_aux = stretch_horizontal(None, source_splines, aux_source_splines, source, tolerance)
    destination_aux = stretch_horizontal(None, destination_splines, aux_destination_splines, destination, tolerance)

    # Pass two: columns, driven by horizontal splines
    aux_source_splines = aux_source.splines_for_axis(False, alpha, horizontal_steps)
    aux_destination_splines = aux_destination.splines_for_axis(False, alpha, horizontal_steps)
    intermediate_splines = intermediate.splines_for_axis(False, alpha, horizontal_steps)
    _check_count(len(intermediate_splines), len(aux_source_splines), "the source auxiliary grid")
    _check_count(len(intermediate_splines), len(aux_destination_splines), "the destination auxiliary grid")

    source_warped = stretch_vertical(None, aux_source_splines, intermediate_splines, source_aux, tolerance)
    destination_warped = stretch_vertical(None, aux_destination_splines, intermediate_splines,
                                          destination_aux, tolerance)

    weight = UnitFloat(nominal_time(t))
    return cross_dissolve([source_warped, destination_warped], [1.0 - weight, weight])


def morph(
        frames: int,
        source: Raster,
        destination: Raster,
        mesh: MorphMesh,
        *,
        time_interp: InterpolationFunc = linear_interpolation,
        nominal_time: Callable[[float], float] = identity,
        settings: Optional[MorphSettings] = None,
) -> List[Raster]:
    """
    Render ``frames`` in-between frames, excluding both keyframes.

    Frame i (1-based) sits at t = i / (frames + 1).
    """
    if frames < 0:
        raise StructuralInputError(f"Frame count must be non-negative, got {frames}")
    results = []
    for i in range(1, frames + 1):
        t = i / (frames + 1)
        logger.info("Rendering frame %d/%d (t=%.3f)", i, frames, t)
        results.append(morph_frame(
            t, source, destination, mesh,
            time_interp=time_interp, nominal_time=nominal_time, settings=settings,
        ))
    return results
