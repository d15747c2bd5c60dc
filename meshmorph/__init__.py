"""
meshmorph - Keyframe Image Morphing on Spline Meshes
====================================================

Morph one image into another through a sparse mesh of matched landmarks.
Mesh lines are fitted with Catmull-Rom splines and each in-between frame is
produced by a two-pass (rows, then columns) area-weighted pixel warp followed
by a cross-dissolve.

Quick Start
-----------
>>> from meshmorph import MorphMesh, Raster, morph
>>>
>>> mesh = MorphMesh()
>>> for row, y in enumerate((0, 32, 64)):
...     for col, x in enumerate((0, 32, 64)):
...         mesh.add_correspondence(row, col, (x, y), (x, y))
>>> mesh.add_correspondence(1, 1, (32, 32), (40, 36))
>>>
>>> frames = morph(3, Raster.new(64, 64), Raster.new(64, 64), mesh)

Modules
-------
- grid: SortedPointIndex and the dual-indexed CoordinateGrid
- curves: Catmull-Rom evaluation and sampled ParametricCurve
- mesh: MorphMesh of paired source/destination grids
- colors: saturating 16-bit color arithmetic
- raster: Raster pixel container and Pillow bridge
- warp: two-pass resampler and cross-dissolve
- morph: frame generation
"""

from .errors import MeshMorphError, StructuralInputError, BoundsError, PointNotFoundError
from .config import CHANNEL_MAX, SplineKind, MorphSettings, DEFAULT_SETTINGS
from .types import Point2D, Axis, Bounds, Color
from .grid import SortedPointIndex, CoordinateGrid
from .curves import ParametricCurve, catmull_rom, distance, linear_interpolation
from .mesh import MorphMesh
from .colors import weight_color, add_colors, interpolate_colors
from .raster import Raster, load_raster, save_raster
from .warp import stretch_horizontal, stretch_vertical, merge_pixels_in_line, cross_dissolve
from .morph import morph, morph_frame
from .logging_config import setup_logging

__all__ = [
    # errors
    "MeshMorphError",
    "StructuralInputError",
    "BoundsError",
    "PointNotFoundError",
    # configuration
    "CHANNEL_MAX",
    "SplineKind",
    "MorphSettings",
    "DEFAULT_SETTINGS",
    "setup_logging",
    # types
    "Point2D",
    "Axis",
    "Bounds",
    "Color",
    # grids and curves
    "SortedPointIndex",
    "CoordinateGrid",
    "ParametricCurve",
    "catmull_rom",
    "distance",
    "linear_interpolation",
    "MorphMesh",
    # pixels
    "weight_color",
    "add_colors",
    "interpolate_colors",
    "Raster",
    "load_raster",
    "save_raster",
    "stretch_horizontal",
    "stretch_vertical",
    "merge_pixels_in_line",
    "cross_dissolve",
    "morph",
    "morph_frame",
]
