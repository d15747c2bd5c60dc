"""
Exception taxonomy for meshmorph.

Structural problems are contract violations by the caller (bad mesh, folding
splines, invalid spline parameters). Bounds problems are accesses outside a
grid's or curve's materialized range. Channel overflow is never an error, it
saturates.
"""


class MeshMorphError(Exception):
    """Base class for every error raised by meshmorph."""


class StructuralInputError(MeshMorphError, ValueError):
    """The mesh, spline or raster input cannot describe a valid warp."""


class BoundsError(MeshMorphError, IndexError):
    """An index lies outside the materialized range of a grid, line or curve."""


class PointNotFoundError(MeshMorphError, LookupError):
    """A lookup by value or by (row, column) found no point."""
