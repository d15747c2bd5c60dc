from .morph_mesh import MorphMesh, InterpolationFunc

__all__ = ["MorphMesh", "InterpolationFunc"]
