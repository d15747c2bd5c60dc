from .raster import Raster, load_raster, save_raster

__all__ = ["Raster", "load_raster", "save_raster"]
