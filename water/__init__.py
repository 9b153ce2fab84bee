"""Wave field and surface sampling."""

from .wave_field import WaveComponent, WaveField
from .surface import SurfaceFrame, SurfaceGrid, SurfacePoint, SurfaceSampler, create_grid

__all__ = [
    "WaveComponent", "WaveField",
    "SurfaceFrame", "SurfaceGrid", "SurfacePoint", "SurfaceSampler", "create_grid",
]
