"""Preview rendering for generated galaxies."""

from galaxy_cloud.render.base import Renderer
from galaxy_cloud.render.renderer_3d import Renderer3D

__all__ = ["Renderer", "Renderer3D"]
