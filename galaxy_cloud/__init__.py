"""
Galaxy Cloud - procedural spiral-galaxy point clouds for 3D scenes.

Features:
- Deterministic (per random source) spiral-arm point-cloud generation
- Per-point colors and sizes ready for a point renderer
- Per-frame rotation and opacity pulse animation
- Clusters of independently tunable galaxies
- NumPy and JAX compute backends
- Matplotlib 3D preview and GIF capture
"""

__version__ = "0.1.0"

from galaxy_cloud.errors import InvalidParameters
from galaxy_cloud.core import (
    GalaxyParameters,
    GalaxyGenerator,
    GalaxyAnimator,
    GalaxyCluster,
    GalaxyInstance,
    PointCloud,
    NumPyRandomSource,
    generate_galaxy
)
from galaxy_cloud.backends.factory import get_backend, list_available_backends

__all__ = [
    "InvalidParameters",
    "GalaxyParameters",
    "GalaxyGenerator",
    "GalaxyAnimator",
    "GalaxyCluster",
    "GalaxyInstance",
    "PointCloud",
    "NumPyRandomSource",
    "generate_galaxy",
    "get_backend",
    "list_available_backends",
]
