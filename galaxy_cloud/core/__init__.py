"""Galaxy point-cloud generation and animation."""

from galaxy_cloud.core.parameters import (
    GalaxyParameters,
    PARAMETER_RANGES,
    REFERENCE_FRAME_RATE,
    clamp_parameters
)
from galaxy_cloud.core.point_cloud import PointCloud
from galaxy_cloud.core.random_source import RandomSource, NumPyRandomSource, SequenceRandomSource
from galaxy_cloud.core.generator import GalaxyGenerator, generate_galaxy
from galaxy_cloud.core.instance import GalaxyInstance
from galaxy_cloud.core.animator import GalaxyAnimator, per_frame_to_per_second, per_second_to_per_frame
from galaxy_cloud.core.cluster import GalaxyCluster

__all__ = [
    "GalaxyParameters",
    "PARAMETER_RANGES",
    "REFERENCE_FRAME_RATE",
    "clamp_parameters",
    "PointCloud",
    "RandomSource",
    "NumPyRandomSource",
    "SequenceRandomSource",
    "GalaxyGenerator",
    "generate_galaxy",
    "GalaxyInstance",
    "GalaxyAnimator",
    "per_frame_to_per_second",
    "per_second_to_per_frame",
    "GalaxyCluster"
]
