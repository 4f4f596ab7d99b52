"""A single galaxy placed in the scene."""

import logging
from typing import Sequence
import numpy as np
from galaxy_cloud.core.parameters import GalaxyParameters
from galaxy_cloud.core.point_cloud import PointCloud
from galaxy_cloud.core.random_source import RandomSource

logger = logging.getLogger(__name__)


class GalaxyInstance:
    """One galaxy: its parameters, its generated cloud and its placement.

    ``rotation_y`` (radians) and ``opacity`` are advanced every frame by
    the animator; everything else only changes on regeneration.
    """

    def __init__(
        self,
        params: GalaxyParameters,
        cloud: PointCloud,
        random_source: RandomSource,
        position: Sequence[float] = (0.0, 0.0, 0.0),
        scale: float = 1.0,
        opacity: float = 1.0
    ):
        self.params = params
        self.cloud = cloud
        self.random_source = random_source
        self.position = np.asarray(position, dtype=np.float64).reshape(3)
        self.scale = float(scale)
        self.rotation_y = 0.0
        self.opacity = opacity

    def regenerate(self, params: GalaxyParameters, generator) -> PointCloud:
        """Replace parameters and recompute the whole cloud.

        The instance is only modified once generation has succeeded, so an
        InvalidParameters error leaves it exactly as it was.
        """
        cloud = generator.generate(params, self.random_source)
        self.params = params
        self.cloud = cloud
        logger.debug(f"Regenerated galaxy at {self.position.tolist()} with {cloud.point_count} points")
        return cloud

    def transform(self) -> np.ndarray:
        """Return the 4x4 model matrix: translate * rotate_y * scale."""
        c = np.cos(self.rotation_y)
        s = np.sin(self.rotation_y)
        matrix = np.array([
            [c * self.scale, 0.0, s * self.scale, self.position[0]],
            [0.0, self.scale, 0.0, self.position[1]],
            [-s * self.scale, 0.0, c * self.scale, self.position[2]],
            [0.0, 0.0, 0.0, 1.0],
        ])
        return matrix

    def world_positions(self) -> np.ndarray:
        """Return cloud positions transformed into world space, shape (n, 3)."""
        matrix = self.transform()
        return self.cloud.positions @ matrix[:3, :3].T + matrix[:3, 3]

    def __repr__(self) -> str:
        return (
            f"GalaxyInstance(points={self.cloud.point_count}, position={self.position.tolist()}, "
            f"scale={self.scale}, rotation_y={self.rotation_y:.4f})"
        )
