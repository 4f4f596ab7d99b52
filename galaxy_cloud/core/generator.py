"""Procedural spiral-galaxy point-cloud generator."""

import logging
import math
from typing import Optional
import numpy as np
from galaxy_cloud.backends.base import Backend
from galaxy_cloud.backends.numpy_backend import NumPyBackend
from galaxy_cloud.core.parameters import GalaxyParameters
from galaxy_cloud.core.point_cloud import PointCloud
from galaxy_cloud.core.random_source import RandomSource

logger = logging.getLogger(__name__)

# Height jitter relative to the planar axes; flattens the cloud into a disk
VERTICAL_FLATTENING = 0.1

# Uniform draws consumed per point, in order:
# radius, |jitter x|, sign x, |jitter y|, sign y, |jitter z|, sign z, size
DRAWS_PER_POINT = 8


class GalaxyGenerator:
    """Turns a GalaxyParameters record into a spiral-arm point cloud.

    Each point gets a radius drawn uniformly in [0, radius) (uniform in
    radius, not in area, so the core is denser than a flat disk), an arm
    chosen by its index, a spin offset proportional to its radius and a
    per-axis jitter whose magnitude is a uniform draw raised to
    ``randomness_power``.
    """

    def __init__(self, backend: Optional[Backend] = None):
        """Initialize generator.

        Args:
            backend: Compute backend for the array math (default: NumPy)
        """
        self.backend = backend or NumPyBackend()

    def generate(self, params: GalaxyParameters, rng: RandomSource) -> PointCloud:
        """Generate the point cloud for one galaxy.

        Args:
            params: Galaxy parameters
            rng: Source of uniform [0, 1) draws

        Returns:
            PointCloud with exactly ``params.point_count`` points

        Raises:
            InvalidParameters: If params violate a constraint. Nothing is
                drawn from ``rng`` in that case.
        """
        params.validate()
        b = self.backend
        n = params.point_count

        draws = b.array(rng.uniform((n, DRAWS_PER_POINT)))

        r = draws[:, 0] * params.radius

        # Arm membership is fixed by index
        index = np.arange(n)
        branch_angle = b.array((index % params.branch_count) / params.branch_count * 2.0 * math.pi)
        angle = branch_angle + r * params.spin

        magnitude = b.power(draws[:, 1:7:2], params.randomness_power)
        sign = b.where(draws[:, 2:7:2] < 0.5, 1.0, -1.0)
        jitter = magnitude * sign * params.randomness * b.expand_dims(r, 1)

        x = b.cos(angle) * r + jitter[:, 0]
        y = jitter[:, 1] * VERTICAL_FLATTENING
        z = b.sin(angle) * r + jitter[:, 2]
        positions = b.stack([x, y, z], axis=1)

        inner = b.array(params.inner_rgb)
        outer = b.array(params.outer_rgb)
        mix = b.expand_dims(r / params.radius, 1)
        colors = inner + (outer - inner) * mix
        # Rounding must not push a channel past either endpoint
        colors = b.clip(colors, b.array(np.minimum(params.inner_rgb, params.outer_rgb)),
                        b.array(np.maximum(params.inner_rgb, params.outer_rgb)))

        sizes = params.base_size * (0.5 + 0.5 * draws[:, 7])

        cloud = PointCloud(
            positions=b.to_numpy(positions),
            colors=b.to_numpy(colors),
            sizes=b.to_numpy(sizes),
        )
        logger.debug(
            f"Generated galaxy: {n} points, {params.branch_count} arms, "
            f"radius {params.radius}, backend {b.name}"
        )
        return cloud


def generate_galaxy(params: GalaxyParameters, rng: RandomSource, backend: Optional[Backend] = None) -> PointCloud:
    """Generate a galaxy point cloud with a one-off generator."""
    return GalaxyGenerator(backend).generate(params, rng)
