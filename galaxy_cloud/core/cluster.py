"""Collection of independent galaxies sharing one scene."""

import logging
from typing import Iterator, List, Optional, Sequence
import numpy as np
from galaxy_cloud.core.animator import GalaxyAnimator
from galaxy_cloud.core.generator import GalaxyGenerator
from galaxy_cloud.core.instance import GalaxyInstance
from galaxy_cloud.core.parameters import GalaxyParameters
from galaxy_cloud.core.random_source import NumPyRandomSource, RandomSource

logger = logging.getLogger(__name__)


class GalaxyCluster:
    """Ordered set of galaxies, each with its own parameters and placement.

    Instances share no mutable state: unless a random source is passed in,
    every galaxy gets its own NumPy stream spawned from the cluster seed.
    """

    def __init__(
        self,
        generator: Optional[GalaxyGenerator] = None,
        animator: Optional[GalaxyAnimator] = None,
        seed: Optional[int] = None
    ):
        """Initialize cluster.

        Args:
            generator: Point-cloud generator (default: NumPy backend)
            animator: Per-frame animator (default: per-second rotation, no pulse)
            seed: Root seed for per-galaxy random streams (None: fresh entropy)
        """
        self.generator = generator or GalaxyGenerator()
        self.animator = animator or GalaxyAnimator()
        self.seed = seed
        self._seed_sequence = np.random.SeedSequence(seed)
        self.galaxies: List[GalaxyInstance] = []

    def add_galaxy(
        self,
        params: GalaxyParameters,
        position: Sequence[float] = (0.0, 0.0, 0.0),
        scale: float = 1.0,
        random_source: Optional[RandomSource] = None
    ) -> GalaxyInstance:
        """Generate a galaxy and append it to the cluster.

        Raises:
            InvalidParameters: If params are invalid; the cluster is unchanged
        """
        if random_source is None:
            random_source = NumPyRandomSource(self._seed_sequence.spawn(1)[0])

        cloud = self.generator.generate(params, random_source)
        instance = GalaxyInstance(
            params,
            cloud,
            random_source,
            position=position,
            scale=scale,
            opacity=self.animator.base_opacity
        )
        self.galaxies.append(instance)
        logger.info(f"Added galaxy #{len(self.galaxies) - 1}: {params.point_count} points at {instance.position.tolist()}")
        return instance

    def update_galaxy_parameters(self, index: int, new_params: GalaxyParameters) -> bool:
        """Replace a galaxy's parameters, regenerating its cloud.

        Only the galaxy at ``index`` is touched.

        Returns:
            True if the cloud was regenerated, False if the parameters were
            equal to the current ones

        Raises:
            IndexError: If no galaxy exists at index
            InvalidParameters: If new_params are invalid; the galaxy keeps its
                previous parameters and cloud
        """
        instance = self[index]
        if new_params == instance.params:
            return False
        instance.regenerate(new_params, self.generator)
        logger.info(f"Updated galaxy #{index} parameters")
        return True

    def tick(self, elapsed_time: float, delta_time: float):
        """Advance every galaxy by one frame, in order."""
        for instance in self.galaxies:
            self.animator.advance(instance, elapsed_time, delta_time)

    def clear(self):
        """Drop all galaxies."""
        self.galaxies.clear()

    @property
    def total_points(self) -> int:
        return sum(instance.cloud.point_count for instance in self.galaxies)

    def __getitem__(self, index: int) -> GalaxyInstance:
        if not -len(self.galaxies) <= index < len(self.galaxies):
            raise IndexError(f"No galaxy at index {index} (cluster has {len(self.galaxies)})")
        return self.galaxies[index]

    def __len__(self) -> int:
        return len(self.galaxies)

    def __iter__(self) -> Iterator[GalaxyInstance]:
        return iter(self.galaxies)
