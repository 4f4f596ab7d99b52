"""Renderable point-cloud buffers."""

from dataclasses import dataclass
from typing import Tuple
import numpy as np


@dataclass(frozen=True, eq=False)
class PointCloud:
    """Index-aligned per-point buffers handed to a rendering host.

    Attributes:
        positions: (n, 3) xyz positions in galaxy-local space
        colors: (n, 3) RGB floats in [0, 1]
        sizes: (n,) per-point render sizes
    """
    positions: np.ndarray
    colors: np.ndarray
    sizes: np.ndarray

    def __post_init__(self):
        n = self.positions.shape[0]
        if self.positions.shape != (n, 3):
            raise ValueError(f"positions must have shape (n, 3), got {self.positions.shape}")
        if self.colors.shape != (n, 3):
            raise ValueError(f"colors must have shape ({n}, 3), got {self.colors.shape}")
        if self.sizes.shape != (n,):
            raise ValueError(f"sizes must have shape ({n},), got {self.sizes.shape}")

    @property
    def point_count(self) -> int:
        return self.positions.shape[0]

    def __len__(self) -> int:
        return self.point_count

    def bounds(self) -> Tuple[np.ndarray, np.ndarray]:
        """Return (min_xyz, max_xyz) of the positions."""
        return self.positions.min(axis=0), self.positions.max(axis=0)
