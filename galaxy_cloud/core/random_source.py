"""Uniform random sources injected into the generator."""

from abc import ABC, abstractmethod
from itertools import cycle, islice
from typing import Iterable, List, Tuple
import numpy as np


class RandomSource(ABC):
    """Abstract source of uniform draws in [0, 1)."""

    @abstractmethod
    def uniform(self, shape: Tuple[int, ...]) -> np.ndarray:
        """Draw an array of the given shape, filled in C order."""
        pass


class NumPyRandomSource(RandomSource):
    """Random source backed by a NumPy Generator."""

    def __init__(self, seed=None):
        """Initialize source.

        Args:
            seed: Anything numpy.random.default_rng accepts (int, SeedSequence,
                Generator) or None for fresh OS entropy
        """
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def uniform(self, shape: Tuple[int, ...]) -> np.ndarray:
        return self._rng.random(shape)


class SequenceRandomSource(RandomSource):
    """Replays a fixed sequence of values, cycling when exhausted.

    Useful to pin down individual draws when checking the generator.
    """

    def __init__(self, values: Iterable[float]):
        self.values: List[float] = [float(v) for v in values]
        if not self.values:
            raise ValueError("SequenceRandomSource needs at least one value")
        for v in self.values:
            if not 0.0 <= v < 1.0:
                raise ValueError(f"Values must lie in [0, 1), got {v}")
        self._iter = cycle(self.values)

    def uniform(self, shape: Tuple[int, ...]) -> np.ndarray:
        count = int(np.prod(shape))
        return np.fromiter(islice(self._iter, count), dtype=np.float64, count=count).reshape(shape)

