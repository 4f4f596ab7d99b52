"""NumPy backend implementation."""

from typing import Any
import numpy as np
from galaxy_cloud.backends.base import Backend


class NumPyBackend(Backend):
    """NumPy-based backend (baseline, always available)."""
    
    @property
    def name(self) -> str:
        return "numpy"
    
    @property
    def device(self) -> str:
        return "cpu"
    
    def array(self, data: Any, dtype=None) -> np.ndarray:
        return np.array(data, dtype=dtype)
    
    def power(self, base: Any, exponent: Any) -> np.ndarray:
        return np.power(base, exponent)
    
    def clip(self, array: Any, min_val: Any, max_val: Any) -> np.ndarray:
        return np.clip(array, min_val, max_val)
    
    def where(self, condition: Any, x: Any, y: Any) -> np.ndarray:
        return np.where(condition, x, y)
    
    def stack(self, arrays, axis: int = 0) -> np.ndarray:
        return np.stack(arrays, axis=axis)

    def expand_dims(self, array: Any, axis: int) -> np.ndarray:
        return np.expand_dims(array, axis=axis)

    def sin(self, array: Any) -> np.ndarray:
        return np.sin(array)

    def cos(self, array: Any) -> np.ndarray:
        return np.cos(array)

    def to_numpy(self, array: Any) -> np.ndarray:
        return np.asarray(array)
