"""JAX backend implementation (optional, GPU support)."""

from typing import Any
import numpy as np
from galaxy_cloud.backends.base import Backend

try:
    import jax
    import jax.numpy as jnp
    JAX_AVAILABLE = True
except ImportError:
    JAX_AVAILABLE = False


class JAXBackend(Backend):
    """JAX-based backend with GPU support."""
    
    def __init__(self, device: str = None, use_float32: bool = True):
        """Initialize JAX backend.
        
        Args:
            device: Device string (e.g., 'cpu', 'gpu:0'). Auto-selects if None.
            use_float32: Use float32 for arrays (faster on GPU, less memory).
        """
        if not JAX_AVAILABLE:
            raise ImportError("JAX not available. Install with: pip install jax jaxlib")
        
        self._device = device or jax.devices()[0]
        self._float32 = use_float32
        self._dtype = jnp.float32 if use_float32 else jnp.float64
    
    @property
    def name(self) -> str:
        return "jax"
    
    @property
    def device(self) -> str:
        return str(self._device)
    
    def array(self, data: Any, dtype=None) -> Any:
        data = np.asarray(data)
        if dtype is None and np.issubdtype(data.dtype, np.floating):
            dtype = self._dtype
        return jnp.array(data, dtype=dtype)
    
    def power(self, base: Any, exponent: Any) -> Any:
        return jnp.power(base, exponent)
    
    def clip(self, array: Any, min_val: Any, max_val: Any) -> Any:
        return jnp.clip(array, min_val, max_val)
    
    def where(self, condition: Any, x: Any, y: Any) -> Any:
        return jnp.where(condition, x, y)
    
    def stack(self, arrays, axis: int = 0) -> Any:
        return jnp.stack(arrays, axis=axis)

    def expand_dims(self, array: Any, axis: int) -> Any:
        return jnp.expand_dims(array, axis=axis)

    def sin(self, array: Any) -> Any:
        return jnp.sin(array)

    def cos(self, array: Any) -> Any:
        return jnp.cos(array)

    def to_numpy(self, array: Any) -> np.ndarray:
        return np.asarray(array, dtype=np.float64)
