"""Backend factory for creating and managing compute backends."""

import logging
from typing import List, Optional
from galaxy_cloud.backends.base import Backend
from galaxy_cloud.backends.numpy_backend import NumPyBackend
from galaxy_cloud.backends.jax_backend import JAXBackend, JAX_AVAILABLE

logger = logging.getLogger(__name__)

# Optional backends - registered only when their library imports
_jax_backend = JAXBackend if JAX_AVAILABLE else None


def list_available_backends() -> List[str]:
    """List all available backends.
    
    Returns:
        List of backend names that can be instantiated
    """
    backends = ["numpy"]  # Always available
    
    if _jax_backend is not None:
        backends.append("jax")
    
    return backends


def get_backend(name: Optional[str] = None, prefer_gpu: bool = False) -> Backend:
    """Get a backend instance.
    
    Args:
        name: Backend name ('numpy', 'jax'). If None, auto-selects.
        prefer_gpu: If True and name is None, prefer JAX over NumPy.
        
    Returns:
        Backend instance
        
    Raises:
        ValueError: If requested backend is not available
    """
    if name is None:
        if prefer_gpu and _jax_backend is not None:
            try:
                return _jax_backend()
            except Exception as exc:
                logger.warning(f"JAX backend failed to initialize ({exc}), falling back to NumPy")
        return NumPyBackend()
    
    name_lower = name.lower()
    
    if name_lower == "numpy":
        return NumPyBackend()
    elif name_lower == "jax":
        if _jax_backend is None:
            raise ValueError("JAX backend not available. Install with: pip install jax jaxlib")
        return _jax_backend()
    else:
        available = list_available_backends()
        raise ValueError(f"Unknown backend '{name}'. Available: {available}")
