"""Abstract base class for compute backends."""

from abc import ABC, abstractmethod
from typing import Any
import numpy as np


class Backend(ABC):
    """Abstract interface for array computation backends.
    
    The generator expresses its math through this interface so the same
    code can run on different execution engines (NumPy, JAX). Results are
    always handed back to the host as NumPy arrays via ``to_numpy``.
    """
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this backend."""
        pass
    
    @property
    @abstractmethod
    def device(self) -> str:
        """Return the device type (e.g., 'cpu', 'cuda:0')."""
        pass
    
    @abstractmethod
    def array(self, data: Any, dtype=None) -> Any:
        """Create an array from data.
        
        Args:
            data: Input data (list, numpy array, etc.)
            dtype: Optional data type
            
        Returns:
            Backend array object
        """
        pass
    
    @abstractmethod
    def power(self, base: Any, exponent: Any) -> Any:
        """Element-wise power."""
        pass
    
    @abstractmethod
    def clip(self, array: Any, min_val: Any, max_val: Any) -> Any:
        """Clip array values to range (scalars or broadcastable arrays)."""
        pass
    
    @abstractmethod
    def where(self, condition: Any, x: Any, y: Any) -> Any:
        """Conditional selection."""
        pass
    
    @abstractmethod
    def stack(self, arrays, axis: int = 0) -> Any:
        """Stack arrays along a new axis. E.g. stack([x, y, z], axis=1) -> (n, 3)."""
        pass

    @abstractmethod
    def expand_dims(self, array: Any, axis: int) -> Any:
        """Expand the shape by inserting a new axis at axis (e.g. (n,) -> (n, 1))."""
        pass

    @abstractmethod
    def sin(self, array: Any) -> Any:
        pass

    @abstractmethod
    def cos(self, array: Any) -> Any:
        pass

    @abstractmethod
    def to_numpy(self, array: Any) -> np.ndarray:
        """Convert backend array to NumPy array.
        
        This is needed for rendering and for handing buffers to a host.
        """
        pass
