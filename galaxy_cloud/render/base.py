"""Base renderer interface."""

from abc import ABC, abstractmethod
from typing import Iterable
import numpy as np
from galaxy_cloud.core.instance import GalaxyInstance


class Renderer(ABC):
    """Abstract base class for point-cloud hosts."""
    
    @abstractmethod
    def render(self, galaxies: Iterable[GalaxyInstance]):
        """Render current frame.
        
        Args:
            galaxies: Galaxy instances, drawn with their current transform
                and opacity
        """
        pass
    
    @abstractmethod
    def capture_frame(self) -> np.ndarray:
        """Capture current frame as image array.
        
        Returns:
            Image array (H, W, 3) uint8
        """
        pass
    
    @abstractmethod
    def clear(self):
        """Clear the renderer."""
        pass
    
    @abstractmethod
    def close(self):
        """Close the renderer."""
        pass
