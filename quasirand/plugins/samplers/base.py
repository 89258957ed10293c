"""Base class for all sampler plugins."""

from abc import ABC, abstractmethod
import numpy as np
from typing import Dict, Any


class BaseSampler(ABC):
    """Base class for unit hypercube sampling strategies."""
    
    name: str = "base"
    description: str = "Base sampler class"
    
    @abstractmethod
    def generate(self, d: int, n: int, **kwargs) -> np.ndarray:
        """
        Generate a point set.
        
        Args:
            d: Number of dimensions
            n: Number of points
            **kwargs: Additional sampler-specific parameters
            
        Returns:
            n × d array of points in [0, 1)
        """
        pass
    
    @abstractmethod
    def get_default_params(self) -> Dict[str, Any]:
        """
        Get default parameters for this sampler type.
        
        Returns:
            Dictionary of default parameters
        """
        pass
