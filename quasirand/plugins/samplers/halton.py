"""Halton quasi-random sequence sampler."""

import numpy as np
from typing import Dict, Any
from scipy.stats import qmc
from .base import BaseSampler


class HaltonSampler(BaseSampler):
    """Generates points using scrambled Halton sequences."""
    
    name = "halton"
    description = "Scrambled Halton sequence"
    
    def generate(self, d: int, n: int, **kwargs) -> np.ndarray:
        """Generate n points using the Halton sequence in d dimensions."""
        seed = kwargs.get('seed', None)
        
        sampler = qmc.Halton(d=d, scramble=True, seed=seed)
        return sampler.random(n)
    
    def get_default_params(self) -> Dict[str, Any]:
        """Get default parameters."""
        return {'seed': None}
