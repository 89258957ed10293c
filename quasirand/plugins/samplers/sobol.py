"""Sobol quasi-random sequence sampler."""

import numpy as np
from typing import Dict, Any
from scipy.stats import qmc
from .base import BaseSampler


class SobolSampler(BaseSampler):
    """Generates points using scrambled Sobol sequences."""
    
    name = "sobol"
    description = "Scrambled Sobol sequence"
    
    def generate(self, d: int, n: int, **kwargs) -> np.ndarray:
        """
        Generate n points using the Sobol sequence in d dimensions.
        Balance properties hold only for powers of two; scipy warns otherwise.
        """
        seed = kwargs.get('seed', None)
        
        sampler = qmc.Sobol(d=d, scramble=True, seed=seed)
        return sampler.random(n)
    
    def get_default_params(self) -> Dict[str, Any]:
        """Get default parameters."""
        return {'seed': None}
