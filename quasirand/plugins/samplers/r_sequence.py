"""Generalized golden ratio sequence sampler."""

import numpy as np
from typing import Dict, Any
from .base import BaseSampler
from ...engine.generator import QuasiRandom
from ...foundation.data_types import DEFAULT_SEED


class RSequenceSampler(BaseSampler):
    """Generates points with the additive golden ratio recurrence."""
    
    name = "r_sequence"
    description = "Generalized golden ratio (R_d) sequence"
    
    def generate(self, d: int, n: int, **kwargs) -> np.ndarray:
        """Generate n points in d dimensions, skipping the first `skip` points."""
        seed = kwargs.get('seed', DEFAULT_SEED)
        skip = kwargs.get('skip', 0)
        dtype = kwargs.get('dtype', np.float64)
        
        generator = QuasiRandom(d, seed=seed, dtype=dtype)
        generator.discard(skip)
        return generator.random(n)
    
    def get_default_params(self) -> Dict[str, Any]:
        """Get default parameters."""
        return {'seed': DEFAULT_SEED, 'skip': 0, 'dtype': 'float64'}
