"""Configuration types for the quasi-random generators."""
from dataclasses import dataclass
from pathlib import Path
from typing import Union

import yaml

from .math_utils import PHI_ITERATIONS
from .validation import check_dimension, check_dtype, check_iterations, check_seed


DEFAULT_SEED = 0.5


@dataclass
class GeneratorConfig:
    """Configuration of a single quasi-random generator."""
    dimension: int = 2
    seed: float = DEFAULT_SEED  # Offset in [0.0, 1.0)
    dtype: str = 'float64'  # Any numpy floating dtype name
    phi_iterations: int = PHI_ITERATIONS  # Fixed-point iterations for phi
    
    def validate(self):
        """Validate generator configuration."""
        check_dimension(self.dimension)
        resolved = check_dtype(self.dtype)
        check_seed(self.seed, resolved)
        check_iterations(self.phi_iterations)
        return True
    
    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'dimension': self.dimension,
            'seed': self.seed,
            'dtype': self.dtype,
            'phi_iterations': self.phi_iterations,
        }
    
    @classmethod
    def from_dict(cls, d: dict) -> 'GeneratorConfig':
        """Create from dictionary."""
        return cls(**d)


def load_config(path: Union[str, Path]) -> GeneratorConfig:
    """
    Load a generator configuration from a YAML file.
    
    The file either holds the fields at the top level or under a
    'generator' key.
    
    Args:
        path: Path to the YAML file
        
    Returns:
        Validated GeneratorConfig
    """
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    
    if 'generator' in data:
        data = data['generator']
    
    config = GeneratorConfig.from_dict(data)
    config.validate()
    return config
