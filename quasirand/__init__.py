"""quasirand - Low-discrepancy point sequences from the generalized golden ratio."""

__version__ = "0.1.0"

# Foundation layer
from .foundation.errors import QuasiRandomError, InvalidDimension, InvalidSeed
from .foundation.data_types import GeneratorConfig, DEFAULT_SEED, load_config
from .foundation.math_utils import phi, compute_alpha, discrepancy
from .foundation.logging_config import setup_logging

# Engine layer
from .engine import (
    BaseQuasiRandom,
    QuasiRandom,
    FixedQuasiRandom,
    fixed_dimension,
    SynchronizedQuasiRandom,
    RSequenceEngine,
)

# Plugin registry
from .plugins.samplers import get_sampler, list_samplers

__all__ = [
    # Version
    '__version__',
    
    # Foundation
    'QuasiRandomError',
    'InvalidDimension',
    'InvalidSeed',
    'GeneratorConfig',
    'DEFAULT_SEED',
    'load_config',
    'phi',
    'compute_alpha',
    'discrepancy',
    'setup_logging',
    
    # Engine
    'BaseQuasiRandom',
    'QuasiRandom',
    'FixedQuasiRandom',
    'fixed_dimension',
    'SynchronizedQuasiRandom',
    'RSequenceEngine',
    
    # Plugins
    'get_sampler',
    'list_samplers',
]
