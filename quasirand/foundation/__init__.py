"""Foundation layer initialization."""
from .errors import QuasiRandomError, InvalidDimension, InvalidSeed
from .data_types import GeneratorConfig, DEFAULT_SEED, load_config
from .math_utils import PHI_ITERATIONS, phi, compute_alpha, frac, discrepancy
from .validation import check_dimension, check_dtype, check_seed, check_count, check_iterations

__all__ = [
    'QuasiRandomError',
    'InvalidDimension',
    'InvalidSeed',
    'GeneratorConfig',
    'DEFAULT_SEED',
    'load_config',
    'PHI_ITERATIONS',
    'phi',
    'compute_alpha',
    'frac',
    'discrepancy',
    'check_dimension',
    'check_dtype',
    'check_seed',
    'check_count',
    'check_iterations',
]
