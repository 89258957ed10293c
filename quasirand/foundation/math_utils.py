"""Numeric helpers for the generalized golden ratio sequence."""
import numpy as np
from scipy.stats import qmc

from .validation import check_dimension, check_dtype, check_iterations


PHI_ITERATIONS = 30


def phi(dim: int, iterations: int = PHI_ITERATIONS, dtype=np.float64):
    """
    Approximate the generalized golden ratio in dim dimensions.
    
    phi(d) is the positive root of x^(d+1) = x + 1. It is found by the
    fixed-point iteration x <- (1 + x)^(1/(d+1)) starting from x = 1, run for
    a fixed number of iterations.
    
    Args:
        dim: Number of dimensions (>= 1)
        iterations: Number of fixed-point iterations
        dtype: Floating dtype the computation is carried out in
        
    Returns:
        phi(dim) as a scalar of the requested dtype
    """
    dim = check_dimension(dim)
    iterations = check_iterations(iterations)
    real = check_dtype(dtype).type
    
    phid = real(1.0)
    exponent = real(1.0) / real(dim + 1)
    for _ in range(iterations):
        phid = (real(1.0) + phid) ** exponent
    
    return phid


def compute_alpha(dim: int, iterations: int = PHI_ITERATIONS, dtype=np.float64) -> np.ndarray:
    """
    Compute the per-dimension step sizes of the sequence.
    
    Args:
        dim: Number of dimensions (>= 1)
        iterations: Number of fixed-point iterations used for phi
        dtype: Floating dtype of the result
        
    Returns:
        Array of shape (dim,) with alpha[i] = 1 / phi(dim)^(i+1)
    """
    dim = check_dimension(dim)
    resolved = check_dtype(dtype)
    phid = phi(dim, iterations, resolved)
    powers = np.arange(1, dim + 1, dtype=resolved)
    return (resolved.type(1.0) / np.power(phid, powers)).astype(resolved, copy=False)


def frac(x):
    """Fractional part x - floor(x), mapping any real into [0, 1)."""
    return x - np.floor(x)


def discrepancy(sample: np.ndarray, method: str = 'CD') -> float:
    """
    Measure how uniformly a point set covers the unit hypercube.
    
    Args:
        sample: Array of shape (n, d) with points in [0, 1]
        method: 'CD', 'WD', 'MD' or 'L2-star', see scipy.stats.qmc.discrepancy
        
    Returns:
        Discrepancy of the sample (lower is more uniform)
    """
    sample = np.asarray(sample, dtype=np.float64)
    if sample.ndim == 1:
        sample = sample.reshape(-1, 1)
    return float(qmc.discrepancy(sample, method=method))
