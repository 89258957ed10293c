"""Argument checks shared by the generators and their configuration."""
import operator

import numpy as np

from .errors import InvalidDimension, InvalidSeed, QuasiRandomError


def check_dimension(dim) -> int:
    """
    Validate the number of dimensions of a generator.
    
    Args:
        dim: Requested dimension, any integer-like value
        
    Returns:
        The dimension as a Python int
        
    Raises:
        InvalidDimension: If dim is not an integer or is less than 1
    """
    if isinstance(dim, bool):
        raise InvalidDimension(f"The dimension must be an integer, got {dim!r}.")
    try:
        value = operator.index(dim)
    except TypeError as exc:
        raise InvalidDimension(f"The dimension must be an integer, got {dim!r}.") from exc
    
    if value < 1:
        raise InvalidDimension("The dimension of the generator must be at least 1.")
    return value


def check_dtype(dtype) -> np.dtype:
    """Resolve dtype to a numpy floating dtype, raising TypeError otherwise."""
    resolved = np.dtype(dtype)
    if not np.issubdtype(resolved, np.floating):
        raise TypeError(f"The generator requires a floating point dtype, got {resolved}.")
    return resolved


def check_seed(seed, dtype=np.float64):
    """
    Validate a seed against the [0.0, 1.0) policy.
    
    The check is made after conversion to dtype, so a seed that rounds up
    to 1.0 in single precision is rejected as well.
    
    Args:
        seed: Seed value
        dtype: Floating dtype the seed is stored in
        
    Returns:
        The seed as a scalar of the requested dtype
        
    Raises:
        InvalidSeed: If the seed is not a real number or lies outside [0.0, 1.0)
    """
    if isinstance(seed, (str, bytes)):
        raise InvalidSeed(f"The seed must be a real number, got {seed!r}.")
    real = np.dtype(dtype).type
    try:
        value = real(seed)
    except (TypeError, ValueError) as exc:
        raise InvalidSeed(f"The seed must be a real number, got {seed!r}.") from exc
    
    if not (0.0 <= value < 1.0):
        raise InvalidSeed(f"The seed must be in the range [0.0, 1.0), got {seed!r}.")
    return value


def check_count(n, name: str = "n") -> int:
    """Validate a non-negative integer index or step count."""
    if isinstance(n, bool):
        raise ValueError(f"{name} must be a non-negative integer, got {n!r}.")
    try:
        value = operator.index(n)
    except TypeError as exc:
        raise ValueError(f"{name} must be a non-negative integer, got {n!r}.") from exc
    
    if value < 0:
        raise ValueError(f"{name} must be a non-negative integer, got {value}.")
    return value


def check_iterations(iterations) -> int:
    """Validate the fixed-point iteration count used to approximate phi."""
    if isinstance(iterations, bool):
        raise QuasiRandomError(f"phi_iterations must be a positive integer, got {iterations!r}.")
    try:
        value = operator.index(iterations)
    except TypeError as exc:
        raise QuasiRandomError(f"phi_iterations must be a positive integer, got {iterations!r}.") from exc
    
    if value < 1:
        raise QuasiRandomError(f"phi_iterations must be a positive integer, got {value}.")
    return value
