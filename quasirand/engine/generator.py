"""Quasi-random generator with the dimension chosen at runtime."""

import numpy as np

from .base import BaseQuasiRandom
from ..foundation.data_types import DEFAULT_SEED, GeneratorConfig
from ..foundation.logging_config import get_logger
from ..foundation.math_utils import PHI_ITERATIONS, compute_alpha
from ..foundation.validation import check_dimension, check_dtype, check_iterations, check_seed

logger = get_logger(__name__)


class QuasiRandom(BaseQuasiRandom):
    """
    Generates points in the unit hypercube in dim dimensions.

    Points are returned as new numpy arrays of shape (dim,); mutating them
    does not affect the generator.

    Example:
        >>> qrng = QuasiRandom(2, seed=0.5)
        >>> first = qrng.step()
        >>> np.allclose(first, qrng.evaluate(1))
        True
    """

    def __init__(self, dim: int, seed: float = DEFAULT_SEED, dtype=np.float64,
                 phi_iterations: int = PHI_ITERATIONS):
        """
        Construct a generator in dim dimensions.

        Args:
            dim: Number of dimensions (>= 1)
            seed: Offset of the sequence, must be in [0.0, 1.0)
            dtype: Floating dtype of the generated points
            phi_iterations: Fixed-point iterations used to approximate phi

        Raises:
            InvalidDimension: If dim is less than 1
            InvalidSeed: If seed is outside [0.0, 1.0)
            QuasiRandomError: If phi_iterations is less than 1
        """
        dim = check_dimension(dim)
        dtype = check_dtype(dtype)
        seed = check_seed(seed, dtype)
        phi_iterations = check_iterations(phi_iterations)

        alpha = compute_alpha(dim, phi_iterations, dtype)
        alpha.flags.writeable = False

        self._dim = dim
        self._dtype = dtype
        self._seed = seed
        self._alpha = alpha
        self._point = np.full(dim, seed, dtype=dtype)

        logger.debug(f"Created generator: dim={dim}, seed={float(seed)}, dtype={dtype.name}")

    @classmethod
    def from_config(cls, config: GeneratorConfig) -> 'QuasiRandom':
        """Create a generator from a GeneratorConfig."""
        config.validate()
        return cls(
            config.dimension,
            seed=config.seed,
            dtype=config.dtype,
            phi_iterations=config.phi_iterations,
        )

    @property
    def dim(self) -> int:
        return self._dim

    @property
    def seed(self):
        return self._seed

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    def _alpha_view(self) -> np.ndarray:
        return self._alpha

    def _state_view(self) -> np.ndarray:
        return self._point

    def _as_point(self, values: np.ndarray) -> np.ndarray:
        return np.array(values, dtype=self._dtype)

    def reset(self, seed=None):
        """
        Restart the sequence, optionally with a new seed.

        Args:
            seed: New seed in [0.0, 1.0), or None to keep the current seed

        Raises:
            InvalidSeed: If seed is outside [0.0, 1.0); the generator is unchanged
        """
        if seed is not None:
            self._seed = check_seed(seed, self._dtype)
        self._point.fill(self._seed)

        logger.debug(f"Reset generator: seed={float(self._seed)}")
