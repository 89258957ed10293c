"""Quasi-random generators with the dimension fixed per class."""

from functools import lru_cache

import numpy as np

from .base import BaseQuasiRandom
from ..foundation.data_types import DEFAULT_SEED
from ..foundation.logging_config import get_logger
from ..foundation.math_utils import compute_alpha
from ..foundation.validation import check_dimension, check_dtype, check_seed

logger = get_logger(__name__)


class FixedQuasiRandom(BaseQuasiRandom):
    """
    Generator whose dimension and precision belong to the class.

    Concrete classes are made by fixed_dimension(); alpha is computed once
    per class and shared by every instance. Points are returned as tuples
    of length DIM.
    """

    DIM = None
    DTYPE = np.dtype(np.float64)
    ALPHA = None

    __slots__ = ('_seed', '_point')

    def __init__(self, seed: float = DEFAULT_SEED):
        """
        Construct a generator using the specified seed.

        Args:
            seed: Offset of the sequence, must be in [0.0, 1.0)

        Raises:
            InvalidSeed: If seed is outside [0.0, 1.0)
        """
        if self.ALPHA is None:
            raise TypeError("Use fixed_dimension(dim) to create a concrete generator class.")
        self._seed = check_seed(seed, self.DTYPE)
        self._point = np.full(self.DIM, self._seed, dtype=self.DTYPE)

    @property
    def dim(self) -> int:
        return self.DIM

    @property
    def seed(self):
        return self._seed

    @property
    def dtype(self) -> np.dtype:
        return self.DTYPE

    def _alpha_view(self) -> np.ndarray:
        return self.ALPHA

    def _state_view(self) -> np.ndarray:
        return self._point

    def _as_point(self, values: np.ndarray) -> tuple:
        return tuple(values)

    def reset(self, seed=None):
        if seed is not None:
            self._seed = check_seed(seed, self.DTYPE)
        self._point.fill(self._seed)


@lru_cache(maxsize=None)
def _make_fixed_class(dim: int, dtype: np.dtype) -> type:
    alpha = compute_alpha(dim, dtype=dtype)
    alpha.flags.writeable = False

    name = f"QuasiRandom{dim}D_{dtype.name}"
    logger.debug(f"Created fixed generator class {name}")
    return type(name, (FixedQuasiRandom,), {
        '__slots__': (),
        'DIM': dim,
        'DTYPE': dtype,
        'ALPHA': alpha,
    })


def fixed_dimension(dim: int, dtype=np.float64) -> type:
    """
    Get the generator class for a dimension known ahead of time.

    The same class object is returned for equal (dim, dtype) pairs.

    Args:
        dim: Number of dimensions (>= 1)
        dtype: Floating dtype of the generated points

    Returns:
        Subclass of FixedQuasiRandom

    Raises:
        InvalidDimension: If dim is less than 1

    Example:
        >>> QuasiRandom3D = fixed_dimension(3)
        >>> qrng = QuasiRandom3D(seed=0.25)
        >>> len(qrng.step())
        3
    """
    return _make_fixed_class(check_dimension(dim), check_dtype(dtype))
