"""Adapter exposing the R-sequence as a scipy.stats.qmc engine."""

import numpy as np
from scipy.stats import qmc

from .generator import QuasiRandom
from ..foundation.data_types import DEFAULT_SEED


class RSequenceEngine(qmc.QMCEngine):
    """
    QMC engine for the generalized golden ratio sequence.

    Works with scipy's QMC tooling such as qmc.discrepancy and qmc.scale.
    The first point returned by random() is the first stepped point, not
    the seed point.

    Example:
        >>> engine = RSequenceEngine(d=2)
        >>> sample = engine.random(64)
        >>> sample.shape
        (64, 2)
    """

    def __init__(self, d: int, *, offset: float = DEFAULT_SEED, dtype=np.float64):
        """
        Args:
            d: Number of dimensions (>= 1)
            offset: Seed of the underlying sequence, in [0.0, 1.0)
            dtype: Floating dtype of the underlying generator
        """
        self._generator = QuasiRandom(d, seed=offset, dtype=dtype)
        super().__init__(d=d)

    @property
    def generator(self) -> QuasiRandom:
        """The underlying stateful generator."""
        return self._generator

    def _random(self, n: int = 1, *, workers: int = 1) -> np.ndarray:
        return self._generator.random(n).astype(np.float64, copy=False)

    def reset(self) -> 'RSequenceEngine':
        """Rewind the engine to its first point."""
        self._generator.reset()
        super().reset()
        return self

    def fast_forward(self, n: int) -> 'RSequenceEngine':
        """Skip the next n points."""
        self._generator.discard(n)
        self.num_generated += n
        return self
