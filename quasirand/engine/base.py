"""Base class shared by the dynamic and fixed-dimension generators."""

from abc import ABC, abstractmethod

import numpy as np

from ..foundation.math_utils import frac
from ..foundation.validation import check_count


class BaseQuasiRandom(ABC):
    """
    Quasi-random point generator based on the generalized golden ratio.

    Points lie in the unit hypercube [0, 1)^d and follow the additive
    recurrence x_{n+1} = frac(x_n + alpha) with alpha[i] = 1 / phi(d)^(i+1).
    See Martin Roberts, 2018, "The Unreasonable Effectiveness of Quasirandom
    Sequences".

    The sequence starts at the seed point: evaluate(0) is the seed replicated
    across every dimension and the n-th call of step() returns evaluate(n).

    Instances are not locked internally. Use one generator per thread or
    wrap it in SynchronizedQuasiRandom.
    """

    __slots__ = ()

    @property
    @abstractmethod
    def dim(self) -> int:
        """Number of dimensions of the generated points."""

    @property
    @abstractmethod
    def seed(self):
        """Current seed of the sequence."""

    @property
    @abstractmethod
    def dtype(self) -> np.dtype:
        """Floating dtype of the generated points."""

    @abstractmethod
    def _alpha_view(self) -> np.ndarray:
        """Return the step vector without copying."""

    @abstractmethod
    def _state_view(self) -> np.ndarray:
        """Return the mutable current point without copying."""

    @abstractmethod
    def _as_point(self, values: np.ndarray):
        """Convert an array of coordinates to the generator's point type."""

    @abstractmethod
    def reset(self, seed=None):
        """
        Restart the sequence.

        Args:
            seed: New seed in [0.0, 1.0), or None to keep the current seed
        """

    @property
    def alpha(self) -> np.ndarray:
        """Copy of the per-dimension step sizes."""
        return self._alpha_view().copy()

    def _advance(self):
        state = self._state_view()
        state += self._alpha_view()
        state -= np.floor(state)

    def step(self):
        """Generate the next point of the sequence."""
        self._advance()
        return self._as_point(self._state_view())

    def evaluate(self, n: int):
        """
        Return the n-th point of the sequence without changing the state.

        Args:
            n: Zero-based index into the sequence

        Returns:
            frac(seed + alpha * n)
        """
        n = check_count(n)
        real = self.dtype.type
        try:
            with np.errstate(over='ignore'):
                scale = real(n)
        except OverflowError as exc:
            raise ValueError(f"n is too large for {self.dtype.name}, got {n}.") from exc
        if not np.isfinite(scale):
            raise ValueError(f"n is too large for {self.dtype.name}, got {n}.")
        return self._as_point(frac(real(self.seed) + self._alpha_view() * scale))

    def points(self, indices) -> np.ndarray:
        """
        Evaluate the sequence at many indices at once.

        Args:
            indices: Array-like of non-negative integers

        Returns:
            Array of shape indices.shape + (dim,)
        """
        idx = np.asarray(indices)
        if idx.size and not np.issubdtype(idx.dtype, np.integer):
            raise ValueError(f"indices must be integers, got dtype {idx.dtype}.")
        if idx.size and idx.min() < 0:
            raise ValueError("indices must be non-negative.")

        real = self.dtype.type
        scaled = np.multiply.outer(idx.astype(self.dtype), self._alpha_view())
        return frac(real(self.seed) + scaled)

    def discard(self, n: int = 1):
        """Advance the sequence by n points without returning them."""
        n = check_count(n)
        for _ in range(n):
            self._advance()

    def random(self, n: int = 1) -> np.ndarray:
        """
        Generate the next n points of the sequence.

        Args:
            n: Number of points

        Returns:
            Array of shape (n, dim), same values as n calls of step()
        """
        n = check_count(n)
        out = np.empty((n, self.dim), dtype=self.dtype)
        for i in range(n):
            self._advance()
            out[i] = self._state_view()
        return out

    def __iter__(self):
        return self

    def __next__(self):
        return self.step()

    def __repr__(self):
        return f"{type(self).__name__}(dim={self.dim}, seed={float(self.seed)!r}, dtype={self.dtype.name})"
