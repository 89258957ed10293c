"""Thread-safe wrapper around a quasi-random generator."""

import threading

import numpy as np

from .base import BaseQuasiRandom


class SynchronizedQuasiRandom:
    """Serializes every call to a shared generator with a lock."""

    def __init__(self, generator: BaseQuasiRandom):
        """
        Wrap a generator for use from several threads.

        Args:
            generator: Generator to guard; it should not be used directly afterwards
        """
        self._generator = generator
        self.lock = threading.RLock()

    @property
    def dim(self) -> int:
        return self._generator.dim

    @property
    def seed(self):
        with self.lock:
            return self._generator.seed

    @property
    def alpha(self) -> np.ndarray:
        return self._generator.alpha

    @property
    def dtype(self) -> np.dtype:
        return self._generator.dtype

    def step(self):
        with self.lock:
            return self._generator.step()

    def evaluate(self, n: int):
        with self.lock:
            return self._generator.evaluate(n)

    def points(self, indices) -> np.ndarray:
        with self.lock:
            return self._generator.points(indices)

    def discard(self, n: int = 1):
        with self.lock:
            self._generator.discard(n)

    def random(self, n: int = 1) -> np.ndarray:
        with self.lock:
            return self._generator.random(n)

    def reset(self, seed=None):
        with self.lock:
            self._generator.reset(seed)

    def __iter__(self):
        return self

    def __next__(self):
        return self.step()

    def __repr__(self):
        return f"{type(self).__name__}({self._generator!r})"
