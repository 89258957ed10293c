"""Engine layer for quasirand.

This module provides the generators themselves: a runtime-sized generator,
per-dimension generator classes, a lock-guarded wrapper, and a scipy QMC
engine adapter.
"""

from .base import BaseQuasiRandom
from .generator import QuasiRandom
from .fixed import FixedQuasiRandom, fixed_dimension
from .synchronized import SynchronizedQuasiRandom
from .qmc_engine import RSequenceEngine

__all__ = [
    'BaseQuasiRandom',
    'QuasiRandom',
    'FixedQuasiRandom',
    'fixed_dimension',
    'SynchronizedQuasiRandom',
    'RSequenceEngine',
]
