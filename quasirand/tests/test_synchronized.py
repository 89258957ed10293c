"""Test sharing one generator between threads."""

import threading

import pytest
import numpy as np

from quasirand.engine import QuasiRandom, SynchronizedQuasiRandom, fixed_dimension
from quasirand.foundation import InvalidSeed


class TestSynchronizedQuasiRandom:
    """Test the lock-guarded wrapper."""
    
    def test_delegates(self):
        shared = SynchronizedQuasiRandom(QuasiRandom(3, 0.2))
        reference = QuasiRandom(3, 0.2)
        
        assert shared.dim == 3
        assert shared.seed == 0.2
        assert shared.dtype == np.float64
        assert np.array_equal(shared.step(), reference.step())
        assert np.array_equal(next(shared), reference.step())
        
        shared.discard(4)
        reference.discard(4)
        assert np.array_equal(shared.random(3), reference.random(3))
        assert np.array_equal(shared.evaluate(50), reference.evaluate(50))
        assert np.array_equal(shared.points([1, 2]), reference.points([1, 2]))
    
    def test_reset(self):
        shared = SynchronizedQuasiRandom(QuasiRandom(2))
        shared.discard(10)
        shared.reset(0.75)
        
        assert shared.seed == 0.75
        assert np.allclose(shared.step(), shared.evaluate(1))
        
        with pytest.raises(InvalidSeed):
            shared.reset(3.0)
    
    def test_alpha_and_repr(self):
        inner = QuasiRandom(3, 0.2)
        shared = SynchronizedQuasiRandom(inner)
        
        assert np.array_equal(shared.alpha, inner.alpha)
        assert repr(shared) == "SynchronizedQuasiRandom(QuasiRandom(dim=3, seed=0.2, dtype=float64))"
    
    def test_wraps_fixed_generator(self):
        shared = SynchronizedQuasiRandom(fixed_dimension(2)())
        assert isinstance(shared.step(), tuple)
    
    def test_concurrent_steps_cover_sequence(self):
        """Every index is produced exactly once across all threads."""
        n_threads, per_thread = 8, 250
        shared = SynchronizedQuasiRandom(QuasiRandom(1, 0.0))
        results = [[] for _ in range(n_threads)]
        
        def worker(out):
            for _ in range(per_thread):
                out.append(float(shared.step()[0]))
        
        threads = [threading.Thread(target=worker, args=(results[i],)) for i in range(n_threads)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        
        produced = np.sort(np.concatenate([np.array(r) for r in results]))
        reference = QuasiRandom(1, 0.0)
        expected = np.sort(reference.random(n_threads * per_thread)[:, 0])
        
        assert produced.shape == expected.shape
        assert np.array_equal(produced, expected)
