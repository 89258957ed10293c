"""Test the scipy.stats.qmc engine adapter."""

import pytest
import numpy as np
from scipy.stats import qmc

from quasirand.engine import QuasiRandom, RSequenceEngine
from quasirand.foundation import InvalidDimension, InvalidSeed


class TestRSequenceEngine:
    """Test the QMCEngine interface."""
    
    def test_random_matches_generator(self):
        engine = RSequenceEngine(d=3, offset=0.25)
        reference = QuasiRandom(3, 0.25)
        
        sample = engine.random(20)
        
        assert sample.shape == (20, 3)
        assert np.array_equal(sample, reference.random(20))
        assert engine.num_generated == 20
    
    def test_reset(self):
        engine = RSequenceEngine(d=2)
        first = engine.random(5)
        engine.random(7)
        
        engine.reset()
        
        assert engine.num_generated == 0
        assert np.array_equal(engine.random(5), first)
    
    def test_fast_forward(self):
        engine = RSequenceEngine(d=2)
        reference = QuasiRandom(2)
        
        engine.fast_forward(13)
        
        assert engine.num_generated == 13
        assert np.allclose(engine.random(1)[0], reference.evaluate(14))
    
    def test_scale(self):
        sample = RSequenceEngine(d=2).random(16)
        scaled = qmc.scale(sample, [-1.0, 10.0], [1.0, 20.0])
        
        assert np.all(scaled[:, 0] >= -1.0) and np.all(scaled[:, 0] < 1.0)
        assert np.all(scaled[:, 1] >= 10.0) and np.all(scaled[:, 1] < 20.0)
    
    def test_discrepancy_lower_than_clustered(self):
        sample = RSequenceEngine(d=2).random(128)
        assert qmc.discrepancy(sample) < qmc.discrepancy(sample * 0.5)
    
    def test_float32_output_is_float64(self):
        engine = RSequenceEngine(d=2, dtype=np.float32)
        assert engine.generator.dtype == np.float32
        assert engine.random(4).dtype == np.float64
    
    def test_invalid_dimension(self):
        with pytest.raises(InvalidDimension):
            RSequenceEngine(d=0)
    
    def test_invalid_offset(self):
        with pytest.raises(InvalidSeed):
            RSequenceEngine(d=2, offset=1.5)
