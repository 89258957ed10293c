"""Pytest fixtures for quasirand tests."""

import pytest
import numpy as np
import yaml

from quasirand.engine import QuasiRandom
from quasirand.foundation import GeneratorConfig


DIMENSIONS = [1, 2, 3, 5, 10, 500]


@pytest.fixture
def generator():
    """Two-dimensional generator with the default seed."""
    return QuasiRandom(2)


@pytest.fixture(params=DIMENSIONS)
def dim_generator(request):
    """Generator for each of the tested dimensions."""
    return QuasiRandom(request.param)


@pytest.fixture
def sample_config():
    """Create a sample generator configuration."""
    return GeneratorConfig(
        dimension=3,
        seed=0.25,
        dtype='float64',
        phi_iterations=30
    )


@pytest.fixture
def config_file(tmp_path, sample_config):
    """Write the sample configuration to a YAML file."""
    path = tmp_path / "generator.yaml"
    with open(path, 'w') as f:
        yaml.safe_dump({'generator': sample_config.to_dict()}, f)
    return path


@pytest.fixture
def points_close():
    """Compare points on the unit torus, so 0.9999999 and 0.0 count as equal."""
    def wrapped_close(a, b, atol=1e-9):
        diff = np.abs(np.asarray(a, dtype=np.float64) - np.asarray(b, dtype=np.float64))
        return bool(np.all(np.minimum(diff, 1.0 - diff) <= atol))
    return wrapped_close
