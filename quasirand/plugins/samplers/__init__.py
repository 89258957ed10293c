"""Sampler plugin system."""

from .base import BaseSampler
from .r_sequence import RSequenceSampler
from .halton import HaltonSampler
from .sobol import SobolSampler


_SAMPLERS = {}


def register_sampler(sampler_class):
    """Register a sampler class in the registry."""
    _SAMPLERS[sampler_class.name] = sampler_class


def get_sampler(name: str) -> BaseSampler:
    """
    Get a sampler instance by name.
    
    Args:
        name: Name of the sampler class
        
    Returns:
        Instance of the requested sampler class
        
    Raises:
        KeyError: If sampler name is not registered
    """
    if name not in _SAMPLERS:
        raise KeyError(
            f"Sampler '{name}' not found. Available samplers: {list_samplers()}"
        )
    return _SAMPLERS[name]()


def list_samplers():
    """List all registered sampler names."""
    return list(_SAMPLERS.keys())


# Register all built-in samplers
register_sampler(RSequenceSampler)
register_sampler(HaltonSampler)
register_sampler(SobolSampler)


__all__ = [
    'BaseSampler',
    'RSequenceSampler',
    'HaltonSampler',
    'SobolSampler',
    'register_sampler',
    'get_sampler',
    'list_samplers',
]
