"""Exception types raised by the quasi-random generators."""


class QuasiRandomError(ValueError):
    """Base class for all generator errors."""


class InvalidDimension(QuasiRandomError):
    """Raised when a generator is requested in fewer than one dimension."""


class InvalidSeed(QuasiRandomError):
    """Raised when a seed falls outside the range [0.0, 1.0)."""
