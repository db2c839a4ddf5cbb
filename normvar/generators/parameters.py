"""Validation of generator parameters and the variable-length batch type."""

import math
import numbers
from dataclasses import dataclass

import numpy as np

from normvar.errors import InvalidArgument


@dataclass(frozen=True)
class GeneratorParameters:
    """Requested sample size and affine mapping of a generator call."""

    n: int
    mu: float = 0.0
    sigma: float = 1.0


def validate_generator_parameters(n, mu=0.0, sigma=1.0) -> GeneratorParameters:
    """Validate ``(n, mu, sigma)`` and return them as ``GeneratorParameters``.

    Parameters
    ----------
    n : int
        Requested sample size. Must be a positive integer scalar; booleans,
        floats and arrays are rejected.
    mu : float
        Location. Must be a finite real scalar.
    sigma : float
        Scale. Must be a finite, strictly positive real scalar.

    Raises
    ------
    InvalidArgument
        If any argument is out of its domain.
    """
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise InvalidArgument(
            f"n must be a positive integer scalar, got {type(n).__name__}: {n!r}"
        )
    if n <= 0:
        raise InvalidArgument(f"n must be positive, got {n}")

    for name, value in (("mu", mu), ("sigma", sigma)):
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise InvalidArgument(
                f"{name} must be a real scalar, got {type(value).__name__}: {value!r}"
            )
        if not math.isfinite(value):
            raise InvalidArgument(f"{name} must be finite, got {value}")

    if sigma <= 0:
        raise InvalidArgument(f"sigma must be positive, got {sigma}")

    return GeneratorParameters(n=int(n), mu=float(mu), sigma=float(sigma))


@dataclass(frozen=True)
class VariateBatch:
    """Output of one generator invocation.

    ``values`` holds ``n_streams`` equal-length streams laid end to end. For
    the rejection generators the length is a random variable, so consumers
    must read ``length`` rather than assume ``n_requested``.

    Attributes
    ----------
    generator : str
        Registered name of the generator that produced the batch.
    values : np.ndarray
        The variates, already mapped by ``mu + sigma * z``.
    n_requested : int
        Number of raw candidate draws requested per stream.
    n_streams : int
        Number of independent streams in ``values`` (1 or 2).
    """

    generator: str
    values: np.ndarray
    n_requested: int
    n_streams: int = 1

    def __post_init__(self):
        if self.n_streams < 1 or len(self.values) % self.n_streams != 0:
            raise InvalidArgument(
                f"Batch of length {len(self.values)} cannot be split into "
                f"{self.n_streams} equal streams"
            )

    @property
    def length(self) -> int:
        return len(self.values)

    @property
    def stream_length(self) -> int:
        return len(self.values) // self.n_streams

    @property
    def acceptance_rate(self) -> float:
        """Fraction of candidate draws that produced an output value."""
        return self.stream_length / self.n_requested

    def streams(self) -> list[np.ndarray]:
        """Split the batch into its independent streams."""
        return np.split(self.values, self.n_streams)

    def __len__(self):
        return self.length

    def __array__(self, dtype=None, copy=None):
        return np.array(self.values, dtype=dtype, copy=copy)
