"""Half-normal rejection from exponential pairs, with random signs."""

import numpy as np

from normvar.generators.parameters import VariateBatch, validate_generator_parameters
from normvar.generators.uniform_source import UniformSource, as_source

# P(accept) of the exponential envelope for the half-normal density.
ACCEPTANCE_PROBABILITY = np.sqrt(2.0 / (np.pi * np.e))


def polar_rejection(
    n: int,
    mu: float = 0.0,
    sigma: float = 1.0,
    source: UniformSource | None = None,
    random_state: int | None = None,
) -> VariateBatch:
    """Generate normal variates by rejection from two exponential batches.

    Index ``i`` is accepted iff ``(1 - y1[i])**2 / 2 < y2[i]``, where ``y1`` and
    ``y2`` are independent rate-1 exponential batches of length ``n``. The
    accepted ``y1`` values are half-normal magnitudes; each receives a random
    sign ``sign(2u - 1)`` and is mapped by ``mu + sigma * z``.

    The output length is the number of accepted indices, a binomial random
    variable with mean ``n * sqrt(2 / (pi e))`` (about ``0.7602 n``).

    Parameters
    ----------
    n : int
        Number of candidate pairs.
    mu, sigma : float
        Affine mapping applied to the signed magnitudes.
    source : UniformSource or None
        Shared uniform source. Mutually exclusive with ``random_state``.
    random_state : int or None
        Seed for a private source when ``source`` is not given.

    Returns
    -------
    VariateBatch
        Single-stream batch of length ``<= n``.
    """
    params = validate_generator_parameters(n, mu, sigma)
    source = as_source(source, random_state)

    y1 = source.exponential(params.n)
    y2 = source.exponential(params.n)

    accepted = (1.0 - y1) ** 2 / 2.0 < y2
    magnitudes = y1[accepted]
    signs = source.signs(len(magnitudes))

    values = params.mu + params.sigma * (signs * magnitudes)
    return VariateBatch(
        generator="polar_rejection",
        values=values,
        n_requested=params.n,
        n_streams=1,
    )
