"""Marsaglia polar method: paired normals from points in the unit disk."""

import numpy as np

from normvar.generators.parameters import VariateBatch, validate_generator_parameters
from normvar.generators.uniform_source import UniformSource, as_source

ACCEPTANCE_PROBABILITY = np.pi / 4.0


def marsaglia_polar(
    n: int,
    mu: float = 0.0,
    sigma: float = 1.0,
    source: UniformSource | None = None,
    random_state: int | None = None,
) -> VariateBatch:
    """Generate pairs of normal variates with Marsaglia's polar method.

    Two uniform batches are rescaled to [-1, 1). Points with
    ``s = u1**2 + u2**2 <= 1`` are accepted and mapped to
    ``z = u * sqrt(-2 ln s / s)``, which equals ``sqrt(-2 ln r**2) * u / r``.
    The batch holds every accepted ``z1`` followed by every accepted ``z2``.

    The expected number of accepted points is ``n * pi / 4``. A point at the
    origin would divide by zero; it has probability zero and is rejected.

    Returns
    -------
    VariateBatch
        Batch with ``n_streams=2`` and length ``2k`` where ``k <= n`` is the
        accepted count.
    """
    params = validate_generator_parameters(n, mu, sigma)
    source = as_source(source, random_state)

    u1 = 2.0 * source.draw(params.n) - 1.0
    u2 = 2.0 * source.draw(params.n) - 1.0

    s = u1**2 + u2**2
    accepted = (s <= 1.0) & (s > 0.0)

    u1 = u1[accepted]
    u2 = u2[accepted]
    s = s[accepted]

    factor = np.sqrt(-2.0 * np.log(s) / s)
    z1 = u1 * factor
    z2 = u2 * factor

    values = params.mu + params.sigma * np.concatenate((z1, z2))
    return VariateBatch(
        generator="marsaglia_polar",
        values=values,
        n_requested=params.n,
        n_streams=2,
    )
