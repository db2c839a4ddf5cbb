"""Generic acceptance-rejection with an exponential proposal."""

import numpy as np

from normvar.generators.parameters import VariateBatch, validate_generator_parameters
from normvar.generators.uniform_source import UniformSource, as_source

# Envelope constant: sqrt(e) * exp(-y) bounds exp(-y**2 / 2) on y >= 0.
ENVELOPE_SCALE = np.sqrt(np.e)
ACCEPTANCE_PROBABILITY = np.sqrt(2.0 / (np.pi * np.e))


def generic_rejection(
    n: int,
    mu: float = 0.0,
    sigma: float = 1.0,
    source: UniformSource | None = None,
    random_state: int | None = None,
) -> VariateBatch:
    """Generate normal variates with a scaled exponential envelope.

    Draws a uniform batch ``u1`` and a rate-1 exponential batch ``y`` and
    accepts index ``i`` iff ``sqrt(e) * u1[i] * exp(-y[i]) <= exp(-y[i]**2 / 2)``.
    Accepted ``y`` values are half-normal; they get a random sign and the
    affine mapping exactly as in :func:`polar_rejection`. Both samplers share
    the acceptance probability ``sqrt(2 / (pi e))``.

    Returns
    -------
    VariateBatch
        Single-stream batch of length ``<= n``.
    """
    params = validate_generator_parameters(n, mu, sigma)
    source = as_source(source, random_state)

    u1 = source.draw(params.n)
    y = source.exponential(params.n)

    accepted = ENVELOPE_SCALE * u1 * np.exp(-y) <= np.exp(-(y**2) / 2.0)
    magnitudes = y[accepted]
    signs = source.signs(len(magnitudes))

    values = params.mu + params.sigma * (signs * magnitudes)
    return VariateBatch(
        generator="generic_rejection",
        values=values,
        n_requested=params.n,
        n_streams=1,
    )
