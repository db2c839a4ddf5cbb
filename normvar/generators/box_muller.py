"""Box-Muller transform: exact pairs of normals from pairs of uniforms."""

import numpy as np

from normvar.generators.parameters import VariateBatch, validate_generator_parameters
from normvar.generators.uniform_source import UniformSource, as_source


def box_muller(
    n: int,
    mu: float = 0.0,
    sigma: float = 1.0,
    source: UniformSource | None = None,
    random_state: int | None = None,
) -> VariateBatch:
    """Generate ``2n`` normal variates with the Box-Muller transform.

    Two uniform batches ``u1, u2`` of length ``n`` give a radius
    ``sqrt(-2 ln u1)`` and an angle ``2 pi u2``. The cosine and sine
    projections are two independent standard normal streams; the batch holds
    all cosine values followed by all sine values. There is no rejection, so
    the output length is always exactly ``2n``.

    A uniform draw of exactly 0 gives an infinite radius. The source draws
    from [0, 1), so this can happen with probability ``2**-53`` per draw and is
    left as is.

    Parameters
    ----------
    n : int
        Number of uniform pairs, i.e. the length of each output stream.
    mu, sigma : float
        Affine mapping ``mu + sigma * z`` applied to both streams.
    source : UniformSource or None
        Shared uniform source. Mutually exclusive with ``random_state``.
    random_state : int or None
        Seed for a private source when ``source`` is not given.

    Returns
    -------
    VariateBatch
        Batch with ``n_streams=2`` and length ``2n``.

    Raises
    ------
    InvalidArgument
        If the parameters fail validation. No draw is made in that case.
    """
    params = validate_generator_parameters(n, mu, sigma)
    source = as_source(source, random_state)

    u1 = source.draw(params.n)
    u2 = source.draw(params.n)

    with np.errstate(divide="ignore"):
        radius = np.sqrt(-2.0 * np.log(u1))
    angle = 2.0 * np.pi * u2

    z1 = radius * np.cos(angle)
    z2 = radius * np.sin(angle)

    values = params.mu + params.sigma * np.concatenate((z1, z2))
    return VariateBatch(
        generator="box_muller",
        values=values,
        n_requested=params.n,
        n_streams=2,
    )
