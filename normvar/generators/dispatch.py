"""Name-based dispatch to the registered generators."""

from normvar.generators.parameters import VariateBatch
from normvar.generators.uniform_source import UniformSource


def generate(
    generator: str,
    n: int,
    mu: float = 0.0,
    sigma: float = 1.0,
    source: UniformSource | None = None,
    random_state: int | None = None,
) -> VariateBatch:
    """Run the generator registered under ``generator``.

    Parameters
    ----------
    generator : str
        Registered generator name, e.g. ``"box_muller"``.
    n, mu, sigma :
        Passed to the generator unchanged.
    source, random_state :
        Either a shared ``UniformSource`` or a seed for a private one.

    Raises
    ------
    ValueError
        If no generator is registered under ``generator``.

    Examples
    --------
    >>> batch = generate("marsaglia_polar", 1000, random_state=0)
    >>> z1, z2 = batch.streams()
    """
    # Imported here since the config package imports the generator modules.
    from normvar.config import get_generator_config

    config = get_generator_config(generator)
    return config["generator"](
        n, mu=mu, sigma=sigma, source=source, random_state=random_state
    )
