"""Experiment harness configuration.

Convenience functions for getting and checking harness configurations.
"""

import math
import numbers
from copy import deepcopy

from normvar.errors import InvalidArgument

from .registry import get_all_generator_configs

_DEFAULT_EXPERIMENT_CONFIG = {
    "target_sizes": [100, 1_000, 10_000, 100_000],
    "n_trials": 100,
    "alpha": 0.05,
    "seed": 42,
    "mu": 0.0,
    "sigma": 1.0,
    # scipy's Shapiro-Wilk p-value is unreliable above 5000; the reference
    # experiment only tests the two smallest tiers.
    "shapiro_max_size": 1_000,
    # "sample": two-sample KS against a fresh normal draw; "norm": one-sample
    # KS against the N(mu, sigma) CDF.
    "ks_reference": "sample",
    "generators": [
        "box_muller",
        "polar_rejection",
        "generic_rejection",
        "marsaglia_polar",
    ],
}

KS_REFERENCES = ("sample", "norm")


def get_default_experiment_config() -> dict:
    """Get a fresh copy of the default experiment configuration.

    Returns
    -------
    dict
        Keys: ``target_sizes``, ``n_trials``, ``alpha``, ``seed``, ``mu``,
        ``sigma``, ``shapiro_max_size``, ``ks_reference``, ``generators``.
    """
    return deepcopy(_DEFAULT_EXPERIMENT_CONFIG)


def _is_int(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _is_real(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def validate_experiment_config(config: dict) -> dict:
    """Check an experiment configuration and return it unchanged.

    Raises
    ------
    ValueError
        If the configuration contains unknown keys or unknown generators.
    InvalidArgument
        If a value is outside its domain.
    """
    unknown = set(config) - set(_DEFAULT_EXPERIMENT_CONFIG)
    if unknown:
        raise ValueError(
            f"Unknown experiment config keys: {sorted(unknown)}. "
            f"Allowed keys: {sorted(_DEFAULT_EXPERIMENT_CONFIG)}"
        )

    sizes = config["target_sizes"]
    if (
        not isinstance(sizes, (list, tuple))
        or not sizes
        or not all(_is_int(n) and n > 0 for n in sizes)
    ):
        raise InvalidArgument(
            f"target_sizes must be a non-empty list of positive integers, got {sizes!r}"
        )
    if not _is_int(config["n_trials"]) or config["n_trials"] <= 0:
        raise InvalidArgument(
            f"n_trials must be a positive integer, got {config['n_trials']!r}"
        )
    if not _is_real(config["alpha"]) or not 0.0 < config["alpha"] < 1.0:
        raise InvalidArgument(f"alpha must lie in (0, 1), got {config['alpha']!r}")
    if config["seed"] is not None and not _is_int(config["seed"]):
        raise InvalidArgument(f"seed must be an integer or None, got {config['seed']!r}")
    if not _is_real(config["mu"]) or not math.isfinite(config["mu"]):
        raise InvalidArgument(f"mu must be a finite number, got {config['mu']!r}")
    if not (
        _is_real(config["sigma"])
        and math.isfinite(config["sigma"])
        and config["sigma"] > 0
    ):
        raise InvalidArgument(f"sigma must be positive, got {config['sigma']!r}")
    if not _is_int(config["shapiro_max_size"]) or config["shapiro_max_size"] < 0:
        raise InvalidArgument(
            "shapiro_max_size must be a non-negative integer, "
            f"got {config['shapiro_max_size']!r}"
        )
    if config["ks_reference"] not in KS_REFERENCES:
        raise InvalidArgument(
            f"ks_reference must be one of {KS_REFERENCES}, "
            f"got {config['ks_reference']!r}"
        )

    generators = config["generators"]
    if not isinstance(generators, (list, tuple)) or not generators:
        raise InvalidArgument(
            f"generators must be a non-empty list of names, got {generators!r}"
        )
    available = get_all_generator_configs()
    for name in generators:
        if name not in available:
            raise ValueError(
                f"Unknown generator '{name}'. Available generators: {sorted(available)}"
            )
    return config


def make_experiment_config(overrides: dict | None = None) -> dict:
    """Merge ``overrides`` over the defaults and validate the result."""
    config = get_default_experiment_config()
    config.update(overrides or {})
    return validate_experiment_config(config)
