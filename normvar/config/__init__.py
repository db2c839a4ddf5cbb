"""Configuration for generators and the experiment harness.

Variables:
---------
generator_config: dict
    Dictionary containing all the information about the registered generators
"""

from . import generator_config as _generator_config  # noqa: F401  (registers generators)
from .experiment_config import (
    KS_REFERENCES,
    get_default_experiment_config,
    make_experiment_config,
    validate_experiment_config,
)
from .registry import (
    get_all_generator_configs,
    get_generator_config,
    register_generator,
)

generator_config = get_all_generator_configs()

__all__ = [
    "generator_config",
    "get_generator_config",
    "get_all_generator_configs",
    "register_generator",
    "get_default_experiment_config",
    "make_experiment_config",
    "validate_experiment_config",
    "KS_REFERENCES",
]
