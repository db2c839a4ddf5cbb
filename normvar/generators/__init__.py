from .box_muller import box_muller
from .dispatch import generate
from .generic_rejection import generic_rejection
from .marsaglia_polar import marsaglia_polar
from .parameters import GeneratorParameters, VariateBatch, validate_generator_parameters
from .polar_rejection import polar_rejection
from .uniform_source import UniformSource

__all__ = [
    "box_muller",
    "polar_rejection",
    "generic_rejection",
    "marsaglia_polar",
    "generate",
    "GeneratorParameters",
    "VariateBatch",
    "validate_generator_parameters",
    "UniformSource",
]
