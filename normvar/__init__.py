# import importlib.metadata
__version__ = "0.1.0"  # importlib.metadata.version(__package__ or __name__)

from . import config, errors, experiments, generators
from .errors import DegenerateSample, InvalidArgument, TestPrecondition
from .experiments import ExperimentHarness, run_experiment
from .generators import (
    UniformSource,
    box_muller,
    generate,
    generic_rejection,
    marsaglia_polar,
    polar_rejection,
)

__all__ = [
    "config",
    "errors",
    "experiments",
    "generators",
    "DegenerateSample",
    "InvalidArgument",
    "TestPrecondition",
    "ExperimentHarness",
    "run_experiment",
    "UniformSource",
    "box_muller",
    "generate",
    "generic_rejection",
    "marsaglia_polar",
    "polar_rejection",
]
