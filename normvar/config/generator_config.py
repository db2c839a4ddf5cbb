"""Configuration entries for the registered normal variate generators.

Each entry describes how a generator's batch splits into derived series and
what acceptance rate it should converge to.
"""

from normvar.generators.box_muller import box_muller
from normvar.generators.generic_rejection import (
    ACCEPTANCE_PROBABILITY as ENVELOPE_ACCEPTANCE,
)
from normvar.generators.generic_rejection import generic_rejection
from normvar.generators.marsaglia_polar import ACCEPTANCE_PROBABILITY as DISK_ACCEPTANCE
from normvar.generators.marsaglia_polar import marsaglia_polar
from normvar.generators.polar_rejection import (
    ACCEPTANCE_PROBABILITY as HALF_NORMAL_ACCEPTANCE,
)
from normvar.generators.polar_rejection import polar_rejection

from .registry import register_generator


@register_generator("box_muller")
def get_box_muller_config():
    """Get the configuration for the Box-Muller generator."""
    return {
        "name": "box_muller",
        "generator": box_muller,
        "n_streams": 2,
        "stream_names": ["box_muller_z1", "box_muller_z2"],
        "acceptance_probability": 1.0,
        "max_length_factor": 2,
        "description": "Exact transform of uniform pairs (cosine and sine streams).",
    }


@register_generator("polar_rejection")
def get_polar_rejection_config():
    """Get the configuration for the exponential-pair rejection generator."""
    return {
        "name": "polar_rejection",
        "generator": polar_rejection,
        "n_streams": 1,
        "stream_names": ["polar_rejection"],
        "acceptance_probability": float(HALF_NORMAL_ACCEPTANCE),
        "max_length_factor": 1,
        "description": "Half-normal rejection from two exponential batches.",
    }


@register_generator("generic_rejection")
def get_generic_rejection_config():
    """Get the configuration for the scaled exponential envelope generator."""
    return {
        "name": "generic_rejection",
        "generator": generic_rejection,
        "n_streams": 1,
        "stream_names": ["generic_rejection"],
        "acceptance_probability": float(ENVELOPE_ACCEPTANCE),
        "max_length_factor": 1,
        "description": "Uniform/exponential acceptance-rejection with sqrt(e) envelope.",
    }


@register_generator("marsaglia_polar")
def get_marsaglia_polar_config():
    """Get the configuration for the Marsaglia polar generator."""
    return {
        "name": "marsaglia_polar",
        "generator": marsaglia_polar,
        "n_streams": 2,
        "stream_names": ["marsaglia_z1", "marsaglia_z2"],
        "acceptance_probability": float(DISK_ACCEPTANCE),
        "max_length_factor": 2,
        "description": "Rejection inside the unit disk (paired streams).",
    }
