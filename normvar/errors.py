"""Exceptions raised by the normal variate generators and the experiment harness."""


class NormvarError(Exception):
    """Base class for all errors raised by normvar."""


class InvalidArgument(NormvarError, ValueError):
    """Raised when generator or source arguments fail validation.

    Validation always happens before any random draw, so a failed call never
    advances the uniform source.
    """


class DegenerateSample(NormvarError):
    """Raised when a generated series is empty and cannot be tested."""


class TestPrecondition(NormvarError):
    """Raised when a goodness-of-fit collaborator cannot test a sample.

    Typical causes are samples that are too small or too large for the test,
    or samples containing non-finite values.
    """

    # Keep pytest from collecting this as a test class.
    __test__ = False
