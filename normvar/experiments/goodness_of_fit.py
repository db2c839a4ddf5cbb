"""Goodness-of-fit collaborators used by the experiment harness.

Thin wrappers around :func:`scipy.stats.kstest` and
:func:`scipy.stats.shapiro` that return a bare p-value and translate samples
the tests cannot handle into :class:`DegenerateSample` or
:class:`TestPrecondition`.
"""

import numpy as np
from scipy import stats

from normvar.errors import DegenerateSample, TestPrecondition

SHAPIRO_MIN_SIZE = 3


def _as_sample(sample) -> np.ndarray:
    sample = np.asarray(sample, dtype=float)
    if sample.ndim != 1:
        raise TestPrecondition(f"Expected a 1-d sample, got shape {sample.shape}")
    if len(sample) == 0:
        raise DegenerateSample("Cannot test an empty sample")
    if not np.all(np.isfinite(sample)):
        raise TestPrecondition("Sample contains non-finite values")
    return sample


def ks_test(sample, reference="norm", args: tuple = ()) -> float:
    """Kolmogorov-Smirnov p-value of ``sample`` against ``reference``.

    Parameters
    ----------
    sample : array-like
        Values to test.
    reference : array-like or str
        Either a reference sample (two-sample test) or the name of a
        ``scipy.stats`` distribution (one-sample test), e.g. ``"norm"``.
    args : tuple
        Distribution parameters when ``reference`` is a name, e.g. ``(0, 1)``.

    Returns
    -------
    float
        The test's p-value.

    Raises
    ------
    DegenerateSample
        If ``sample`` is empty.
    TestPrecondition
        If either sample is not a finite, non-empty 1-d array.
    """
    sample = _as_sample(sample)
    if not isinstance(reference, str):
        try:
            reference = _as_sample(reference)
        except DegenerateSample as e:
            raise TestPrecondition(f"Reference sample is unusable: {e}") from e
    result = stats.kstest(sample, reference, args=args)
    return float(result.pvalue)


def shapiro_test(sample, max_size: int | None = None) -> float:
    """Shapiro-Wilk p-value of ``sample``.

    Raises
    ------
    DegenerateSample
        If ``sample`` is empty.
    TestPrecondition
        If ``sample`` has fewer than three values, more than ``max_size``
        values, or non-finite values.
    """
    sample = _as_sample(sample)
    if len(sample) < SHAPIRO_MIN_SIZE:
        raise TestPrecondition(
            f"Shapiro-Wilk needs at least {SHAPIRO_MIN_SIZE} values, got {len(sample)}"
        )
    if max_size is not None and len(sample) > max_size:
        raise TestPrecondition(
            f"Shapiro-Wilk limited to {max_size} values, got {len(sample)}"
        )
    try:
        result = stats.shapiro(sample)
    except ValueError as e:
        raise TestPrecondition(str(e)) from e
    return float(result.pvalue)
