"""
Benchmark and Comparison Tools for the Normal Variate Generators

This module times repeated invocations of each registered generator at each
target size and reports the distribution of elapsed durations.

Usage:
    normvar benchmark --sizes 1000 --sizes 100000 --n-runs 20

    Or from Python:
        from normvar.benchmark import benchmark_all, compare_generators

        results = benchmark_all(sizes=[1000, 100000], n_runs=20)
        compare_generators(results)
"""

import logging
import time
from dataclasses import dataclass, field

import numpy as np

from normvar.config import get_all_generator_configs, get_generator_config
from normvar.generators.uniform_source import UniformSource

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    """Timings of repeated invocations of one generator at one size."""

    generator: str
    n: int
    n_runs: int
    times: np.ndarray = field(repr=False)
    mean_length: float

    @property
    def median_seconds(self) -> float:
        return float(np.median(self.times))

    @property
    def mean_seconds(self) -> float:
        return float(np.mean(self.times))

    @property
    def std_seconds(self) -> float:
        return float(np.std(self.times))

    @property
    def variates_per_second(self) -> float:
        """Produced variates per second at the median time."""
        if self.median_seconds == 0:
            return float("inf")
        return self.mean_length / self.median_seconds

    def __repr__(self):
        return (
            f"BenchmarkResult(generator='{self.generator}', n={self.n}, "
            f"median={self.median_seconds * 1e3:.3f}ms, "
            f"throughput={self.variates_per_second / 1e6:.2f}M variates/s)"
        )


def _warmup(func, n: int, source: UniformSource, n_warmup: int = 2):
    """Warm caches before timing."""
    for _ in range(n_warmup):
        _ = func(min(100, n), source=source)


def benchmark_generator(
    generator: str,
    n: int,
    n_runs: int = 10,
    n_warmup: int = 2,
    random_state: int = 42,
) -> BenchmarkResult:
    """Time ``n_runs`` invocations of ``generator`` at size ``n``.

    Parameters
    ----------
    generator : str
        Registered generator name.
    n : int
        Requested sample size per invocation.
    n_runs : int
        Number of timed invocations (default: 10)
    n_warmup : int
        Untimed invocations before timing starts (default: 2)
    random_state : int
        Seed of the uniform source used for all invocations (default: 42)

    Returns
    -------
    BenchmarkResult
        Raw per-run timings plus summary properties.
    """
    if n_runs <= 0:
        raise ValueError(f"n_runs must be positive, got {n_runs}")

    func = get_generator_config(generator)["generator"]
    source = UniformSource(random_state)

    _warmup(func, n, source, n_warmup=n_warmup)

    times = []
    lengths = []
    for _ in range(n_runs):
        start = time.perf_counter()
        batch = func(n, source=source)
        times.append(time.perf_counter() - start)
        lengths.append(batch.length)

    result = BenchmarkResult(
        generator=generator,
        n=n,
        n_runs=n_runs,
        times=np.asarray(times),
        mean_length=float(np.mean(lengths)),
    )
    logger.debug("%r", result)
    return result


def benchmark_all(
    sizes: list[int] = (100, 1_000, 10_000, 100_000),
    generators: list[str] | None = None,
    n_runs: int = 10,
    n_warmup: int = 2,
    random_state: int = 42,
) -> dict[tuple[str, int], BenchmarkResult]:
    """
    Benchmark every generator at every size.

    Parameters
    ----------
    sizes : list[int]
        Target sample sizes (default: 100, 1000, 10000, 100000)
    generators : list[str] or None
        Generator names; None benchmarks all registered generators
    n_runs : int
        Number of timed runs per combination (default: 10)
    n_warmup : int
        Untimed runs per combination (default: 2)
    random_state : int
        Random seed (default: 42)

    Returns
    -------
    Dict[Tuple[str, int], BenchmarkResult]
        Dictionary mapping (generator, size) to benchmark results
    """
    if generators is None:
        generators = list(get_all_generator_configs())

    logger.info(
        "Benchmarking %d generators at sizes %s (%d runs each)",
        len(generators),
        list(sizes),
        n_runs,
    )

    results = {}
    for n in sizes:
        for generator in generators:
            results[(generator, n)] = benchmark_generator(
                generator, n, n_runs=n_runs, n_warmup=n_warmup, random_state=random_state
            )
    return results


def compare_generators(results: dict[tuple[str, int], BenchmarkResult]) -> str:
    """
    Generate a comparison table from benchmark results.

    Speedups are relative to Box-Muller at the same size when it was
    benchmarked.

    Parameters
    ----------
    results : Dict[Tuple[str, int], BenchmarkResult]
        Results from benchmark_all()

    Returns
    -------
    str
        Formatted comparison table
    """
    lines = []
    lines.append("\n" + "=" * 88)
    lines.append("BENCHMARK RESULTS")
    lines.append("=" * 88)
    lines.append("")
    lines.append(
        f"{'Generator':<20} {'n':>8} {'Median (ms)':>12} {'Std (ms)':>10} "
        f"{'Variates/s':>15} {'Speedup':>10}"
    )
    lines.append("-" * 88)

    sorted_results = sorted(
        results.values(), key=lambda r: (r.n, -r.variates_per_second)
    )
    for result in sorted_results:
        speedup = ""
        baseline = results.get(("box_muller", result.n))
        if baseline is not None and result.median_seconds > 0:
            speedup = f"{baseline.median_seconds / result.median_seconds:.2f}x"

        lines.append(
            f"{result.generator:<20} "
            f"{result.n:>8} "
            f"{result.median_seconds * 1e3:>12.4f} "
            f"{result.std_seconds * 1e3:>10.4f} "
            f"{result.variates_per_second:>15,.0f} "
            f"{speedup:>10}"
        )

    lines.append("-" * 88)
    lines.append("")

    output = "\n".join(lines)
    logger.info(output)
    return output
