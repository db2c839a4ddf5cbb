import numpy as np
import pytest

from normvar.benchmark import (
    BenchmarkResult,
    benchmark_all,
    benchmark_generator,
    compare_generators,
)


class TestBenchmarkGenerator:
    def test_timings_shape(self):
        result = benchmark_generator("box_muller", 1000, n_runs=5, n_warmup=1)
        assert isinstance(result, BenchmarkResult)
        assert result.n_runs == 5
        assert result.times.shape == (5,)
        assert np.all(result.times >= 0)
        assert result.mean_length == 2000
        assert result.median_seconds >= 0
        assert result.variates_per_second > 0

    def test_rejection_mean_length(self):
        result = benchmark_generator("generic_rejection", 10_000, n_runs=3)
        assert 0 < result.mean_length < 10_000

    def test_invalid_runs(self):
        with pytest.raises(ValueError, match="n_runs"):
            benchmark_generator("box_muller", 10, n_runs=0)

    def test_unknown_generator(self):
        with pytest.raises(ValueError, match="No generator config found"):
            benchmark_generator("nope", 10)

    def test_repr(self):
        result = benchmark_generator("marsaglia_polar", 100, n_runs=2)
        assert "marsaglia_polar" in repr(result)
        assert "variates/s" in repr(result)


class TestBenchmarkAll:
    def test_all_combinations(self):
        results = benchmark_all(sizes=[100, 1000], n_runs=2, n_warmup=0)
        assert len(results) == 8
        assert ("polar_rejection", 1000) in results

    def test_generator_subset(self):
        results = benchmark_all(sizes=[100], generators=["box_muller"], n_runs=2)
        assert list(results) == [("box_muller", 100)]

    def test_compare_table(self):
        results = benchmark_all(sizes=[100], n_runs=2)
        table = compare_generators(results)
        assert "BENCHMARK RESULTS" in table
        for name in ("box_muller", "polar_rejection", "generic_rejection", "marsaglia_polar"):
            assert name in table
        assert "1.00x" in table
