"""Tests for the repeated-trial experiment harness."""

import logging

import numpy as np
import pytest

from normvar.config import registry
from normvar.errors import InvalidArgument
from normvar.experiments import ExperimentHarness, run_experiment
from normvar.experiments.records import TrialRecord
from normvar.generators import UniformSource, VariateBatch

ALL_SERIES = {
    "box_muller_z1",
    "box_muller_z2",
    "polar_rejection",
    "generic_rejection",
    "marsaglia_z1",
    "marsaglia_z2",
}


class TestHarnessRun:
    def test_records_cover_all_tuples(self, small_experiment_config):
        results = run_experiment(small_experiment_config)

        expected_keys = {(s, n) for s in ALL_SERIES for n in (50, 200)}
        assert set(results.keys()) == expected_keys
        # 6 series x 2 sizes x 4 trials
        assert len(results) == 48
        for key in expected_keys:
            assert len(results.records_for(*key)) == 4

    def test_lengths_per_series(self, small_experiment_config):
        results = run_experiment(small_experiment_config)
        for record in results.records:
            n = record.requested_size
            if record.algorithm_id.startswith("box_muller"):
                assert record.produced_length == n
            else:
                assert 0 <= record.produced_length <= n

    def test_paired_halves_have_equal_length(self, small_experiment_config):
        results = run_experiment(small_experiment_config)
        z1 = [r.produced_length for r in results.records_for("marsaglia_z1", 200)]
        z2 = [r.produced_length for r in results.records_for("marsaglia_z2", 200)]
        assert z1 == z2

    def test_shapiro_only_up_to_limit(self, small_experiment_config):
        results = run_experiment(small_experiment_config)
        for record in results.records:
            assert record.ks_p_value is not None
            if record.requested_size <= 100:
                assert record.shapiro_p_value is not None
            else:
                assert record.shapiro_p_value is None

        agg = results.aggregate("polar_rejection", 200)
        assert agg.mean_shapiro_p_value is None
        assert agg.n_shapiro_tested == 0
        assert agg.mean_ks_p_value is not None

    def test_p_values_are_probabilities(self, small_experiment_config):
        results = run_experiment(small_experiment_config)
        for agg in results.aggregates().values():
            assert 0.0 <= agg.mean_ks_p_value <= 1.0
            assert 0 <= agg.ks_rejections <= agg.n_trials

    def test_timings_recorded(self, small_experiment_config):
        results = run_experiment(small_experiment_config)
        assert set(results.timings) == {
            (g, n)
            for g in ("box_muller", "polar_rejection", "generic_rejection", "marsaglia_polar")
            for n in (50, 200)
        }
        for times in results.timings.values():
            assert len(times) == 4
            assert all(t >= 0 for t in times)

    def test_generator_subset(self, small_experiment_config):
        config = dict(small_experiment_config, generators=["marsaglia_polar"])
        results = run_experiment(config)
        assert {key[0] for key in results.keys()} == {"marsaglia_z1", "marsaglia_z2"}

    def test_one_sample_ks_reference(self, small_experiment_config):
        config = dict(small_experiment_config, ks_reference="norm")
        results = run_experiment(config)
        assert all(r.ks_p_value is not None for r in results.records)

    def test_invalid_config_fails_fast(self):
        with pytest.raises(InvalidArgument):
            ExperimentHarness({"n_trials": 0})

    def test_logs_start_and_finish(self, small_experiment_config, caplog):
        with caplog.at_level(logging.INFO, logger="normvar.experiments.harness"):
            run_experiment(small_experiment_config)
        messages = [r.getMessage() for r in caplog.records]
        assert any("Starting experiment" in m for m in messages)
        assert any("Experiment finished: 48 trial records" in m for m in messages)


class TestReproducibility:
    def test_same_seed_identical_records(self, small_experiment_config):
        first = run_experiment(small_experiment_config).records
        second = run_experiment(small_experiment_config).records
        assert first == second

    def test_repeated_run_on_one_harness(self, small_experiment_config):
        harness = ExperimentHarness(small_experiment_config)
        first = harness.run().records
        second = harness.run().records
        assert first == second

    def test_repeated_run_continues_explicit_source(self, small_experiment_config):
        harness = ExperimentHarness(small_experiment_config, source=UniformSource(5))
        assert harness.run().records != harness.run().records

    def test_different_seed_different_records(self, small_experiment_config):
        first = run_experiment(small_experiment_config).records
        second = run_experiment(dict(small_experiment_config, seed=99)).records
        assert first != second

    def test_explicit_source_overrides_seed(self, small_experiment_config):
        first = run_experiment(small_experiment_config, source=UniformSource(5)).records
        second = run_experiment(
            dict(small_experiment_config, seed=0), source=UniformSource(5)
        ).records
        assert first == second


class TestDegenerateTrials:
    def test_empty_series_recorded_as_missing(self, monkeypatch):
        """A zero-length series yields missing p-values, not an error."""
        harness = ExperimentHarness({"target_sizes": [10], "n_trials": 3, "seed": 0})

        def _never_accept(n, mu=0.0, sigma=1.0, source=None, random_state=None):
            return VariateBatch("polar_rejection", np.array([]), n_requested=n)

        monkeypatch.setitem(
            registry._generator_registry,
            "polar_rejection",
            lambda: {
                "name": "polar_rejection",
                "generator": _never_accept,
                "n_streams": 1,
                "stream_names": ["polar_rejection"],
            },
        )
        results = harness.run()
        agg = results.aggregate("polar_rejection", 10)
        assert agg.is_missing
        assert agg.mean_produced_length == 0.0
        assert agg.mean_ks_p_value is None
        assert agg.mean_shapiro_p_value is None

        # Other series are unaffected
        assert not results.aggregate("box_muller_z1", 10).is_missing

    def test_tiny_series_skips_shapiro_only(self):
        harness = ExperimentHarness(
            {"target_sizes": [2], "n_trials": 5, "seed": 3, "generators": ["box_muller"]}
        )
        records = harness.run_trial("box_muller", 2)
        assert len(records) == 2
        for record in records:
            assert isinstance(record, TrialRecord)
            assert record.produced_length == 2
            assert record.ks_p_value is not None
            assert record.shapiro_p_value is None


@pytest.mark.statistical
class TestReferenceExperiment:
    """Full reference configuration: 4 sizes x 100 trials x 6 series."""

    def test_reference_run(self):
        results = run_experiment()
        assert len(results) == 4 * 100 * 6

        for (algorithm_id, n), agg in results.aggregates().items():
            # Under the null hypothesis roughly 5% of trials reject
            assert agg.ks_rejections <= 20, f"{algorithm_id} n={n}: {agg}"
            if n <= 1000:
                assert agg.n_shapiro_tested == 100
            else:
                assert agg.mean_shapiro_p_value is None

        rate = results.aggregate("polar_rejection", 100_000).mean_acceptance_rate
        assert abs(rate - np.sqrt(2 / (np.pi * np.e))) < 0.005
