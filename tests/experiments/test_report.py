import pandas as pd

from normvar.experiments import format_report, run_experiment, save_results
from normvar.experiments.records import ExperimentResults, TrialRecord


def test_format_report_lists_every_tuple(small_experiment_config):
    results = run_experiment(small_experiment_config)
    report = format_report(results)

    assert "NORMAL VARIATE EXPERIMENT" in report
    for algorithm_id, n in results.keys():
        assert any(
            line.startswith(algorithm_id) and f" {n} " in line
            for line in report.splitlines()
        ), f"missing row for {algorithm_id} n={n}"
    assert "alpha = 0.05" in report


def test_format_report_marks_missing_values():
    results = ExperimentResults()
    results.add(
        TrialRecord(
            algorithm_id="polar_rejection",
            requested_size=10,
            produced_length=0,
            ks_p_value=None,
            shapiro_p_value=None,
        )
    )
    row = [line for line in format_report(results).splitlines() if line.startswith("polar")][0]
    assert row.split()[-4:] == ["-", "-", "-", "-"]


def test_save_results(tmp_path, small_experiment_config):
    results = run_experiment(small_experiment_config)
    written = save_results(results, tmp_path / "out")

    assert [p.name for p in written] == ["aggregates.csv", "trials.csv", "timings.csv"]
    aggregates = pd.read_csv(tmp_path / "out" / "aggregates.csv")
    assert len(aggregates) == 12
    trials = pd.read_csv(tmp_path / "out" / "trials.csv")
    assert len(trials) == 48
