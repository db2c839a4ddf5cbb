from .goodness_of_fit import ks_test, shapiro_test
from .harness import ExperimentHarness, run_experiment
from .records import AggregateResult, ExperimentResults, TrialRecord
from .report import format_report, save_results

__all__ = [
    "ks_test",
    "shapiro_test",
    "ExperimentHarness",
    "run_experiment",
    "AggregateResult",
    "ExperimentResults",
    "TrialRecord",
    "format_report",
    "save_results",
]
